from abc import ABC, abstractmethod
from typing import ContextManager, List

from fitcoach.domains.interactions import ConversationTrends, Interaction


class ConversationMemoryService(ABC):
    """Interface for per-session conversation memory."""

    @abstractmethod
    def record(self, session_id: str, interaction: Interaction) -> None:
        """Append an interaction to the session log."""
        pass

    @abstractmethod
    def history(self, session_id: str) -> List[Interaction]:
        """Get every retained interaction, oldest first."""
        pass

    @abstractmethod
    def recent_context(self, session_id: str, limit: int = 5) -> List[Interaction]:
        """Get the most recent interactions, oldest first."""
        pass

    @abstractmethod
    def trends(self, session_id: str) -> ConversationTrends:
        """Aggregate satisfaction, intents and moods for a session."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Forget a session."""
        pass

    @abstractmethod
    def lock(self, session_id: str) -> ContextManager:
        """Lock serializing a session's turns."""
        pass
