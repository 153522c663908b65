from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from fitcoach.domains.interactions import ConversationTrends, Interaction
from fitcoach.domains.patterns import GoalProgress
from fitcoach.domains.profile import CoachingContext
from fitcoach.domains.responses import ResponsePayload


class FitCoach(ABC):
    """Interface for the FitCoach client."""

    @abstractmethod
    def process(
        self,
        session_id: str,
        message: str,
        context: Optional[Union[CoachingContext, Dict[str, Any]]] = None,
        satisfaction: Optional[float] = None,
    ) -> ResponsePayload:
        """Process a user message."""
        pass

    @abstractmethod
    def history(self, session_id: str) -> List[Interaction]:
        """Get the conversation history of a session."""
        pass

    @abstractmethod
    def trends(self, session_id: str) -> ConversationTrends:
        """Get conversation trends of a session."""
        pass

    @abstractmethod
    def predict(self, session_id: str) -> List[str]:
        """Get predicted needs of a session."""
        pass

    @abstractmethod
    def smart_suggestions(
        self,
        session_id: str,
        message: str,
        context: Optional[Union[CoachingContext, Dict[str, Any]]] = None,
    ) -> List[str]:
        """Get time, goal and history aware suggestions for a message."""
        pass

    @abstractmethod
    def track_goal(
        self, session_id: str, goal: str, current_value: float, target_value: float
    ) -> GoalProgress:
        """Track progress towards a goal."""
        pass

    @abstractmethod
    def delete_session(self, session_id: str) -> None:
        """Forget everything about a session."""
        pass
