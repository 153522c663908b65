from abc import ABC, abstractmethod
from typing import List, Optional

from fitcoach.domains.interactions import Interaction
from fitcoach.domains.patterns import GoalProgress, UserPattern


class PatternLearningService(ABC):
    """Interface for learning and applying user patterns."""

    @abstractmethod
    def learn(self, session_id: str, interaction: Interaction) -> None:
        """Update the session's pattern from a completed interaction."""
        pass

    @abstractmethod
    def adapt(self, session_id: str, context_tag: str, mood: str, base_text: str) -> str:
        """Reshape a response according to the learned preference."""
        pass

    @abstractmethod
    def predict(self, session_id: str) -> List[str]:
        """Predict what the user is likely to need right now."""
        pass

    @abstractmethod
    def suggestions_for(self, session_id: str, context_tag: str) -> List[str]:
        """Personalized suggestions for a coarse context."""
        pass

    @abstractmethod
    def has_pattern(self, session_id: str) -> bool:
        """Whether anything has been learned for a session."""
        pass

    @abstractmethod
    def get_pattern(self, session_id: str) -> Optional[UserPattern]:
        """Get a copy of the learned pattern."""
        pass

    @abstractmethod
    def track_goal(
        self, session_id: str, goal: str, current_value: float, target_value: float
    ) -> GoalProgress:
        """Create or update progress towards a goal."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Forget everything learned for a session."""
        pass
