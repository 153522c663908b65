from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from fitcoach.domains.profile import NutritionEntry, UserProfile, WorkoutSession
from fitcoach.domains.responses import BaseRecommendation


class RecommendationProvider(ABC):
    """Interface for base recommendation providers."""

    @abstractmethod
    def generate(
        self,
        message: str,
        profile: Optional[UserProfile],
        workout_history: List[WorkoutSession],
        nutrition_log: List[NutritionEntry],
        session_id: str,
    ) -> Union[BaseRecommendation, Dict[str, Any]]:
        """Produce a draft response for a message. May raise."""
        pass
