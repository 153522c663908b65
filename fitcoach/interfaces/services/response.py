from abc import ABC, abstractmethod
from typing import Optional

from fitcoach.domains.profile import CoachingContext
from fitcoach.domains.responses import ResponsePayload
from fitcoach.interfaces.providers.recommendation import RecommendationProvider


class ResponseService(ABC):
    """Interface for producing personalized responses."""

    @abstractmethod
    def respond(
        self,
        message: str,
        session_id: str,
        context: Optional[CoachingContext] = None,
        provider: Optional[RecommendationProvider] = None,
        satisfaction: Optional[float] = None,
    ) -> ResponsePayload:
        """Process a user message and return the response payload."""
        pass
