"""
Simplified client interface for the FitCoach engine.

This module provides a clean API for end users to talk to the coaching
engine without dealing with internal wiring details.
"""

import importlib.util
import json
import logging
from typing import Any, Dict, List, Optional, Union

from fitcoach.domains.interactions import ConversationTrends, Interaction
from fitcoach.domains.patterns import GoalProgress
from fitcoach.domains.profile import CoachingContext
from fitcoach.domains.responses import ResponsePayload
from fitcoach.factories.engine_factory import FitCoachFactory
from fitcoach.interfaces.client.client import FitCoach as FitCoachInterface
from fitcoach.interfaces.providers.recommendation import RecommendationProvider
from fitcoach.services.response import mood_from_sentiment
from fitcoach.services.suggestions import SuggestionEngine

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Dict[str, Any]:
    """Load a configuration dictionary from a JSON or Python file."""
    with open(config_path, "r") as f:
        if config_path.endswith(".json"):
            return json.load(f)

    # Assume it's a Python file exposing a ``config`` dictionary
    spec = importlib.util.spec_from_file_location("config", config_path)
    config_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config_module)
    return config_module.config


class FitCoach(FitCoachInterface):
    """Simplified client interface for the coaching engine."""

    def __init__(self, config_path: Optional[str] = None, config: Optional[Dict[str, Any]] = None):
        """Initialize the engine from a config file or dictionary.

        Args:
            config_path: Path to configuration file (JSON or Python)
            config: Configuration dictionary; defaults are used when neither
                argument is given
        """
        if config_path:
            config = load_config(config_path)

        self.response_service = FitCoachFactory.create_from_config(config or {})
        self.suggestion_engine = SuggestionEngine()

    @staticmethod
    def _check_session(session_id: str) -> None:
        if not session_id or not session_id.strip():
            raise ValueError("session_id must be a non-empty string")

    @staticmethod
    def _context(
        context: Optional[Union[CoachingContext, Dict[str, Any]]],
    ) -> CoachingContext:
        if context is None:
            return CoachingContext()
        if isinstance(context, CoachingContext):
            return context
        return CoachingContext.model_validate(context)

    def process(
        self,
        session_id: str,
        message: str,
        context: Optional[Union[CoachingContext, Dict[str, Any]]] = None,
        satisfaction: Optional[float] = None,
        provider: Optional[RecommendationProvider] = None,
    ) -> ResponsePayload:
        """Process a user message.

        Args:
            session_id: Conversation session ID
            message: User message
            context: Profile and log snapshot, as a model or a plain dict
            satisfaction: Optional feedback score in [0, 1] for this turn
            provider: Optional recommendation provider for this turn only

        Returns:
            The personalized response payload
        """
        self._check_session(session_id)
        if satisfaction is not None and not 0.0 <= satisfaction <= 1.0:
            raise ValueError("satisfaction must be between 0 and 1")

        return self.response_service.respond(
            message,
            session_id,
            context=self._context(context),
            provider=provider,
            satisfaction=satisfaction,
        )

    def history(self, session_id: str) -> List[Interaction]:
        self._check_session(session_id)
        return self.response_service.memory_service.history(session_id)

    def trends(self, session_id: str) -> ConversationTrends:
        self._check_session(session_id)
        return self.response_service.memory_service.trends(session_id)

    def predict(self, session_id: str) -> List[str]:
        self._check_session(session_id)
        return self.response_service.pattern_service.predict(session_id)

    def smart_suggestions(
        self,
        session_id: str,
        message: str,
        context: Optional[Union[CoachingContext, Dict[str, Any]]] = None,
    ) -> List[str]:
        """Get suggestions for a message without recording a turn."""
        self._check_session(session_id)
        analysis = self.response_service.intent_service.analyze(message or "")
        return self.suggestion_engine.generate(
            self._context(context),
            analysis,
            mood=mood_from_sentiment(analysis.sentiment),
        )

    def track_goal(
        self, session_id: str, goal: str, current_value: float, target_value: float
    ) -> GoalProgress:
        self._check_session(session_id)
        if not goal:
            raise ValueError("goal must be a non-empty string")
        return self.response_service.pattern_service.track_goal(
            session_id, goal, current_value, target_value
        )

    def delete_session(self, session_id: str) -> None:
        """Delete all memory and learned patterns of a session."""
        self._check_session(session_id)
        with self.response_service.memory_service.lock(session_id):
            self.response_service.memory_service.delete(session_id)
            self.response_service.pattern_service.delete(session_id)
        logger.info(f"Deleted session {session_id}")
