"""
FitCoach - Conversational intent analysis and adaptive personalization for a fitness coach.

This package understands free-text fitness messages, remembers each
conversation, learns per-user response preferences and reshapes draft
coaching responses accordingly.
"""

# Client interface (main entry point)
from fitcoach.client.fitcoach import FitCoach

# Factory for creating the engine
from fitcoach.factories.engine_factory import FitCoachFactory

# Extension points
from fitcoach.interfaces.providers.recommendation import RecommendationProvider
from fitcoach.interfaces.providers.session_store import SessionStore
from fitcoach.adapters.rule_based_provider import RuleBasedRecommendationProvider

# Package metadata
__all__ = [
    # Main client interfaces
    "FitCoach",
    # Factories
    "FitCoachFactory",
    # Extension points
    "RecommendationProvider",
    "SessionStore",
    "RuleBasedRecommendationProvider",
]
