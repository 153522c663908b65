"""
Factory for creating and wiring components of the FitCoach engine.

This module handles the creation and dependency injection for all
services and stores used by the engine.
"""

import importlib
import logging
import random
from typing import Any, Dict, Optional

# Service imports
from fitcoach.services.intent import IntentClassificationService
from fitcoach.services.memory import ConversationMemoryService
from fitcoach.services.nlp import TextAnalysisService
from fitcoach.services.patterns import PatternLearningService
from fitcoach.services.response import ResponseService

# Repository imports
from fitcoach.repositories.session_store import InMemorySessionStore

# Adapter and interface imports
from fitcoach.adapters.rule_based_provider import RuleBasedRecommendationProvider
from fitcoach.interfaces.providers.recommendation import RecommendationProvider

# Setup logger for this module
logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_CLASS = (
    "fitcoach.adapters.rule_based_provider.RuleBasedRecommendationProvider"
)


class FitCoachFactory:
    """Factory for creating and wiring components of the FitCoach engine."""

    @staticmethod
    def _create_store(section: Dict[str, Any]) -> InMemorySessionStore:
        """Creates a session store from a config section."""
        return InMemorySessionStore(
            max_sessions=int(section.get("max_sessions", 1000)),
            ttl=section.get("session_ttl"),
        )

    @staticmethod
    def _create_provider(
        provider_config: Dict[str, Any],
        intent_service: IntentClassificationService,
    ) -> RecommendationProvider:
        """Instantiates the base recommendation provider from configuration."""
        class_path = provider_config.get("class", DEFAULT_PROVIDER_CLASS)
        options = provider_config.get("config", {})

        if class_path == DEFAULT_PROVIDER_CLASS:
            return RuleBasedRecommendationProvider(
                intent_service=intent_service, config=options
            )

        try:
            module_path, class_name = class_path.rsplit(".", 1)
            module = importlib.import_module(module_path)
            provider_class = getattr(module, class_name)
        except (ImportError, AttributeError, ValueError) as e:
            logger.error(f"Error loading provider class '{class_path}': {e}")
            raise ValueError(f"Cannot load recommendation provider '{class_path}'") from e

        if not (
            isinstance(provider_class, type)
            and issubclass(provider_class, RecommendationProvider)
        ):
            raise ValueError(f"'{class_path}' is not a RecommendationProvider")

        provider = provider_class(config=options)
        logger.info(f"Successfully loaded recommendation provider: {class_path}")
        return provider

    @staticmethod
    def create_from_config(config: Optional[Dict[str, Any]] = None) -> ResponseService:
        """Create the engine from configuration.

        Args:
            config: Configuration dictionary; every section is optional

        Returns:
            Configured ResponseService instance
        """
        config = config or {}
        for section in ("memory", "patterns", "provider"):
            if section in config and not isinstance(config[section], dict):
                raise ValueError(f"Config section '{section}' must be a dictionary.")

        memory_config = config.get("memory", {})
        pattern_config = config.get("patterns", {})

        # Create services
        text_analysis_service = TextAnalysisService()
        intent_service = IntentClassificationService(
            text_analysis_service=text_analysis_service
        )

        memory_service = ConversationMemoryService(
            store=FitCoachFactory._create_store(memory_config),
            max_interactions=int(memory_config.get("max_interactions", 50)),
        )

        chooser = None
        if pattern_config.get("seed") is not None:
            chooser = random.Random(pattern_config["seed"]).choice
            logger.info("Using seeded tone decoration chooser")

        pattern_service = PatternLearningService(
            store=FitCoachFactory._create_store(pattern_config),
            max_interactions=int(pattern_config.get("max_interactions", 100)),
            chooser=chooser,
        )

        provider = FitCoachFactory._create_provider(
            config.get("provider", {}), intent_service
        )

        logger.info(
            f"Created FitCoach engine (memory cap {memory_service.max_interactions}, "
            f"pattern log cap {pattern_service.max_interactions}, "
            f"provider {type(provider).__name__})"
        )

        return ResponseService(
            intent_service=intent_service,
            memory_service=memory_service,
            pattern_service=pattern_service,
            recommendation_provider=provider,
        )
