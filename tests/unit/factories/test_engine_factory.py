"""
Tests for the FitCoachFactory.

This module tests engine wiring from configuration dictionaries.
"""
import random
import sys
import types

import pytest

from fitcoach.adapters.rule_based_provider import RuleBasedRecommendationProvider
from fitcoach.domains.responses import BaseRecommendation
from fitcoach.factories.engine_factory import FitCoachFactory
from fitcoach.interfaces.providers.recommendation import RecommendationProvider
from fitcoach.services.response import ResponseService


@pytest.fixture
def config_dict():
    """Fixture providing a full test configuration."""
    return {
        "memory": {"max_interactions": 20, "max_sessions": 10, "session_ttl": 600},
        "patterns": {"max_interactions": 30, "max_sessions": 5, "seed": 42},
        "provider": {
            "class": "fitcoach.adapters.rule_based_provider.RuleBasedRecommendationProvider",
            "config": {"max_suggestions": 3},
        },
    }


def test_create_with_defaults():
    engine = FitCoachFactory.create_from_config({})

    assert isinstance(engine, ResponseService)
    assert isinstance(engine.recommendation_provider, RuleBasedRecommendationProvider)
    assert engine.memory_service.max_interactions == 50
    assert engine.pattern_service.max_interactions == 100
    assert engine.memory_service.store.max_sessions == 1000
    assert engine.memory_service.store.ttl is None
    assert engine.pattern_service.chooser is random.choice


def test_create_with_none():
    assert isinstance(FitCoachFactory.create_from_config(None), ResponseService)


def test_create_from_full_config(config_dict):
    engine = FitCoachFactory.create_from_config(config_dict)

    assert engine.memory_service.max_interactions == 20
    assert engine.memory_service.store.max_sessions == 10
    assert engine.memory_service.store.ttl == 600
    assert engine.pattern_service.max_interactions == 30
    assert engine.pattern_service.store.max_sessions == 5
    assert engine.recommendation_provider.max_suggestions == 3
    assert engine.recommendation_provider.intent_service is engine.intent_service
    assert engine.memory_service.store is not engine.pattern_service.store


def test_seed_makes_decoration_deterministic(config_dict):
    first = FitCoachFactory.create_from_config(config_dict)
    second = FitCoachFactory.create_from_config(config_dict)
    options = ["a", "b", "c", "d", "e"]

    assert [first.pattern_service.chooser(options) for _ in range(10)] == [
        second.pattern_service.chooser(options) for _ in range(10)
    ]


class EchoProvider(RecommendationProvider):
    def __init__(self, config=None):
        self.config = config

    def generate(self, message, profile, workout_history, nutrition_log, session_id):
        return BaseRecommendation(content=message)


def test_custom_provider_class(monkeypatch):
    module = types.ModuleType("custom_providers")
    module.EchoProvider = EchoProvider
    monkeypatch.setitem(sys.modules, "custom_providers", module)

    engine = FitCoachFactory.create_from_config(
        {"provider": {"class": "custom_providers.EchoProvider", "config": {"x": 1}}}
    )

    assert isinstance(engine.recommendation_provider, EchoProvider)
    assert engine.recommendation_provider.config == {"x": 1}
    assert engine.respond("echo me", "s1").content == "echo me"


@pytest.mark.parametrize(
    "class_path",
    [
        "fitcoach.adapters.missing.Provider",
        "fitcoach.adapters.rule_based_provider.MissingProvider",
        "NoModulePath",
        "fitcoach.services.nlp.TextAnalysisService",
    ],
)
def test_invalid_provider_class(class_path):
    with pytest.raises(ValueError):
        FitCoachFactory.create_from_config({"provider": {"class": class_path}})


@pytest.mark.parametrize("section", ["memory", "patterns", "provider"])
def test_section_must_be_dict(section):
    with pytest.raises(ValueError):
        FitCoachFactory.create_from_config({section: "nope"})


def test_invalid_cap():
    with pytest.raises(ValueError):
        FitCoachFactory.create_from_config({"memory": {"max_interactions": 0}})
