"""
Tests for the ResponseService orchestration.

This module tests the happy path, suggestion merging, personalization,
interaction recording and the provider failure fallback.
"""
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from fitcoach.domains.analysis import SentimentResult
from fitcoach.domains.enums import ResponseFormat, SentimentLabel
from fitcoach.domains.profile import CoachingContext, UserProfile
from fitcoach.domains.responses import BaseRecommendation
from fitcoach.services.intent import IntentClassificationService
from fitcoach.services.memory import ConversationMemoryService
from fitcoach.services.patterns import PatternLearningService
from fitcoach.services.response import (
    FALLBACK_CONTENT,
    FALLBACK_SUGGESTIONS,
    ResponseService,
    mood_from_sentiment,
)

NOW = datetime(2025, 3, 10, 8, 0)


# ---------------------
# Fixtures
# ---------------------

@pytest.fixture
def mock_provider():
    """Return a mock recommendation provider."""
    provider = MagicMock()
    provider.generate.return_value = BaseRecommendation(
        content="Here is your plan. Warm up first. Then lift.",
        suggestions=["One", "Two", "Three", "Four"],
        action="workout_help",
        data={"plan": "full body"},
    )
    return provider


@pytest.fixture
def response_service(mock_provider):
    """Return a response service wired with real services and a mock provider."""
    return ResponseService(
        intent_service=IntentClassificationService(),
        memory_service=ConversationMemoryService(),
        pattern_service=PatternLearningService(
            chooser=lambda options: options[0], clock=lambda: NOW
        ),
        recommendation_provider=mock_provider,
        clock=lambda: NOW,
    )


# ---------------------
# Happy path
# ---------------------

def test_first_turn(response_service, mock_provider):
    context = CoachingContext(profile=UserProfile(target_physique="lean"))

    payload = response_service.respond("Create a new workout", "s1", context=context)

    mock_provider.generate.assert_called_once_with(
        "Create a new workout", context.profile, [], [], "s1"
    )
    assert payload.content == "Here is your plan. Warm up first. Then lift."
    assert payload.action == "workout_help"
    assert payload.data == {"plan": "full body"}
    assert payload.personalized is False
    assert payload.suggestions[:4] == ["One", "Two", "Three", "Four"]
    assert payload.analysis.primary_intent.value == "generate_workout"
    assert payload.confidence == payload.analysis.confidence


def test_turn_is_recorded(response_service):
    response_service.respond("Create a new workout", "s1", satisfaction=0.9)

    history = response_service.memory_service.history("s1")
    assert len(history) == 1
    assert history[0].user_message == "Create a new workout"
    assert history[0].context_tag == "workout_help"
    assert history[0].intent == "generate_workout"
    assert history[0].satisfaction == 0.9
    assert history[0].timestamp == NOW
    assert response_service.pattern_service.has_pattern("s1")


def test_default_and_clamped_satisfaction(response_service):
    response_service.respond("hello", "s1")
    response_service.respond("hello", "s1", satisfaction=1.7)

    history = response_service.memory_service.history("s1")
    assert [entry.satisfaction for entry in history] == [0.5, 1.0]


def test_second_turn_is_personalized_and_adapted(response_service):
    response_service.respond("Create a new workout", "s1")

    payload = response_service.respond("Create a new workout", "s1")

    # The learned preference is a short paragraph, so the draft keeps two sentences.
    assert payload.personalized is True
    assert payload.content.endswith("Here is your plan. Warm up first.")
    assert payload.content != "Here is your plan. Warm up first. Then lift."


def test_suggestions_are_capped_at_six(response_service):
    payload = response_service.respond(
        "I'm frustrated, explain a detailed squat and bench workout for my legs asap",
        "s1",
    )

    assert len(payload.suggestions) == 6
    assert payload.suggestions[:4] == ["One", "Two", "Three", "Four"]


def test_pattern_suggestions_follow_contextual_ones(mock_provider):
    mock_provider.generate.return_value = BaseRecommendation(content="Ok", action="workout_help")
    service = ResponseService(
        IntentClassificationService(),
        ConversationMemoryService(),
        PatternLearningService(clock=lambda: NOW),
        mock_provider,
        clock=lambda: NOW,
    )
    service.respond("squat workout", "s1")

    payload = service.respond("which workout", "s1")

    assert payload.suggestions == [
        "Keep it simple and effective",
        "Focus on the basics",
        "Add squat to your workout",
        "Workout in the morning (your preferred time)",
    ]


def test_dict_recommendation_is_validated(response_service, mock_provider):
    mock_provider.generate.return_value = {"content": "Plain dict", "suggestions": ["A"]}

    payload = response_service.respond("hello", "s1")

    assert payload.content == "Plain dict"
    assert payload.suggestions[0] == "A"
    assert response_service.memory_service.history("s1")[0].context_tag == "general"


def test_override_provider(response_service, mock_provider):
    other = MagicMock()
    other.generate.return_value = BaseRecommendation(content="Other")

    payload = response_service.respond("hello", "s1", provider=other)

    assert payload.content == "Other"
    mock_provider.generate.assert_not_called()


def test_predictions_are_included(response_service):
    response_service.respond("squat workout", "s1")

    payload = response_service.respond("hello", "s1")

    assert "It's your usual workout time - ready to get started?" in payload.predictions


# ---------------------
# Fallback
# ---------------------

def test_provider_failure_returns_fallback(response_service, mock_provider):
    mock_provider.generate.side_effect = RuntimeError("provider down")

    payload = response_service.respond("Create a new workout", "s1")

    assert payload.content == FALLBACK_CONTENT
    assert payload.suggestions == FALLBACK_SUGGESTIONS
    assert payload.confidence == 0.3
    assert payload.personalized is False
    history = response_service.memory_service.history("s1")
    assert len(history) == 1
    assert history[0].ai_response == FALLBACK_CONTENT
    assert history[0].context_tag == "workout"


def test_fallback_keeps_paragraph_preference(response_service, mock_provider):
    mock_provider.generate.side_effect = RuntimeError("provider down")

    response_service.respond("Create a new workout", "s1")

    pattern = response_service.pattern_service.get_pattern("s1")
    preference = pattern.preference_for("workout")
    assert "-" not in FALLBACK_CONTENT
    assert preference.preferred_format == ResponseFormat.PARAGRAPH


def test_missing_provider_returns_fallback():
    service = ResponseService(
        IntentClassificationService(),
        ConversationMemoryService(),
        PatternLearningService(),
    )

    payload = service.respond("hello", "s1")

    assert payload.content == FALLBACK_CONTENT
    assert len(service.memory_service.history("s1")) == 1


def test_invalid_recommendation_returns_fallback(response_service, mock_provider):
    mock_provider.generate.return_value = {"suggestions": ["no content"]}

    payload = response_service.respond("hello", "s1")

    assert payload.content == FALLBACK_CONTENT


# ---------------------
# Mood
# ---------------------

@pytest.mark.parametrize(
    "label,intensity,mood",
    [
        (SentimentLabel.NEGATIVE, 0.9, "struggling"),
        (SentimentLabel.POSITIVE, 0.7, "excited"),
        (SentimentLabel.POSITIVE, 0.6, "motivated"),
        (SentimentLabel.NEUTRAL, 0.9, "neutral"),
    ],
)
def test_mood_from_sentiment(label, intensity, mood):
    sentiment = SentimentResult(label=label, confidence=1.0, intensity=intensity)

    assert mood_from_sentiment(sentiment) == mood
