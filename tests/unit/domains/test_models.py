"""
Tests for the FitCoach domain models.

This module tests validation rules and helpers of the pydantic models,
using both standard pytest tests and property-based testing with hypothesis.
"""
import pytest
from datetime import datetime
from hypothesis import given, strategies as st
from pydantic import ValidationError

from fitcoach.domains import (
    CoachingContext,
    Entity,
    EntityKind,
    GoalProgress,
    Interaction,
    IntentAnalysis,
    Intent,
    ResponseFormat,
    ResponseLength,
    ResponsePayload,
    ResponsePreference,
    SentimentLabel,
    SentimentResult,
    Tone,
    UserPattern,
    UserProfile,
)


# ---------------------
# Fixtures
# ---------------------

@pytest.fixture
def basic_interaction():
    """Return a basic interaction for testing."""
    return Interaction(
        timestamp=datetime(2025, 3, 10, 8, 0),
        user_message="Create a new workout",
        ai_response="Here you go",
        context_tag="workout_help",
        intent="generate_workout",
    )


# ---------------------
# Tests
# ---------------------

def test_interaction_defaults(basic_interaction):
    assert basic_interaction.mood == "neutral"
    assert basic_interaction.satisfaction == 0.5
    assert basic_interaction.entities == []


def test_interaction_is_immutable(basic_interaction):
    with pytest.raises(ValidationError):
        basic_interaction.satisfaction = 0.9


@given(st.floats(allow_nan=False).filter(lambda x: x < 0 or x > 1))
def test_interaction_rejects_out_of_range_satisfaction(value):
    with pytest.raises(ValidationError):
        Interaction(
            user_message="hi",
            ai_response="hello",
            context_tag="general",
            intent="general_advice",
            satisfaction=value,
        )


def test_entity_confidence_range():
    with pytest.raises(ValidationError):
        Entity(kind=EntityKind.NUMBER, value=1.0, raw_text="1", confidence=1.5)


def test_sentiment_defaults():
    sentiment = SentimentResult()

    assert sentiment.label == SentimentLabel.NEUTRAL
    assert sentiment.confidence == 0.5
    assert sentiment.intensity == 0.5


def test_intent_analysis_serializes_enum_values():
    analysis = IntentAnalysis(primary_intent=Intent.TRACK_FOOD, confidence=0.65)

    dumped = analysis.model_dump(mode="json")

    assert dumped["primary_intent"] == "track_food"
    assert dumped["urgency"] == "low"
    assert dumped["complexity"] == "simple"


def test_response_format_value():
    assert ResponseFormat.STEP_BY_STEP.value == "step-by-step"


def test_payload_confidence_range():
    with pytest.raises(ValidationError):
        ResponsePayload(content="x", confidence=1.2)


def test_user_pattern_preference_for():
    pattern = UserPattern(
        response_preferences=[
            ResponsePreference(
                context_tag="workout",
                preferred_tone=Tone.CASUAL,
                preferred_length=ResponseLength.SHORT,
                preferred_format=ResponseFormat.BULLET,
            )
        ]
    )

    assert pattern.preference_for("workout").preferred_tone == Tone.CASUAL
    assert pattern.preference_for("nutrition") is None


def test_goal_progress_defaults():
    goal = GoalProgress(goal="run 5k")

    assert goal.progress == 0.0
    assert goal.estimated_completion is None


def test_coaching_context_from_dict():
    context = CoachingContext.model_validate(
        {
            "profile": {"target_physique": "strong", "age": 30},
            "nutrition_log": [{"date": "2025-03-10T12:00:00", "food": "rice", "calories": 200}],
        }
    )

    assert isinstance(context.profile, UserProfile)
    assert context.profile.target_physique == "strong"
    assert context.nutrition_log[0].calories == 200
    assert context.workout_history == []
