"""
Tests for the FitCoach client interface.

This module covers initialization from files and dictionaries, message
processing, session views, goal tracking and session deletion.
"""
import json
from datetime import datetime, timedelta

import pytest
from unittest.mock import MagicMock

from fitcoach.client.fitcoach import FitCoach
from fitcoach.domains.enums import Complexity, EntityKind, Intent, Urgency
from fitcoach.domains.responses import BaseRecommendation


@pytest.fixture
def config_dict():
    """Fixture providing test configuration."""
    return {
        "memory": {"max_interactions": 5},
        "patterns": {"seed": 7},
    }


@pytest.fixture
def coach(config_dict):
    """Return a client built from a config dictionary."""
    return FitCoach(config=config_dict)


# ---------------------
# Initialization
# ---------------------

def test_init_with_defaults():
    coach = FitCoach()

    assert coach.response_service.memory_service.max_interactions == 50


def test_init_with_config_dict(coach):
    assert coach.response_service.memory_service.max_interactions == 5


def test_init_with_json_file(tmp_path, config_dict):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_dict))

    coach = FitCoach(config_path=str(path))

    assert coach.response_service.memory_service.max_interactions == 5


def test_init_with_python_file(tmp_path):
    path = tmp_path / "config.py"
    path.write_text('config = {"patterns": {"max_interactions": 7}}\n')

    coach = FitCoach(config_path=str(path))

    assert coach.response_service.pattern_service.max_interactions == 7


def test_init_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FitCoach(config_path=str(tmp_path / "missing.json"))


# ---------------------
# Processing
# ---------------------

def test_end_to_end_question(coach):
    payload = coach.process("s1", "How many sets for chest and legs today?")

    analysis = payload.analysis
    assert analysis.primary_intent == Intent.ANSWER_QUESTION
    assert [(e.kind, e.value) for e in analysis.entities] == [
        (EntityKind.BODY_PART, "chest"),
        (EntityKind.BODY_PART, "legs"),
        (EntityKind.TIME, "today"),
    ]
    assert analysis.urgency == Urgency.MEDIUM
    assert analysis.complexity == Complexity.MODERATE
    assert payload.confidence == pytest.approx(0.8)
    assert payload.action == "general_help"
    assert payload.personalized is False
    assert payload.suggestions == [
        "Help with workouts",
        "Plan my meals",
        "Track my progress",
        "Get fitness advice",
        "Work on your chest",
        "Strengthen your chest",
    ]
    assert len(coach.history("s1")) == 1


def test_process_accepts_context_dict(coach):
    payload = coach.process(
        "s1",
        "Create a new workout",
        context={
            "profile": {"name": "Sam", "target_physique": "lean athlete"},
            "workout_history": [{"date": "2025-03-01T08:00:00"}],
        },
    )

    assert "lean athlete" in payload.content


def test_process_with_override_provider(coach):
    provider = MagicMock()
    provider.generate.return_value = BaseRecommendation(content="From elsewhere")

    payload = coach.process("s1", "hello", provider=provider)

    assert payload.content == "From elsewhere"


@pytest.mark.parametrize("session_id", ["", "   ", None])
def test_process_rejects_empty_session(coach, session_id):
    with pytest.raises(ValueError):
        coach.process(session_id, "hello")


@pytest.mark.parametrize("satisfaction", [-0.1, 1.5])
def test_process_rejects_bad_satisfaction(coach, satisfaction):
    with pytest.raises(ValueError):
        coach.process("s1", "hello", satisfaction=satisfaction)


def test_history_is_capped_by_config(coach):
    for index in range(8):
        coach.process("s1", f"message {index}")

    assert [i.user_message for i in coach.history("s1")] == [
        f"message {index}" for index in range(3, 8)
    ]


def test_trends(coach):
    coach.process("s1", "Log my food", satisfaction=0.2)
    coach.process("s1", "Log my food", satisfaction=0.8)

    trends = coach.trends("s1")

    assert trends.average_satisfaction == pytest.approx(0.5)
    assert trends.top_intents == ["track_food"]
    assert trends.low_satisfaction_intents == ["track_food"]


def test_predict_unknown_session(coach):
    assert coach.predict("nobody") == []


def test_smart_suggestions_do_not_record(coach):
    now = datetime.now()
    suggestions = coach.smart_suggestions(
        "s1",
        "I crushed my squats",
        context={"workout_history": [{"date": (now - timedelta(days=1)).isoformat()}]},
    )

    assert 0 < len(suggestions) <= 8
    assert coach.history("s1") == []


def test_smart_suggestions_accept_utc_dates(coach):
    suggestions = coach.smart_suggestions(
        "s1",
        "squats",
        context={
            "workout_history": [{"date": "2025-03-09T10:00:00Z"}],
            "nutrition_log": [{"date": "2025-03-09T12:00:00+02:00", "food": "rice"}],
        },
    )

    assert 0 < len(suggestions) <= 8


def test_track_goal(coach):
    progress = coach.track_goal("s1", "bench 100kg", 50, 100)

    assert progress.progress == 0.5
    with pytest.raises(ValueError):
        coach.track_goal("s1", "", 1, 2)


def test_delete_session(coach):
    coach.process("s1", "squat workout")
    coach.track_goal("s1", "bench 100kg", 50, 100)

    coach.delete_session("s1")

    assert coach.history("s1") == []
    assert not coach.response_service.pattern_service.has_pattern("s1")
    assert coach.process("s1", "hello").personalized is False
