"""
Pattern learning service implementation.

This service learns per-session preferences from completed interactions
(favorite exercises, common foods, workout times, moods by time of day and
the preferred response shape per context) and uses them to reshape
responses, suggest follow-ups and predict needs.
"""
import logging
import random
from collections import Counter
from datetime import datetime
from typing import Callable, ContextManager, Dict, List, Optional, Sequence

from fitcoach.domains.enums import (
    Mood,
    ResponseFormat,
    ResponseLength,
    TimeOfDay,
    Tone,
)
from fitcoach.domains.interactions import Interaction
from fitcoach.domains.patterns import (
    GoalProgress,
    MoodPattern,
    ResponsePreference,
    UserPattern,
)
from fitcoach.interfaces.providers.session_store import SessionStore
from fitcoach.interfaces.services.patterns import (
    PatternLearningService as PatternLearningServiceInterface,
)
from fitcoach.repositories.session_store import InMemorySessionStore
from fitcoach.services.nlp import count_present

logger = logging.getLogger(__name__)

DEFAULT_MAX_INTERACTIONS = 100

EXERCISE_KEYWORDS = [
    "squat", "deadlift", "bench", "press", "row", "pull", "push",
    "curl", "extension", "lunge", "plank", "crunch", "sit-up",
    "burpee", "jump", "run", "walk", "bike", "swim",
]

FOOD_KEYWORDS = [
    "chicken", "beef", "fish", "salmon", "egg", "milk", "cheese",
    "rice", "pasta", "bread", "potato", "apple", "banana", "orange",
    "broccoli", "spinach", "carrot", "tomato", "onion", "garlic",
]

TRIGGER_WORDS = [
    "tired", "stressed", "excited", "motivated", "frustrated",
    "hungry", "thirsty", "sore", "energized", "focused",
]

# Ties go to the later tone.
TONE_LEXICONS: Dict[Tone, List[str]] = {
    Tone.MOTIVATIONAL: ["amazing", "incredible", "crush", "dominate", "champion", "fire", "energy"],
    Tone.TECHNICAL: ["calories", "protein", "macros", "bmr", "tdee", "metabolism", "scientific"],
    Tone.CASUAL: ["cool", "awesome", "nice", "yeah", "sure", "okay", "great"],
    Tone.SUPPORTIVE: ["support", "help", "together", "believe", "proud", "encourage", "care"],
}

TONE_DECORATIONS: Dict[Tone, List[str]] = {
    Tone.MOTIVATIONAL: ["💪", "🔥", "🎯", "🚀", "💯", "Let's go!", "You've got this!", "Crush it!"],
    Tone.TECHNICAL: ["**Scientific Analysis:**", "**Evidence-based breakdown:**"],
    Tone.CASUAL: ["Hey!", "So,", "Alright!"],
    Tone.SUPPORTIVE: ["I'm here to support you!", "We're in this together!"],
}

ADDITIONAL_DETAILS = (
    "\n\n**Additional Details:**\n"
    "This approach is based on scientific research and proven methods for optimal results."
)

MOOD_VALUES: Dict[str, float] = {
    Mood.STRUGGLING.value: 0.2,
    Mood.NEUTRAL.value: 0.5,
    Mood.MOTIVATED.value: 0.7,
    Mood.EXCITED.value: 0.9,
}

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def time_of_day(moment: datetime) -> str:
    hour = moment.hour
    if hour < 6:
        return TimeOfDay.EARLY_MORNING.value
    if hour < 12:
        return TimeOfDay.MORNING.value
    if hour < 17:
        return TimeOfDay.AFTERNOON.value
    if hour < 21:
        return TimeOfDay.EVENING.value
    return TimeOfDay.NIGHT.value


def day_of_week(moment: datetime) -> str:
    return WEEKDAYS[moment.weekday()]


def keywords_in(text: str, keywords: List[str]) -> List[str]:
    lowered = (text or "").lower()
    return [keyword for keyword in keywords if keyword in lowered]


def most_common(values: Sequence[str]) -> Optional[str]:
    if not values:
        return None
    return Counter(values).most_common(1)[0][0]


def split_sentences(text: str) -> List[str]:
    return [sentence.strip() for sentence in text.split(".") if sentence.strip()]


class PatternLearningService(PatternLearningServiceInterface):
    """Service for learning per-session user patterns."""

    def __init__(
        self,
        store: Optional[SessionStore] = None,
        max_interactions: int = DEFAULT_MAX_INTERACTIONS,
        chooser: Optional[Callable[[Sequence[str]], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the pattern learning service.

        Args:
            store: Session store holding each session's UserPattern
            max_interactions: Size of the per-session interaction log
            chooser: Picks a tone decoration; defaults to ``random.choice``
            clock: Returns the current time for predictions
        """
        if max_interactions < 1:
            raise ValueError("max_interactions must be at least 1")
        self.store = store if store is not None else InMemorySessionStore()
        self.max_interactions = max_interactions
        self.chooser = chooser or random.choice
        self.clock = clock or datetime.now

    def lock(self, session_id: str) -> ContextManager:
        return self.store.lock(session_id)

    def has_pattern(self, session_id: str) -> bool:
        return session_id in self.store

    def get_pattern(self, session_id: str) -> Optional[UserPattern]:
        pattern = self.store.get(session_id)
        return pattern.model_copy(deep=True) if pattern is not None else None

    def recent_messages(self, session_id: str, limit: int = 10) -> List[str]:
        pattern = self.store.get(session_id)
        if pattern is None or limit <= 0:
            return []
        return [entry.user_message for entry in pattern.interaction_log[-limit:]]

    def learn(self, session_id: str, interaction: Interaction) -> None:
        """Update the session's pattern from a completed interaction.

        Args:
            session_id: Session the interaction belongs to
            interaction: Completed turn
        """
        with self.store.lock(session_id):
            pattern = self.store.get(session_id)
            if pattern is None:
                logger.info(f"Creating user pattern for session {session_id}")
                pattern = UserPattern()

            pattern.interaction_log.append(interaction)
            if len(pattern.interaction_log) > self.max_interactions:
                del pattern.interaction_log[: len(pattern.interaction_log) - self.max_interactions]

            context = interaction.context_tag.lower()
            bucket = time_of_day(interaction.timestamp)

            if "workout" in context:
                for exercise in keywords_in(interaction.user_message, EXERCISE_KEYWORDS):
                    if exercise not in pattern.favorite_exercises:
                        pattern.favorite_exercises.append(exercise)
                pattern.preferred_workout_times.append(bucket)

            if "nutrition" in context or "food" in context:
                for food in keywords_in(interaction.user_message, FOOD_KEYWORDS):
                    if food not in pattern.common_foods:
                        pattern.common_foods.append(food)

            pattern.mood_patterns.append(
                MoodPattern(
                    time_of_day=bucket,
                    day_of_week=day_of_week(interaction.timestamp),
                    mood=interaction.mood,
                    triggers=keywords_in(interaction.user_message, TRIGGER_WORDS),
                )
            )

            candidate = self.preference_from_response(
                interaction.context_tag, interaction.ai_response
            )
            existing = pattern.preference_for(interaction.context_tag)
            if existing is None:
                pattern.response_preferences.append(candidate)
            elif interaction.satisfaction > 0.7:
                existing.preferred_tone = candidate.preferred_tone
                existing.preferred_length = candidate.preferred_length
                existing.preferred_format = candidate.preferred_format
                logger.debug(
                    f"Updated {interaction.context_tag} preference for session {session_id}"
                )

            self.store.put(session_id, pattern)

    def preference_from_response(self, context_tag: str, response: str) -> ResponsePreference:
        return ResponsePreference(
            context_tag=context_tag,
            preferred_tone=self.tone_of(response),
            preferred_length=self.length_of(response),
            preferred_format=self.format_of(response),
        )

    def tone_of(self, response: str) -> Tone:
        lowered = (response or "").lower()
        best_tone, best_count = Tone.MOTIVATIONAL, -1
        for tone, words in TONE_LEXICONS.items():
            hits = count_present(lowered, words)
            if hits >= best_count:
                best_tone, best_count = tone, hits
        return best_tone

    def length_of(self, response: str) -> ResponseLength:
        word_count = len((response or "").split())
        if word_count < 50:
            return ResponseLength.SHORT
        if word_count < 150:
            return ResponseLength.MEDIUM
        return ResponseLength.DETAILED

    def format_of(self, response: str) -> ResponseFormat:
        response = response or ""
        if "•" in response or "-" in response:
            return ResponseFormat.BULLET
        if "1." in response or "Step" in response:
            return ResponseFormat.STEP_BY_STEP
        return ResponseFormat.PARAGRAPH

    def adapt(self, session_id: str, context_tag: str, mood: str, base_text: str) -> str:
        """Reshape a response with the learned preference for a context.

        Tone decoration is applied first, then length, then format. Without
        a stored preference the text is returned unchanged.
        """
        pattern = self.store.get(session_id)
        preference = pattern.preference_for(context_tag) if pattern else None
        if preference is None:
            return base_text

        text = f"{self.chooser(TONE_DECORATIONS[preference.preferred_tone])} {base_text}"

        if preference.preferred_length == ResponseLength.SHORT:
            text = ".".join(text.split(".")[:2]) + "."
        elif preference.preferred_length == ResponseLength.DETAILED:
            text = f"{text}{ADDITIONAL_DETAILS}"

        if preference.preferred_format == ResponseFormat.BULLET:
            text = "\n".join(f"• {sentence}" for sentence in split_sentences(text))
        elif preference.preferred_format == ResponseFormat.STEP_BY_STEP:
            text = "\n".join(
                f"{index}. {sentence}"
                for index, sentence in enumerate(split_sentences(text), start=1)
            )

        return text

    def predict(self, session_id: str) -> List[str]:
        """Predict what the user may need at the current time.

        Returns:
            Mood-based, workout-time and food predictions, in that order
        """
        pattern = self.store.get(session_id)
        if pattern is None:
            return []

        predictions: List[str] = []
        now = self.clock()
        bucket = time_of_day(now)
        weekday = day_of_week(now)

        matching = [
            mood for mood in pattern.mood_patterns
            if mood.time_of_day == bucket and mood.day_of_week == weekday
        ][-5:]
        if matching:
            average = sum(MOOD_VALUES.get(m.mood, 0.5) for m in matching) / len(matching)
            if average < 0.3:
                predictions.append("You might need some motivation today")
                predictions.append("Let's start with something manageable")
            elif average > 0.7:
                predictions.append("You're in a great mood - perfect for a challenging workout!")
                predictions.append("Let's channel that energy into something amazing!")

        if most_common(pattern.preferred_workout_times) == bucket:
            predictions.append("It's your usual workout time - ready to get started?")

        if pattern.common_foods:
            predictions.append(f"How about some {pattern.common_foods[0]} for your next meal?")

        return predictions

    def suggestions_for(self, session_id: str, context_tag: str) -> List[str]:
        pattern = self.store.get(session_id)
        if pattern is None:
            return []

        suggestions: List[str] = []
        if context_tag == "workout":
            for exercise in pattern.favorite_exercises[:3]:
                suggestions.append(f"Add {exercise} to your workout")
            preferred_time = most_common(pattern.preferred_workout_times)
            if preferred_time:
                suggestions.append(
                    f"Workout in the {preferred_time.replace('_', ' ')} (your preferred time)"
                )
        elif context_tag == "nutrition":
            for food in pattern.common_foods[:3]:
                suggestions.append(f"Add {food} to your meal")
        return suggestions

    def track_goal(
        self, session_id: str, goal: str, current_value: float, target_value: float
    ) -> GoalProgress:
        """Create or update progress towards a goal.

        Args:
            session_id: Session owning the goal
            goal: Goal name
            current_value: Latest measured value
            target_value: Value at which the goal is reached

        Returns:
            Copy of the updated goal progress
        """
        with self.store.lock(session_id):
            pattern = self.store.get(session_id) or UserPattern()
            now = self.clock()
            entry = next((g for g in pattern.goal_progress if g.goal == goal), None)
            if entry is None:
                entry = GoalProgress(goal=goal, start_date=now)
                pattern.goal_progress.append(entry)

            previous_progress = entry.progress
            entry.current_value = current_value
            entry.target_value = target_value
            if target_value > 0:
                entry.progress = min(max(current_value / target_value, 0.0), 1.0)
            else:
                entry.progress = 0.0

            if 0 < entry.progress < 1:
                elapsed = now - entry.start_date
                entry.estimated_completion = entry.start_date + elapsed / entry.progress
            elif entry.progress >= 1:
                if previous_progress < 1 or entry.estimated_completion is None:
                    entry.estimated_completion = now
            else:
                entry.estimated_completion = None

            self.store.put(session_id, pattern)
            return entry.model_copy()

    def delete(self, session_id: str) -> None:
        with self.store.lock(session_id):
            self.store.delete(session_id)
        logger.info(f"Deleted learned patterns for session {session_id}")
