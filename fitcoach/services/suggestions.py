"""
Smart suggestion engine.

Builds context-aware suggestions from the time of day, the user's goal,
recent workouts, today's nutrition log, mood and the entities in the
current message.
"""
import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from fitcoach.domains.analysis import IntentAnalysis
from fitcoach.domains.enums import EntityKind, Mood
from fitcoach.domains.profile import CoachingContext

logger = logging.getLogger(__name__)

MAX_SMART_SUGGESTIONS = 8


def local_naive(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive ones pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


class SuggestionEngine:
    """Generates smart, context-aware suggestions."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or datetime.now

    def generate(
        self,
        context: Optional[CoachingContext],
        analysis: IntentAnalysis,
        mood: str = Mood.NEUTRAL.value,
        now: Optional[datetime] = None,
    ) -> List[str]:
        """Generate up to eight suggestions.

        Args:
            context: Profile and log snapshot
            analysis: Analysis of the current message
            mood: Current user mood
            now: Reference time, defaults to the engine clock

        Returns:
            Suggestions grouped by time, goal, workouts, nutrition, mood
            and entities, in that order
        """
        context = context or CoachingContext()
        now = local_naive(now or self.clock())
        suggestions: List[str] = []

        hour = now.hour
        if 6 <= hour < 10:
            suggestions.append("Start your day with a morning workout!")
            suggestions.append("Log your breakfast for better tracking")
        elif 12 <= hour < 14:
            suggestions.append("Perfect time for a lunch workout!")
            suggestions.append("Track your lunch to stay on target")
        elif 17 <= hour < 20:
            suggestions.append("Evening workout time - let's go!")
            suggestions.append("Plan your dinner for optimal recovery")

        goal = (context.profile.target_physique or "").lower() if context.profile else ""
        if "muscle" in goal or "strength" in goal:
            suggestions.append("Focus on compound movements today")
            suggestions.append("Increase your protein intake")
        elif "lean" in goal or "fat" in goal:
            suggestions.append("Add some cardio to your routine")
            suggestions.append("Track your calorie deficit")
        elif "endurance" in goal or "cardio" in goal:
            suggestions.append("Try interval training today")
            suggestions.append("Focus on your breathing")

        week_ago = now - timedelta(days=7)
        recent_workouts = [
            w for w in context.workout_history if local_naive(w.date) > week_ago
        ]
        if not recent_workouts:
            suggestions.append("Let's get back on track with a workout!")
            suggestions.append("Start with something simple and build momentum")
        elif len(recent_workouts) >= 3:
            suggestions.append("You're crushing it! Keep the momentum going!")
            suggestions.append("Time to increase the intensity?")

        todays_meals = [
            n for n in context.nutrition_log if local_naive(n.date).date() == now.date()
        ]
        if not todays_meals:
            suggestions.append("Start tracking your meals today")
            suggestions.append("Log your first meal to begin")
        elif len(todays_meals) < 3:
            suggestions.append("Keep logging your meals for better insights")
            suggestions.append("Add your next meal to complete the day")

        if mood == Mood.STRUGGLING.value:
            suggestions.append("Let's start with something manageable")
            suggestions.append("I'm here to support you every step")
            suggestions.append("Small steps lead to big changes")
        elif mood == Mood.EXCITED.value:
            suggestions.append("Channel that energy into a challenging workout!")
            suggestions.append("Let's set some ambitious goals!")
            suggestions.append("You're unstoppable right now!")

        for entity in analysis.entities:
            if entity.kind == EntityKind.EXERCISE:
                suggestions.append(f"Master your {entity.value} form")
                suggestions.append(f"Increase {entity.value} intensity")
            elif entity.kind == EntityKind.FOOD:
                suggestions.append(f"Optimize your {entity.value} portions")
                suggestions.append(f"Try different {entity.value} preparations")

        logger.debug(f"Generated {len(suggestions)} smart suggestions")
        return suggestions[:MAX_SMART_SUGGESTIONS]
