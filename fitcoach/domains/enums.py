"""
Common enumerations used across the FitCoach engine.
"""
from enum import Enum


class EntityKind(str, Enum):
    """Kinds of entities extracted from a message."""
    EXERCISE = "exercise"
    FOOD = "food"
    BODY_PART = "body_part"
    NUMBER = "number"
    TIME = "time"


class RequestKind(str, Enum):
    """Kinds of specific requests derived from entities."""
    EXERCISE = "exercise"
    FOOD = "food"
    BODY_PART = "body_part"
    QUANTITY = "quantity"


class SentimentLabel(str, Enum):
    """Overall sentiment of a message."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Intent(str, Enum):
    """Classified purpose of a user message."""
    GENERATE_WORKOUT = "generate_workout"
    MODIFY_WORKOUT = "modify_workout"
    HARDER_WORKOUT = "harder_workout"
    EASIER_WORKOUT = "easier_workout"
    WORKOUT_ADVICE = "workout_advice"
    TRACK_FOOD = "track_food"
    CREATE_MEAL_PLAN = "create_meal_plan"
    ANALYZE_MACROS = "analyze_macros"
    NUTRITION_ADVICE = "nutrition_advice"
    ANALYZE_PROGRESS = "analyze_progress"
    PROVIDE_MOTIVATION = "provide_motivation"
    PROVIDE_EXPLANATION = "provide_explanation"
    SCHEDULE_ADVICE = "schedule_advice"
    GOAL_SETTING = "goal_setting"
    ANSWER_QUESTION = "answer_question"
    GENERAL_ADVICE = "general_advice"


class Urgency(str, Enum):
    """How quickly the user expects help."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Complexity(str, Enum):
    """How involved the answer needs to be."""
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class Mood(str, Enum):
    """User mood tracked across interactions."""
    STRUGGLING = "struggling"
    NEUTRAL = "neutral"
    MOTIVATED = "motivated"
    EXCITED = "excited"


class Tone(str, Enum):
    """Preferred tone of a coaching reply."""
    MOTIVATIONAL = "motivational"
    TECHNICAL = "technical"
    CASUAL = "casual"
    SUPPORTIVE = "supportive"


class ResponseLength(str, Enum):
    """Preferred length of a coaching reply."""
    SHORT = "short"
    MEDIUM = "medium"
    DETAILED = "detailed"


class ResponseFormat(str, Enum):
    """Preferred layout of a coaching reply."""
    BULLET = "bullet"
    PARAGRAPH = "paragraph"
    STEP_BY_STEP = "step-by-step"


class TimeOfDay(str, Enum):
    """Coarse time-of-day buckets."""
    EARLY_MORNING = "early_morning"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"
