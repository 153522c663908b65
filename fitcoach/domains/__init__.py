"""
Domain models for the FitCoach engine.

This package contains all the core domain models that represent the
business objects and value types in the system.
"""

from fitcoach.domains.enums import (
    Complexity,
    EntityKind,
    Intent,
    Mood,
    RequestKind,
    ResponseFormat,
    ResponseLength,
    SentimentLabel,
    TimeOfDay,
    Tone,
    Urgency,
)
from fitcoach.domains.analysis import (
    Entity,
    IntentAnalysis,
    SentimentResult,
    SpecificRequest,
)
from fitcoach.domains.interactions import ConversationTrends, Interaction
from fitcoach.domains.patterns import (
    GoalProgress,
    MoodPattern,
    ResponsePreference,
    UserPattern,
)
from fitcoach.domains.profile import (
    CoachingContext,
    NutritionEntry,
    UserProfile,
    WorkoutSession,
)
from fitcoach.domains.responses import BaseRecommendation, ResponsePayload
