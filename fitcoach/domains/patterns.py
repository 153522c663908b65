"""
Learned user pattern domain models.

A UserPattern is created lazily for a session on its first learned
interaction and grows additively for the life of the session.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from fitcoach.domains.enums import ResponseFormat, ResponseLength, Tone
from fitcoach.domains.interactions import Interaction


class MoodPattern(BaseModel):
    """Mood observed at a given time of day and weekday."""
    time_of_day: str
    day_of_week: str
    mood: str
    triggers: List[str] = Field(default_factory=list)


class ResponsePreference(BaseModel):
    """Response shape preferred for one context tag."""
    context_tag: str
    preferred_tone: Tone
    preferred_length: ResponseLength
    preferred_format: ResponseFormat


class GoalProgress(BaseModel):
    """Progress towards a numeric goal."""
    goal: str = Field(..., description="Goal name")
    start_date: datetime = Field(default_factory=datetime.now)
    current_value: float = 0.0
    target_value: float = 0.0
    progress: float = Field(0.0, ge=0.0, le=1.0)
    estimated_completion: Optional[datetime] = None


class UserPattern(BaseModel):
    """Everything learned about one session."""
    favorite_exercises: List[str] = Field(default_factory=list)
    common_foods: List[str] = Field(default_factory=list)
    preferred_workout_times: List[str] = Field(default_factory=list)
    mood_patterns: List[MoodPattern] = Field(default_factory=list)
    response_preferences: List[ResponsePreference] = Field(
        default_factory=list)
    goal_progress: List[GoalProgress] = Field(default_factory=list)
    interaction_log: List[Interaction] = Field(default_factory=list)

    def preference_for(self, context_tag: str) -> Optional[ResponsePreference]:
        for preference in self.response_preferences:
            if preference.context_tag == context_tag:
                return preference
        return None
