"""
Read-only snapshots of the user's profile and logs.

The engine never mutates these; they are passed through to the base
recommendation provider and used for a few context-shaping helpers.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    """User profile snapshot."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    target_physique: Optional[str] = Field(
        None, description="Goal physique, e.g. 'lean athlete'")


class WorkoutSession(BaseModel):
    """Completed workout."""

    model_config = ConfigDict(extra="allow")

    date: datetime
    name: Optional[str] = None


class NutritionEntry(BaseModel):
    """Logged food entry."""

    model_config = ConfigDict(extra="allow")

    date: datetime
    food: Optional[str] = None
    calories: float = 0.0
    protein: float = 0.0


class CoachingContext(BaseModel):
    """Everything the caller knows about the user for this turn."""
    profile: Optional[UserProfile] = None
    workout_history: List[WorkoutSession] = Field(default_factory=list)
    nutrition_log: List[NutritionEntry] = Field(default_factory=list)
