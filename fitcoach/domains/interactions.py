"""
Conversation memory domain models.
"""
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from fitcoach.domains.analysis import Entity


class Interaction(BaseModel):
    """One completed conversational turn."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(
        default_factory=datetime.now, description="When the turn completed")
    user_message: str = Field(..., description="Raw user message")
    ai_response: str = Field(..., description="Response shown to the user")
    context_tag: str = Field(..., description="Coarse context of the turn")
    mood: str = Field("neutral", description="User mood at the time")
    satisfaction: float = Field(
        0.5, description="Satisfaction score", ge=0.0, le=1.0)
    entities: List[Entity] = Field(default_factory=list)
    intent: str = Field(..., description="Primary intent of the message")


class ConversationTrends(BaseModel):
    """Aggregated view of a session's interactions."""
    average_satisfaction: float = 0.5
    top_intents: List[str] = Field(default_factory=list)
    mood_sequence: List[str] = Field(default_factory=list)
    low_satisfaction_intents: List[str] = Field(default_factory=list)
