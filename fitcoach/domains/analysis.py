"""
Message analysis domain models.

These models describe the structured interpretation of a single user
message: extracted entities, sentiment and the classified intent.
"""
from typing import List, Union
from pydantic import BaseModel, Field

from fitcoach.domains.enums import (
    Complexity,
    EntityKind,
    Intent,
    RequestKind,
    SentimentLabel,
    Urgency,
)


class Entity(BaseModel):
    """Typed token extracted from free text."""
    kind: EntityKind = Field(..., description="Entity kind")
    value: Union[float, str] = Field(
        ..., description="Canonical value (float for numbers)")
    raw_text: str = Field(..., description="Matched surface text")
    confidence: float = Field(..., description="Match confidence",
                              ge=0.0, le=1.0)


class SentimentResult(BaseModel):
    """Sentiment verdict for a message."""
    label: SentimentLabel = Field(SentimentLabel.NEUTRAL,
                                  description="Winning sentiment label")
    confidence: float = Field(0.5, description="Ratio of the winning lexicon",
                              ge=0.0, le=1.0)
    intensity: float = Field(0.5, description="Strength of the wording",
                             ge=0.0, le=1.0)


class SpecificRequest(BaseModel):
    """Concrete thing the user asked about."""
    kind: RequestKind
    value: Union[float, str]
    confidence: float = Field(..., ge=0.0, le=1.0)


class IntentAnalysis(BaseModel):
    """Structured interpretation of a user message."""
    primary_intent: Intent = Field(..., description="Primary intent")
    secondary_intents: List[Intent] = Field(
        default_factory=list, description="Additional intents, any subset")
    entities: List[Entity] = Field(default_factory=list)
    sentiment: SentimentResult = Field(default_factory=SentimentResult)
    specific_requests: List[SpecificRequest] = Field(default_factory=list)
    urgency: Urgency = Field(Urgency.LOW)
    complexity: Complexity = Field(Complexity.SIMPLE)
    confidence: float = Field(..., description="Classification confidence",
                              ge=0.0, le=1.0)
