"""
Response domain models.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field

from fitcoach.domains.analysis import IntentAnalysis


class BaseRecommendation(BaseModel):
    """Draft response produced by a base recommendation provider."""
    content: str = Field(..., description="Draft response text")
    suggestions: List[str] = Field(default_factory=list)
    action: Optional[str] = None
    data: Optional[Any] = None
    confidence: Optional[float] = None
    personalized: Optional[bool] = None


class ResponsePayload(BaseModel):
    """Final response returned to the caller."""
    content: str
    suggestions: List[str] = Field(
        default_factory=list, description="At most six suggestions")
    action: Optional[str] = None
    data: Optional[Any] = None
    confidence: float = Field(..., ge=0.0, le=1.0)
    personalized: bool = False
    predictions: List[str] = Field(default_factory=list)
    analysis: Optional[IntentAnalysis] = None
