"""
Feedback models for MockMate

Defines the micro-feedback record produced after each answer.
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from src.models.common import utcnow


class FeedbackFlag(str, Enum):
    """Observations attached to a piece of feedback."""

    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    VAGUE = "VAGUE"
    EXCELLENT = "EXCELLENT"
    NEEDS_CLARIFICATION = "NEEDS_CLARIFICATION"
    OFF_TOPIC = "OFF_TOPIC"


class Feedback(BaseModel):
    """Feedback for a single answer."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    answer_id: str | None = None

    # Content
    message: str
    score: int = Field(..., ge=1, le=5, description="Answer score (1-5)")
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    flags: list[FeedbackFlag] = Field(default_factory=list)

    # Partial feedback is replaced later by a full analysis pass
    partial: bool = True
    refinement_scheduled: bool = False

    # Timing
    created_at: datetime = Field(default_factory=utcnow)
    refined_at: datetime | None = None
