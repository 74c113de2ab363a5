"""
Report models for MockMate

Defines the structure of the end-of-interview summary.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from src.models.interview import CategoryScore


class RecommendationPriority(str, Enum):
    """How urgently a recommendation should be acted on."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Recommendation(BaseModel):
    """A specific improvement recommendation."""

    title: str
    description: str
    priority: RecommendationPriority = RecommendationPriority.MEDIUM


class InterviewSummary(BaseModel):
    """Final summary for a completed interview."""

    interview_id: str

    # Scores (1-5 scale, matching per-answer feedback)
    overall_score: float = Field(..., ge=0, le=5)
    category_scores: list[CategoryScore] = Field(default_factory=list)

    # Qualitative feedback
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    standout_moments: list[str] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)

    # Coverage
    answered_questions: int = 0
    checkpoints: int = 0

    completed_at: datetime | None = None
    partial: bool = False
