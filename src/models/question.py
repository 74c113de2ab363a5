"""
Question models for MockMate
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionCategory(str, Enum):
    """High-level question categories."""

    TECHNICAL = "TECHNICAL"
    BEHAVIORAL = "BEHAVIORAL"
    PROBLEM_SOLVING = "PROBLEM_SOLVING"
    COMMUNICATION = "COMMUNICATION"


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class Question(BaseModel):
    """A single interview question from the question bank."""

    model_config = ConfigDict(frozen=True)

    # Identification
    id: str = Field(..., description="Unique question ID")

    # Content
    text: str = Field(..., description="The question text")

    # Classification
    category: QuestionCategory = Field(..., description="Question category")
    difficulty: QuestionDifficulty = Field(..., description="Difficulty level")

    # Evaluation guidance
    expected_signals: tuple[str, ...] = Field(
        default=(),
        description="Signals a strong answer is expected to show"
    )

    # Timing
    estimated_duration: int = Field(
        default=120, gt=0,
        description="Estimated answer time in seconds"
    )
