"""
Data models and schemas for MockMate

Contains Pydantic models for:
- Interview sessions, answers and checkpoints
- Questions
- Feedback
- Final summaries
"""

from src.models.interview import (
    InterviewSession,
    InterviewState,
    InterviewEvent,
    NextAction,
    Answer,
    AnswerStatus,
    ResponseMetrics,
    Checkpoint,
    CategoryScore,
)
from src.models.question import Question, QuestionCategory, QuestionDifficulty
from src.models.feedback import Feedback, FeedbackFlag
from src.models.report import (
    InterviewSummary,
    Recommendation,
    RecommendationPriority,
)

__all__ = [
    # Interview
    "InterviewSession",
    "InterviewState",
    "InterviewEvent",
    "NextAction",
    "Answer",
    "AnswerStatus",
    "ResponseMetrics",
    "Checkpoint",
    "CategoryScore",
    # Question
    "Question",
    "QuestionCategory",
    "QuestionDifficulty",
    # Feedback
    "Feedback",
    "FeedbackFlag",
    # Report
    "InterviewSummary",
    "Recommendation",
    "RecommendationPriority",
]
