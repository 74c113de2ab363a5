"""
Interview session and state models for MockMate
"""

from datetime import datetime, timedelta
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from src.models.common import utcnow
from src.models.feedback import Feedback
from src.models.question import QuestionCategory


class InterviewState(str, Enum):
    """Interview state machine states."""

    INTRO = "INTRO"
    QUESTION = "QUESTION"
    RECORDING = "RECORDING"
    PROCESSING = "PROCESSING"
    MICRO_FEEDBACK = "MICRO_FEEDBACK"
    CHECKPOINT = "CHECKPOINT"
    PAUSED = "PAUSED"

    # Terminal
    COMPLETED = "COMPLETED"
    ERROR = "ERROR"


class InterviewEvent(str, Enum):
    """Events that drive the interview state machine."""

    INTRO_DONE = "INTRO_DONE"
    START_RECORDING = "START_RECORDING"
    ANSWER_SUBMITTED = "ANSWER_SUBMITTED"
    PROCESSING_DONE = "PROCESSING_DONE"
    FEEDBACK_ACK = "FEEDBACK_ACK"
    CHECKPOINT_ACK = "CHECKPOINT_ACK"
    COMPLETE_INTERVIEW = "COMPLETE_INTERVIEW"
    PAUSE = "PAUSE"
    RESUME = "RESUME"


class NextAction(str, Enum):
    """Macro-action decided after an answer has been processed."""

    NEXT_QUESTION = "NEXT_QUESTION"
    CHECKPOINT = "CHECKPOINT"
    COMPLETE = "COMPLETE"


class AnswerStatus(str, Enum):
    """Processing status of a submitted answer."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


ACTIVE_EXCLUDED_STATES = frozenset({InterviewState.COMPLETED, InterviewState.ERROR})

RESUMABLE_STATES = frozenset({
    InterviewState.PAUSED,
    InterviewState.QUESTION,
    InterviewState.MICRO_FEEDBACK,
    InterviewState.CHECKPOINT,
})


class ResponseMetrics(BaseModel):
    """Observable metrics of a spoken answer."""

    duration_ms: int = Field(..., ge=0)
    silence_ratio: float = Field(default=0.0, ge=0, le=1)
    speech_pace: float = 0.0  # words per minute
    energy_level: float = Field(default=0.0, ge=0, le=1)
    word_count: int | None = None
    technical_terms: list[str] = Field(default_factory=list)


class Answer(BaseModel):
    """A single submitted answer."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    session_id: str
    question_id: str
    category: QuestionCategory | None = None
    audio_url: str
    duration_ms: int = Field(..., ge=0)
    status: AnswerStatus = AnswerStatus.PENDING

    transcription: str | None = None
    metrics: ResponseMetrics | None = None
    feedback: Feedback | None = None

    created_at: datetime = Field(default_factory=utcnow)


class CategoryScore(BaseModel):
    """Score for one question category."""

    category: str
    score: float = Field(..., ge=0, le=5)
    weight: float = Field(default=0.0, ge=0, le=1)


class Checkpoint(BaseModel):
    """Periodic progress summary shown between question blocks."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    session_id: str
    question_index: int = Field(..., ge=0)
    score: float = Field(..., ge=0, le=5)
    category_breakdown: list[CategoryScore] = Field(default_factory=list)
    message: str
    insights: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)


class InterviewSession(BaseModel):
    """Complete interview session state."""

    # Identification
    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    role_id: str
    blueprint_id: str = ""

    # State
    state: InterviewState = InterviewState.INTRO
    previous_state: InterviewState | None = None

    # Progress
    current_question_index: int = Field(default=0, ge=0)  # 0-based
    asked_questions: list[str] = Field(default_factory=list)
    total_questions: int = Field(default=10, ge=1)
    confidence_trend: float = Field(default=0.0, ge=-1, le=1)

    # Pending adaptation decision, consumed by the next FEEDBACK_ACK
    next_action: NextAction | None = None

    # History
    last_feedback: Feedback | None = None
    checkpoint_history: list[Checkpoint] = Field(default_factory=list)
    answers: list[Answer] = Field(default_factory=list)

    # Timing
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    last_heartbeat: datetime = Field(default_factory=utcnow)
    completed_at: datetime | None = None

    def model_post_init(self, __context) -> None:
        if not self.blueprint_id:
            self.blueprint_id = self.role_id

    @property
    def progress(self) -> float:
        """Fraction of the question bank already passed."""
        return self.current_question_index / self.total_questions

    def is_active(self) -> bool:
        """Check whether the session still counts as the user's active one."""
        return self.state not in ACTIVE_EXCLUDED_STATES

    def is_resumable(self) -> bool:
        """Check whether the session is in a state that can be resumed."""
        return self.state in RESUMABLE_STATES

    def is_expired(
        self,
        now: datetime | None = None,
        expiry_hours: float = 24.0,
    ) -> bool:
        """Check whether the heartbeat is older than the expiry window."""
        now = now or utcnow()
        return now - self.last_heartbeat > timedelta(hours=expiry_hours)

    def transition(self, new_state: InterviewState) -> None:
        """Move to a new state, remembering the one we came from."""
        self.previous_state = self.state
        self.state = new_state
        self.updated_at = utcnow()

    def touch_heartbeat(self) -> None:
        self.last_heartbeat = utcnow()

    def add_answer(self, answer: Answer) -> None:
        self.answers.append(answer)
        self.updated_at = utcnow()

    def update_feedback(self, feedback: Feedback) -> None:
        self.last_feedback = feedback
        self.updated_at = utcnow()

    def add_checkpoint(self, checkpoint: Checkpoint) -> None:
        self.checkpoint_history.append(checkpoint)
        self.updated_at = utcnow()

    def complete(self) -> None:
        """Mark the interview as finished."""
        if self.state != InterviewState.COMPLETED:
            self.transition(InterviewState.COMPLETED)
        self.completed_at = utcnow()
        self.next_action = None

    def get_answer_scores(self) -> list[int]:
        """Scores of every answer that has feedback, in answer order."""
        return [a.feedback.score for a in self.answers if a.feedback]

    def has_pending_answers(self) -> bool:
        """Check whether any answer is still being processed."""
        return any(
            a.status in (AnswerStatus.PENDING, AnswerStatus.PROCESSING)
            for a in self.answers
        )
