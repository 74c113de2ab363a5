"""
Capability interfaces for the orchestrator's pluggable collaborators.

Any collaborator method may return its result directly or as an awaitable;
the orchestrator awaits it inside the session lock, so a strategy that
calls out to a transcription or scoring service does not change the
per-event contract.
"""

from typing import Awaitable, Protocol, TypeVar, Union

from src.core.adaptation_engine import AdaptationDecision
from src.models.feedback import Feedback
from src.models.question import Question

T = TypeVar("T")

MaybeAwaitable = Union[T, Awaitable[T]]


class QuestionProvider(Protocol):  # Positional question source
    def get_question(self, index: int) -> MaybeAwaitable[Question]: ...

    def get_total_questions(self) -> int: ...


class FeedbackGenerator(Protocol):  # Per-answer scorer
    def generate_feedback(
        self, duration_ms: int, answer_id: str | None = None
    ) -> MaybeAwaitable[Feedback]: ...


class AdaptationStrategy(Protocol):  # Next-step decision maker
    def decide(
        self,
        question_index: int,
        total_questions: int,
        last_feedback: Feedback | None = None,
    ) -> MaybeAwaitable[AdaptationDecision]: ...

