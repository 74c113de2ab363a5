"""
Adaptation Engine for MockMate

Decides what comes after an answer has been processed: the next question,
a checkpoint, or the end of the interview.

Index semantics: ``question_index`` is the 0-based ordinal of the question
that was just answered. It is evaluated after feedback and before the
ordinal advances, so with the default interval a checkpoint fires at
indexes 4, 9, 14... (after the 5th, 10th, 15th answer).
"""

from pydantic import BaseModel, Field

from src.models.feedback import Feedback
from src.models.interview import NextAction

DEFAULT_CHECKPOINT_INTERVAL = 5


class AdaptationDecision(BaseModel):
    """Decision about what the interview does next."""

    action: NextAction
    reason: str
    confidence: float = Field(..., ge=0, le=1)


class AdaptationEngine:
    """Pure decision function over interview progress."""

    def __init__(self, checkpoint_interval: int = DEFAULT_CHECKPOINT_INTERVAL):
        if checkpoint_interval < 1:
            raise ValueError("checkpoint_interval must be >= 1")
        self.checkpoint_interval = checkpoint_interval

    def decide(
        self,
        question_index: int,
        total_questions: int,
        last_feedback: Feedback | None = None,
    ) -> AdaptationDecision:
        """
        Decide the next macro-action.

        Rules, first match wins:
        1. Last question answered -> COMPLETE
        2. Every ``checkpoint_interval`` answers -> CHECKPOINT
        3. Otherwise -> NEXT_QUESTION
        """
        if question_index >= total_questions - 1:
            return AdaptationDecision(
                action=NextAction.COMPLETE,
                reason="All questions completed",
                confidence=1.0,
            )

        answered = question_index + 1
        if question_index > 0 and answered % self.checkpoint_interval == 0:
            return AdaptationDecision(
                action=NextAction.CHECKPOINT,
                reason=f"Periodic checkpoint (after question {answered})",
                confidence=0.9,
            )

        return AdaptationDecision(
            action=NextAction.NEXT_QUESTION,
            reason="Continue to next question",
            confidence=0.95,
        )

    def should_checkpoint(self, question_index: int, total_questions: int) -> bool:
        return self.decide(question_index, total_questions).action == NextAction.CHECKPOINT

    def should_complete(self, question_index: int, total_questions: int) -> bool:
        return self.decide(question_index, total_questions).action == NextAction.COMPLETE


def update_confidence_trend(current: float, score: int, smoothing: float = 0.3) -> float:
    """
    Fold a 1-5 answer score into the running confidence trend.

    A score of 3 is neutral; the result is an exponential moving average
    kept within [-1, 1].
    """
    signal = (score - 3) / 2
    trend = (1 - smoothing) * current + smoothing * signal
    return max(-1.0, min(1.0, round(trend, 4)))
