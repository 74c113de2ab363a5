"""
Feedback Engine for MockMate

Produces quick, partial feedback for an answer from observable metrics.
A later analysis pass (transcription, AI scoring) is expected to replace
it; that pass is not part of this engine.
"""

import logging

from src.models.feedback import Feedback, FeedbackFlag

logger = logging.getLogger(__name__)


# Duration buckets (milliseconds)
SHORT_ANSWER_MS = 30_000
OPTIMAL_MIN_MS = 60_000
OPTIMAL_MAX_MS = 180_000
LONG_ANSWER_MS = 300_000

# Indexed by score - 1
SCORE_MESSAGES = (
    "Good answer! Clear and well-articulated.",
    "Nice explanation! I appreciate the detail.",
    "Great response! You covered the key points.",
    "Solid answer! Good use of examples.",
    "Excellent! Very comprehensive response.",
)


class FeedbackEngine:
    """
    Heuristic feedback generator.

    Scoring is deterministic and depends only on answer duration:

        < 30s         score 2, TOO_SHORT
        30s - 60s     score 3
        60s - 180s    score 4, well structured
        180s - 300s   score 3
        > 300s        score 3, TOO_LONG
    """

    def generate_feedback(self, duration_ms: int, answer_id: str | None = None) -> Feedback:
        """
        Generate partial feedback from answer duration.

        Args:
            duration_ms: Answer duration in milliseconds
            answer_id: Answer the feedback belongs to

        Returns:
            Feedback marked as partial
        """
        score = 3
        strengths: list[str] = []
        improvements: list[str] = []
        flags: list[FeedbackFlag] = []

        if duration_ms < SHORT_ANSWER_MS:
            score = 2
            improvements.append("Try to elaborate more on your answer")
            improvements.append("Provide specific examples to illustrate your points")
            flags.append(FeedbackFlag.TOO_SHORT)
        elif duration_ms > LONG_ANSWER_MS:
            improvements.append("Try to be more concise")
            improvements.append("Focus on the most relevant points")
            flags.append(FeedbackFlag.TOO_LONG)
        elif OPTIMAL_MIN_MS <= duration_ms <= OPTIMAL_MAX_MS:
            score = 4
            strengths.append("Good answer length")
            strengths.append("Well-structured response")

        message = SCORE_MESSAGES[min(score - 1, len(SCORE_MESSAGES) - 1)]

        logger.debug(f"Heuristic feedback for {duration_ms}ms answer: score={score}")

        return Feedback(
            answer_id=answer_id,
            message=message,
            score=score,
            strengths=strengths,
            improvements=improvements,
            flags=flags,
            partial=True,
            refinement_scheduled=False,
        )

    async def generate_full_feedback(
        self,
        duration_ms: int,
        answer_id: str | None = None,
        transcription: str | None = None,
    ) -> Feedback:
        """
        Full feedback entry point for asynchronous strategies.

        Falls back to the duration heuristic until a transcription-based
        scorer is plugged in.
        """
        return self.generate_feedback(duration_ms, answer_id=answer_id)
