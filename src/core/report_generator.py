"""
Report Generator for MockMate

Builds the aggregate views of an interview:
- periodic checkpoints shown every few answers
- the final summary of a completed interview
"""

import logging
from collections import Counter

from src.models.feedback import FeedbackFlag
from src.models.interview import Answer, CategoryScore, Checkpoint, InterviewSession
from src.models.report import (
    InterviewSummary,
    Recommendation,
    RecommendationPriority,
)

logger = logging.getLogger(__name__)

UNCATEGORIZED = "GENERAL"


class ReportGenerator:
    """
    Aggregates per-answer feedback into checkpoints and summaries.

    All scores stay on the 1-5 feedback scale.
    """

    # =========================================================================
    # CHECKPOINTS
    # =========================================================================

    def build_checkpoint(self, session: InterviewSession) -> Checkpoint:
        """
        Build a checkpoint for the answers given so far.

        Args:
            session: Session whose current question was just answered

        Returns:
            New Checkpoint (not yet attached to the session)
        """
        scored = self._scored_answers(session)
        score = self._average(session.get_answer_scores())

        return Checkpoint(
            session_id=session.id,
            question_index=session.current_question_index,
            score=score,
            category_breakdown=self._category_breakdown(scored),
            message=self._checkpoint_message(score),
            insights=self._checkpoint_insights(session, scored),
        )

    def _checkpoint_message(self, score: float) -> str:
        if score >= 4:
            return "You're doing great! Keep up this level of detail."
        elif score >= 3:
            return "Solid progress so far. Let's keep going."
        return "Good effort so far. Try to give fuller answers in the next block."

    def _checkpoint_insights(
        self,
        session: InterviewSession,
        scored: list[Answer],
    ) -> list[str]:
        insights = []

        optimal = sum(1 for a in scored if a.feedback.score >= 4)
        insights.append(f"{optimal} of {len(scored)} answers had an optimal length")

        flags = self._flag_counts(scored)
        if flags[FeedbackFlag.TOO_SHORT]:
            insights.append(f"{flags[FeedbackFlag.TOO_SHORT]} answers were too short")
        if flags[FeedbackFlag.TOO_LONG]:
            insights.append(f"{flags[FeedbackFlag.TOO_LONG]} answers ran too long")

        if session.confidence_trend > 0.2:
            insights.append("Your answers are trending stronger")
        elif session.confidence_trend < -0.2:
            insights.append("Your recent answers have been weaker; slow down and add examples")

        return insights

    # =========================================================================
    # FINAL SUMMARY
    # =========================================================================

    def generate_summary(self, session: InterviewSession) -> InterviewSummary:
        """
        Generate the final summary for a completed interview.

        Args:
            session: Completed interview session

        Returns:
            InterviewSummary
        """
        scored = self._scored_answers(session)
        overall = self._average(session.get_answer_scores())

        summary = InterviewSummary(
            interview_id=session.id,
            overall_score=overall,
            category_scores=self._category_breakdown(scored),
            strengths=self._collect(a.feedback.strengths for a in scored),
            improvements=self._collect(a.feedback.improvements for a in scored),
            standout_moments=[
                f"Strong answer to question {a.question_id}"
                for a in scored
                if a.feedback.score >= 4
            ][:3],
            recommendations=self._recommendations(scored, overall),
            answered_questions=len(session.answers),
            checkpoints=len(session.checkpoint_history),
            completed_at=session.completed_at,
            partial=any(a.feedback.partial for a in scored),
        )

        logger.info(f"Generated summary for {session.id}: overall={overall}")
        return summary

    def _recommendations(self, scored: list[Answer], overall: float) -> list[Recommendation]:
        recommendations = []
        flags = self._flag_counts(scored)

        if flags[FeedbackFlag.TOO_SHORT]:
            recommendations.append(Recommendation(
                title="Expand your answers",
                description="Aim for one to three minutes and back each point with a concrete example.",
                priority=RecommendationPriority.HIGH,
            ))
        if flags[FeedbackFlag.TOO_LONG]:
            recommendations.append(Recommendation(
                title="Tighten your answers",
                description="Lead with the key point and keep answers under five minutes.",
                priority=RecommendationPriority.MEDIUM,
            ))
        if overall >= 4:
            recommendations.append(Recommendation(
                title="Keep practising at this level",
                description="Your answers are well paced; try harder question sets next.",
                priority=RecommendationPriority.LOW,
            ))

        return recommendations

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _scored_answers(self, session: InterviewSession) -> list[Answer]:
        return [a for a in session.answers if a.feedback is not None]

    def _category_breakdown(self, scored: list[Answer]) -> list[CategoryScore]:
        by_category: dict[str, list[int]] = {}
        for answer in scored:
            category = answer.category.value if answer.category else UNCATEGORIZED
            by_category.setdefault(category, []).append(answer.feedback.score)

        total = len(scored)
        return [
            CategoryScore(
                category=category,
                score=self._average(scores),
                weight=round(len(scores) / total, 2),
            )
            for category, scores in by_category.items()
        ]

    def _flag_counts(self, scored: list[Answer]) -> Counter:
        return Counter(flag for a in scored for flag in a.feedback.flags)

    def _collect(self, groups) -> list[str]:
        """Flatten lists of strings, keeping first-seen order without duplicates."""
        seen: dict[str, None] = {}
        for group in groups:
            for item in group:
                seen.setdefault(item, None)
        return list(seen)

    def _average(self, scores: list[int]) -> float:
        if not scores:
            return 0.0
        return round(sum(scores) / len(scores), 2)
