"""
Question Engine for MockMate

Serves questions by position from a fixed, ordered question bank.
"""

import logging
from typing import Sequence

from src.core.errors import NoMoreQuestions
from src.models.feedback import Feedback
from src.models.question import Question, QuestionCategory, QuestionDifficulty

logger = logging.getLogger(__name__)


DEFAULT_QUESTION_BANK: tuple[Question, ...] = (
    Question(
        id="q1",
        text="Can you tell me about your most recent experience in software development?",
        category=QuestionCategory.BEHAVIORAL,
        difficulty=QuestionDifficulty.EASY,
        expected_signals=("experience", "achievements", "learnings"),
        estimated_duration=120,
    ),
    Question(
        id="q2",
        text="What was the biggest technical challenge you faced on your last project?",
        category=QuestionCategory.TECHNICAL,
        difficulty=QuestionDifficulty.MEDIUM,
        expected_signals=("problem_solving", "technical_depth", "impact"),
        estimated_duration=150,
    ),
    Question(
        id="q3",
        text="How do you handle high-pressure situations or tight deadlines?",
        category=QuestionCategory.BEHAVIORAL,
        difficulty=QuestionDifficulty.MEDIUM,
        expected_signals=("stress_management", "prioritization", "communication"),
        estimated_duration=120,
    ),
    Question(
        id="q4",
        text="Describe a project where you had to learn a new technology. How did you approach it?",
        category=QuestionCategory.PROBLEM_SOLVING,
        difficulty=QuestionDifficulty.MEDIUM,
        expected_signals=("learning_ability", "initiative", "resourcefulness"),
        estimated_duration=150,
    ),
    Question(
        id="q5",
        text="Which tools and practices do you use to keep code quality high?",
        category=QuestionCategory.TECHNICAL,
        difficulty=QuestionDifficulty.MEDIUM,
        expected_signals=("testing", "code_quality", "best_practices"),
        estimated_duration=120,
    ),
    Question(
        id="q6",
        text="Tell me about a time you had to give constructive feedback to a teammate.",
        category=QuestionCategory.COMMUNICATION,
        difficulty=QuestionDifficulty.HARD,
        expected_signals=("empathy", "communication", "leadership"),
        estimated_duration=150,
    ),
    Question(
        id="q7",
        text="How do you prioritize work when several projects are urgent at once?",
        category=QuestionCategory.PROBLEM_SOLVING,
        difficulty=QuestionDifficulty.MEDIUM,
        expected_signals=("prioritization", "decision_making", "impact_awareness"),
        estimated_duration=120,
    ),
    Question(
        id="q8",
        text="Describe your experience with distributed systems or microservice architectures.",
        category=QuestionCategory.TECHNICAL,
        difficulty=QuestionDifficulty.HARD,
        expected_signals=("scalability", "system_design", "trade_offs"),
        estimated_duration=180,
    ),
    Question(
        id="q9",
        text="What motivates you to keep growing professionally?",
        category=QuestionCategory.BEHAVIORAL,
        difficulty=QuestionDifficulty.EASY,
        expected_signals=("motivation", "career_goals", "passion"),
        estimated_duration=120,
    ),
    Question(
        id="q10",
        text="Do you have any questions for me about the company or the role?",
        category=QuestionCategory.COMMUNICATION,
        difficulty=QuestionDifficulty.EASY,
        expected_signals=("curiosity", "engagement", "preparation"),
        estimated_duration=120,
    ),
)


class QuestionEngine:
    """
    Positional question provider.

    Ordering of the bank is the contract: ordinal ``n`` always returns the
    same question. There is no adaptive re-ranking.
    """

    def __init__(self, questions: Sequence[Question] | None = None):
        """
        Initialize the question engine.

        Args:
            questions: Ordered question bank (defaults to the built-in bank)
        """
        self._questions = tuple(questions) if questions is not None else DEFAULT_QUESTION_BANK
        if not self._questions:
            raise ValueError("Question bank must not be empty")

    def get_question(self, index: int) -> Question:
        """
        Get a question by 0-based ordinal.

        Raises:
            NoMoreQuestions: If the ordinal is outside the bank
        """
        if index < 0 or index >= len(self._questions):
            raise NoMoreQuestions(index, len(self._questions))
        return self._questions[index]

    def get_total_questions(self) -> int:
        return len(self._questions)

    def has_more_questions(self, index: int) -> bool:
        return 0 <= index < len(self._questions)

    def get_by_id(self, question_id: str) -> Question | None:
        """Look up a question by id."""
        for question in self._questions:
            if question.id == question_id:
                return question
        return None

    def select_next(self, index: int, last_feedback: Feedback | None = None) -> Question:
        """Select the question to ask at an ordinal (positional for now)."""
        return self.get_question(index)
