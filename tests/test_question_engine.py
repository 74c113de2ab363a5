import pytest

from src.core.errors import NoMoreQuestions
from src.core.question_engine import DEFAULT_QUESTION_BANK, QuestionEngine
from src.models.question import Question, QuestionCategory, QuestionDifficulty


def test_default_bank_is_ordered() -> None:
    engine = QuestionEngine()

    assert engine.get_total_questions() == 10
    assert [engine.get_question(i).id for i in range(10)] == [f"q{i}" for i in range(1, 11)]


def test_past_the_end_raises() -> None:
    with pytest.raises(NoMoreQuestions) as exc_info:
        QuestionEngine().get_question(10)

    assert exc_info.value.index == 10
    assert exc_info.value.total == 10
    assert exc_info.value.code == "NO_MORE_QUESTIONS"


def test_negative_ordinal_raises() -> None:
    with pytest.raises(NoMoreQuestions):
        QuestionEngine().get_question(-1)


def test_has_more_questions() -> None:
    engine = QuestionEngine()

    assert engine.has_more_questions(0)
    assert engine.has_more_questions(9)
    assert not engine.has_more_questions(10)


def test_custom_bank() -> None:
    bank = [
        Question(
            id="sql-1",
            text="How would you find duplicate rows in a table?",
            category=QuestionCategory.TECHNICAL,
            difficulty=QuestionDifficulty.EASY,
        )
    ]
    engine = QuestionEngine(bank)

    assert engine.get_total_questions() == 1
    assert engine.select_next(0).id == "sql-1"
    assert engine.get_by_id("sql-1").text.startswith("How would you")
    assert engine.get_by_id("q1") is None


def test_empty_bank_rejected() -> None:
    with pytest.raises(ValueError):
        QuestionEngine([])


def test_questions_are_immutable() -> None:
    with pytest.raises(Exception):
        DEFAULT_QUESTION_BANK[0].text = "changed"
