import pytest

from src.core.adaptation_engine import AdaptationEngine, update_confidence_trend
from src.models.interview import NextAction


@pytest.mark.parametrize(
    "index,expected",
    [
        (0, NextAction.NEXT_QUESTION),
        (2, NextAction.NEXT_QUESTION),
        (4, NextAction.CHECKPOINT),
        (5, NextAction.NEXT_QUESTION),
        (8, NextAction.NEXT_QUESTION),
        (9, NextAction.COMPLETE),
    ],
)
def test_decide_over_ten_questions(index, expected) -> None:
    assert AdaptationEngine().decide(index, 10).action == expected


def test_complete_wins_over_checkpoint() -> None:
    decision = AdaptationEngine().decide(9, 10)

    assert decision.action == NextAction.COMPLETE
    assert decision.confidence == 1.0
    assert decision.reason == "All questions completed"


def test_checkpoint_decision_details() -> None:
    decision = AdaptationEngine().decide(4, 10)

    assert decision.confidence == 0.9
    assert "question 5" in decision.reason


def test_next_question_confidence() -> None:
    assert AdaptationEngine().decide(1, 10).confidence == 0.95


def test_index_past_the_end_completes() -> None:
    assert AdaptationEngine().decide(12, 10).action == NextAction.COMPLETE


def test_custom_checkpoint_interval() -> None:
    engine = AdaptationEngine(checkpoint_interval=3)

    assert engine.should_checkpoint(2, 10)
    assert engine.should_checkpoint(5, 10)
    assert not engine.should_checkpoint(4, 10)


def test_interval_of_one_skips_first_question() -> None:
    engine = AdaptationEngine(checkpoint_interval=1)

    assert engine.decide(0, 10).action == NextAction.NEXT_QUESTION
    assert engine.decide(1, 10).action == NextAction.CHECKPOINT


def test_invalid_interval_rejected() -> None:
    with pytest.raises(ValueError):
        AdaptationEngine(checkpoint_interval=0)


def test_should_complete() -> None:
    engine = AdaptationEngine()

    assert engine.should_complete(9, 10)
    assert not engine.should_complete(8, 10)


def test_confidence_trend_moves_towards_score() -> None:
    assert update_confidence_trend(0.0, 5) == 0.3
    assert update_confidence_trend(0.0, 1) == -0.3
    assert update_confidence_trend(0.5, 3) == 0.35


def test_confidence_trend_stays_in_range() -> None:
    trend = 0.0
    for _ in range(50):
        trend = update_confidence_trend(trend, 5, smoothing=1.0)
    assert trend == 1.0

    assert update_confidence_trend(-1.0, 1) == -1.0
