from src.core.errors import (
    CannotResume,
    InvalidTransition,
    NoMoreQuestions,
    NotReady,
    SessionNotFound,
)
from src.models.interview import InterviewEvent, InterviewState


def test_errors_serialize_with_code() -> None:
    error = InvalidTransition(InterviewState.PAUSED, InterviewEvent.PAUSE)

    assert error.to_dict() == {
        "error": "InvalidTransition",
        "code": "INVALID_STATE",
        "message": "Cannot transition from PAUSED with event PAUSE",
    }


def test_error_codes_are_distinct() -> None:
    errors = [
        SessionNotFound("s-1"),
        InvalidTransition(InterviewState.INTRO, InterviewEvent.PAUSE),
        CannotResume("expired"),
        NoMoreQuestions(10, 10),
        NotReady("not yet"),
    ]

    codes = [e.to_dict()["code"] for e in errors]

    assert codes == ["NOT_FOUND", "INVALID_STATE", "CANNOT_RESUME", "NO_MORE_QUESTIONS", "NOT_READY"]


def test_not_found_message_names_session() -> None:
    assert SessionNotFound("s-1").to_dict()["message"] == "Interview session s-1 not found"
