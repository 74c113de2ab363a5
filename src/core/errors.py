"""
Error taxonomy for the interview core.

Each error carries a stable ``code`` so that a request layer can map it to
its own transport status without inspecting messages.
"""

from typing import Any


class InterviewError(Exception):
    """Base class for all interview lifecycle errors."""

    code: str = "INTERVIEW_ERROR"

    def to_dict(self) -> dict[str, Any]:
        return {"error": type(self).__name__, "code": self.code, "message": str(self)}


class SessionNotFound(InterviewError):
    """Raised when a session id is unknown."""

    code = "NOT_FOUND"

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Interview session {session_id} not found")


class InvalidTransition(InterviewError):
    """Raised when an event is not legal from the current state."""

    code = "INVALID_STATE"

    def __init__(self, state: Any, event: Any, message: str | None = None):
        self.state = state
        self.event = event
        super().__init__(
            message or f"Cannot transition from {_name(state)} with event {_name(event)}"
        )


class CannotResume(InterviewError):
    """Raised when resume is requested on a non-resumable or expired session."""

    code = "CANNOT_RESUME"


class NoMoreQuestions(InterviewError):
    """Raised when a question ordinal is past the end of the bank."""

    code = "NO_MORE_QUESTIONS"

    def __init__(self, index: int, total: int):
        self.index = index
        self.total = total
        super().__init__(f"No question at index {index} (bank has {total})")


class NotReady(InterviewError):
    """Raised when a summary is requested before the interview completed."""

    code = "NOT_READY"


def _name(value: Any) -> str:
    return getattr(value, "value", None) or str(value)
