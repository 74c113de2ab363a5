"""
State Machine - validates and executes single interview transitions.
"""

import logging

from src.core.errors import InvalidTransition
from src.core.transitions import INTERVIEW_TRANSITIONS, TERMINAL_STATES
from src.models.interview import InterviewEvent, InterviewState

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Pure transition logic over the static transition table.

    Nothing here touches a session; callers pass states and events and get
    states back.
    """

    def __init__(self, transitions=INTERVIEW_TRANSITIONS):
        self._transitions = transitions

    def can_transition(self, state: InterviewState, event: InterviewEvent) -> bool:
        """Check whether an event is legal from a state."""
        return event in self._transitions.get(state, {})

    def validate(self, state: InterviewState, event: InterviewEvent) -> None:
        """
        Validate a transition.

        Raises:
            InvalidTransition: If the (state, event) pair is not in the table
        """
        if not self.can_transition(state, event):
            logger.debug(f"Rejected transition {state} + {event}")
            raise InvalidTransition(state, event)

    def apply(self, state: InterviewState, event: InterviewEvent) -> InterviewState:
        """Return the state reached by applying an event."""
        self.validate(state, event)
        return self._transitions[state][event]

    def valid_events(self, state: InterviewState) -> list[InterviewEvent]:
        """Get all events accepted from a state."""
        return list(self._transitions.get(state, {}))

    def is_terminal(self, state: InterviewState) -> bool:
        return state in TERMINAL_STATES
