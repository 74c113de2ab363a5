"""
Static interview transition table: (state, event) -> next state.

FEEDBACK_ACK maps to QUESTION only as a placeholder. The orchestrator picks
the real destination from the session's pending adaptation decision.
"""

from types import MappingProxyType

from src.models.interview import InterviewEvent, InterviewState

S = InterviewState
E = InterviewEvent

INTERVIEW_TRANSITIONS = MappingProxyType({
    S.INTRO: MappingProxyType({
        E.INTRO_DONE: S.QUESTION,
    }),
    S.QUESTION: MappingProxyType({
        E.START_RECORDING: S.RECORDING,
        E.COMPLETE_INTERVIEW: S.COMPLETED,
        E.PAUSE: S.PAUSED,
    }),
    S.RECORDING: MappingProxyType({
        E.ANSWER_SUBMITTED: S.PROCESSING,
    }),
    S.PROCESSING: MappingProxyType({
        E.PROCESSING_DONE: S.MICRO_FEEDBACK,
    }),
    S.MICRO_FEEDBACK: MappingProxyType({
        E.FEEDBACK_ACK: S.QUESTION,
        E.COMPLETE_INTERVIEW: S.COMPLETED,
        E.PAUSE: S.PAUSED,
    }),
    S.CHECKPOINT: MappingProxyType({
        E.CHECKPOINT_ACK: S.QUESTION,
        E.PAUSE: S.PAUSED,
    }),
    S.PAUSED: MappingProxyType({
        E.RESUME: S.QUESTION,
    }),
    S.COMPLETED: MappingProxyType({}),
    S.ERROR: MappingProxyType({}),
})

TERMINAL_STATES = frozenset(
    state for state, events in INTERVIEW_TRANSITIONS.items() if not events
)
