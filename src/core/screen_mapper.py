"""
Maps interview states to client presentation screens.
"""

from enum import Enum

from src.models.interview import InterviewState


class Screen(str, Enum):
    """Screen tags consumed by the client."""

    INTRO = "InterviewIntroScreen"
    QUESTION = "QuestionScreen"
    RECORDING = "RecordingScreen"
    PROCESSING = "ProcessingScreen"
    MICRO_FEEDBACK = "MicroFeedbackScreen"
    CHECKPOINT = "CheckpointScreen"
    SUMMARY = "InterviewSummaryScreen"
    PAUSED = "PausedScreen"
    ERROR = "ErrorScreen"


STATE_SCREENS: dict[InterviewState, Screen] = {
    InterviewState.INTRO: Screen.INTRO,
    InterviewState.QUESTION: Screen.QUESTION,
    InterviewState.RECORDING: Screen.RECORDING,
    InterviewState.PROCESSING: Screen.PROCESSING,
    InterviewState.MICRO_FEEDBACK: Screen.MICRO_FEEDBACK,
    InterviewState.CHECKPOINT: Screen.CHECKPOINT,
    InterviewState.COMPLETED: Screen.SUMMARY,
    InterviewState.PAUSED: Screen.PAUSED,
    InterviewState.ERROR: Screen.ERROR,
}


def map_state_to_screen(state: InterviewState) -> Screen:
    """Get the screen for a state; anything unknown shows the error screen."""
    return STATE_SCREENS.get(state, Screen.ERROR)
