"""
Core business logic modules for MockMate

Contains:
- Interview Orchestrator: State machine driver for the interview lifecycle
- State Machine: Transition table and validation
- Question / Feedback / Adaptation engines: pluggable domain strategies
- Session Store: In-memory sessions with the active-user index
- Report Generator: Checkpoints and final summary
"""

from src.core.adaptation_engine import AdaptationDecision, AdaptationEngine
from src.core.errors import (
    CannotResume,
    InterviewError,
    InvalidTransition,
    NoMoreQuestions,
    NotReady,
    SessionNotFound,
)
from src.core.feedback_engine import FeedbackEngine
from src.core.interview_orchestrator import InterviewOrchestrator
from src.core.question_engine import QuestionEngine
from src.core.report_generator import ReportGenerator
from src.core.screen_mapper import Screen, map_state_to_screen
from src.core.session_store import InMemorySessionStore
from src.core.state_machine import StateMachine

__all__ = [
    "AdaptationDecision",
    "AdaptationEngine",
    "CannotResume",
    "FeedbackEngine",
    "InMemorySessionStore",
    "InterviewError",
    "InterviewOrchestrator",
    "InvalidTransition",
    "NoMoreQuestions",
    "NotReady",
    "QuestionEngine",
    "ReportGenerator",
    "Screen",
    "SessionNotFound",
    "StateMachine",
    "map_state_to_screen",
]
