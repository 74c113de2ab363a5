"""
Dependencies

Process-wide wiring for the interview core.
Manages the singleton orchestrator and its components.
"""

import logging

from src.config.settings import Settings, get_settings
from src.core.adaptation_engine import AdaptationEngine
from src.core.feedback_engine import FeedbackEngine
from src.core.interview_orchestrator import InterviewOrchestrator
from src.core.question_engine import QuestionEngine
from src.core.report_generator import ReportGenerator
from src.core.session_store import InMemorySessionStore
from src.core.state_machine import StateMachine

logger = logging.getLogger(__name__)


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_orchestrator: InterviewOrchestrator | None = None


def build_orchestrator(
    settings: Settings | None = None,
    store: InMemorySessionStore | None = None,
) -> InterviewOrchestrator:
    """
    Build an orchestrator with the default components.

    Args:
        settings: Settings to use (cached settings if omitted)
        store: Session store to share (a fresh in-memory store if omitted)
    """
    settings = settings or get_settings()

    return InterviewOrchestrator(
        store=store if store is not None else InMemorySessionStore(),
        question_engine=QuestionEngine(),
        feedback_engine=FeedbackEngine(),
        adaptation_engine=AdaptationEngine(checkpoint_interval=settings.checkpoint_interval),
        state_machine=StateMachine(),
        report_generator=ReportGenerator(),
        settings=settings,
    )


def get_orchestrator() -> InterviewOrchestrator:
    """
    Get the interview orchestrator singleton.

    Lazily initializes all required components.
    """
    global _orchestrator

    if _orchestrator is None:
        _orchestrator = build_orchestrator()
        logger.info("Interview orchestrator initialized")

    return _orchestrator


async def cleanup():
    """Release the singleton and drop every in-memory session."""
    global _orchestrator

    if _orchestrator is not None:
        await _orchestrator.store.clear()

    _orchestrator = None
