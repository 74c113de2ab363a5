"""
Interview Orchestrator - State machine driver for the interview lifecycle.

This is the central coordinator for the entire interview process. Every
state change goes through ``dispatch(session_id, event, data)``; the public
interview operations are thin wrappers that dispatch one or more events.
"""

import asyncio
import inspect
import logging
import weakref
from typing import Any, Awaitable, Callable
from uuid import uuid4

from src.config.settings import Settings, get_settings
from src.core.adaptation_engine import (
    AdaptationDecision,
    AdaptationEngine,
    update_confidence_trend,
)
from src.core.errors import (
    CannotResume,
    InvalidTransition,
    NoMoreQuestions,
    NotReady,
    SessionNotFound,
)
from src.core.feedback_engine import FeedbackEngine
from src.core.protocols import AdaptationStrategy, FeedbackGenerator, QuestionProvider
from src.core.question_engine import QuestionEngine
from src.core.report_generator import ReportGenerator
from src.core.screen_mapper import map_state_to_screen
from src.core.session_store import InMemorySessionStore
from src.core.state_machine import StateMachine
from src.models.feedback import Feedback
from src.models.interview import (
    Answer,
    AnswerStatus,
    InterviewEvent,
    InterviewSession,
    InterviewState,
    NextAction,
)
from src.models.question import Question

logger = logging.getLogger(__name__)

RESUME_MESSAGE = "Welcome back! Let's continue where we left off."

EventHandler = Callable[[InterviewSession, dict[str, Any]], Awaitable[dict[str, Any]]]


async def _resolve(value):
    """Await a collaborator result if it is awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


class InterviewOrchestrator:
    """
    Manages the interview lifecycle using a state machine pattern.

    States:
        INTRO → QUESTION → RECORDING → PROCESSING → MICRO_FEEDBACK
                   ↑                                     ↓
                   └──────────── (QUESTION | CHECKPOINT | COMPLETED)

    PAUSED is reachable from QUESTION, MICRO_FEEDBACK and CHECKPOINT.

    The orchestrator coordinates between:
    - State machine (transition legality)
    - Question provider, feedback generator, adaptation strategy
    - Session store

    Each dispatch holds a per-session lock across
    load → validate → side effects → commit → persist. Side effects are
    applied to a private copy of the session, so a failure leaves the
    stored session at its previous state.
    """

    def __init__(
        self,
        store: InMemorySessionStore | None = None,
        question_engine: QuestionProvider | None = None,
        feedback_engine: FeedbackGenerator | None = None,
        adaptation_engine: AdaptationStrategy | None = None,
        state_machine: StateMachine | None = None,
        report_generator: ReportGenerator | None = None,
        settings: Settings | None = None,
    ):
        """
        Initialize the orchestrator with component dependencies.

        Args:
            store: Session store (a fresh in-memory store if omitted)
            question_engine: Positional question provider
            feedback_engine: Per-answer feedback generator
            adaptation_engine: Next-step decision strategy
            state_machine: Transition validator
            report_generator: Checkpoint and summary builder
            settings: Application settings
        """
        self.settings = settings or get_settings()
        self.store = store if store is not None else InMemorySessionStore()
        self.question_engine = question_engine or QuestionEngine()
        self.feedback_engine = feedback_engine or FeedbackEngine()
        self.adaptation_engine = adaptation_engine or AdaptationEngine(
            checkpoint_interval=self.settings.checkpoint_interval
        )
        self.state_machine = state_machine or StateMachine()
        self.report_generator = report_generator or ReportGenerator()

        # Locks live only while some dispatch holds or awaits them
        self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

        self._handlers: dict[InterviewEvent, EventHandler] = {
            InterviewEvent.INTRO_DONE: self._on_intro_done,
            InterviewEvent.START_RECORDING: self._on_start_recording,
            InterviewEvent.ANSWER_SUBMITTED: self._on_answer_submitted,
            InterviewEvent.PROCESSING_DONE: self._on_processing_done,
            InterviewEvent.FEEDBACK_ACK: self._on_feedback_ack,
            InterviewEvent.CHECKPOINT_ACK: self._on_checkpoint_ack,
            InterviewEvent.COMPLETE_INTERVIEW: self._on_complete_interview,
            InterviewEvent.PAUSE: self._on_pause,
            InterviewEvent.RESUME: self._on_resume,
        }

    # =========================================================================
    # DISPATCH
    # =========================================================================

    async def dispatch(
        self,
        session_id: str,
        event: InterviewEvent | str,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Apply one event to a session.

        Args:
            session_id: Session ID
            event: Event to apply, as a member or its string value
            data: Event-specific input (answer metadata for ANSWER_SUBMITTED)

        Returns:
            {"state", "screen", "payload"} for the new state

        Raises:
            SessionNotFound: If the session does not exist
            InvalidTransition: If the event is unknown or not legal from the current state
        """
        async with self._session_lock(session_id):
            return await self._next(session_id, event, data)

    def _session_lock(self, session_id: str) -> asyncio.Lock:
        lock = self._locks.get(session_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[session_id] = lock
        return lock

    async def _next(
        self,
        session_id: str,
        event: InterviewEvent,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Dispatch body; the caller must hold the session lock."""
        # 1. Load a private working copy
        session = await self._load(session_id)
        old_state = session.state

        # 2. Validate
        event = self._coerce_event(session, event)
        self._validate(session, event)

        # FEEDBACK_ACK's destination depends on the decision made at PROCESSING_DONE
        pending = session.next_action
        if event == InterviewEvent.FEEDBACK_ACK and pending is None:
            logger.warning(
                f"Session {session_id}: FEEDBACK_ACK without a pending decision, "
                "advancing to next question"
            )
            pending = NextAction.NEXT_QUESTION
            session.next_action = pending

        # 3. Side effects, before the state changes
        try:
            payload = await self._handlers[event](session, data or {})
        except NoMoreQuestions as e:
            logger.critical(
                f"Session {session_id}: question bank exhausted on {event.value} "
                f"at index {e.index}; the COMPLETE decision was missed"
            )
            raise

        # 4. Resolve and commit the next state
        next_state = self._resolve_next_state(session, event, pending)
        if next_state == InterviewState.COMPLETED:
            session.complete()
        else:
            session.transition(next_state)
        if event == InterviewEvent.FEEDBACK_ACK:
            session.next_action = None

        # 5. Persist
        await self.store.save(session)

        logger.info(
            f"Session {session_id}: {old_state.value} → {next_state.value} ({event.value})"
        )
        if next_state == InterviewState.COMPLETED:
            logger.info(
                f"Session {session_id} completed after {len(session.answers)} answers"
            )

        # 6. Map state → screen
        return self._response(next_state, payload)

    def _coerce_event(self, session: InterviewSession, event) -> InterviewEvent:
        try:
            return InterviewEvent(event)
        except ValueError:
            raise InvalidTransition(session.state, event) from None

    def _validate(self, session: InterviewSession, event: InterviewEvent) -> None:
        if event == InterviewEvent.FEEDBACK_ACK and session.state != InterviewState.MICRO_FEEDBACK:
            raise InvalidTransition(
                session.state,
                event,
                f"Cannot acknowledge feedback from state {session.state.value}",
            )
        self.state_machine.validate(session.state, event)

    def _resolve_next_state(
        self,
        session: InterviewSession,
        event: InterviewEvent,
        pending: NextAction | None,
    ) -> InterviewState:
        if event == InterviewEvent.FEEDBACK_ACK:
            if pending == NextAction.CHECKPOINT:
                return InterviewState.CHECKPOINT
            if pending == NextAction.COMPLETE:
                return InterviewState.COMPLETED
            return InterviewState.QUESTION
        return self.state_machine.apply(session.state, event)

    def _response(self, state: InterviewState, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "state": state,
            "screen": map_state_to_screen(state),
            "payload": payload,
        }

    # =========================================================================
    # EVENT SIDE EFFECTS
    # =========================================================================

    async def _on_intro_done(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        question = await self._get_question(session.current_question_index)
        return {
            "question": self._dump(question),
            "total_questions": session.total_questions,
        }

    async def _on_start_recording(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        question = await self._get_question(session.current_question_index)
        return {"question": self._dump(question)}

    async def _on_answer_submitted(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        question = await self._get_question(session.current_question_index)
        duration_ms = data.get("duration_ms", self.settings.default_answer_duration_ms)

        answer = Answer(
            id=data.get("answer_id") or str(uuid4()),
            session_id=session.id,
            question_id=question.id,
            category=question.category,
            audio_url=data.get("audio_url", ""),
            duration_ms=duration_ms,
            status=AnswerStatus.PROCESSING,
        )

        feedback: Feedback = await _resolve(
            self.feedback_engine.generate_feedback(duration_ms, answer_id=answer.id)
        )
        answer.feedback = feedback

        session.add_answer(answer)
        session.update_feedback(feedback)
        session.confidence_trend = update_confidence_trend(
            session.confidence_trend, feedback.score
        )

        return {
            "answer_id": answer.id,
            "feedback": self._dump(feedback),
        }

    async def _on_processing_done(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        if session.answers:
            session.answers[-1].status = AnswerStatus.COMPLETED

        decision: AdaptationDecision = await _resolve(
            self.adaptation_engine.decide(
                session.current_question_index,
                session.total_questions,
                session.last_feedback,
            )
        )
        session.next_action = decision.action

        logger.debug(f"Session {session.id}: decided {decision.action.value} ({decision.reason})")

        return {
            "decision": self._dump(decision),
            "feedback": self._dump(session.last_feedback),
            "progress": session.progress,
        }

    async def _on_feedback_ack(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        action = session.next_action

        if action == NextAction.CHECKPOINT:
            checkpoint = self.report_generator.build_checkpoint(session)
            session.add_checkpoint(checkpoint)
            return {
                "type": "CHECKPOINT",
                "score": checkpoint.score,
                "progress": session.progress,
                "confidence_trend": session.confidence_trend,
                "checkpoint": self._dump(checkpoint),
            }

        if action == NextAction.COMPLETE:
            await self._record_answered(session)
            return {
                "type": "COMPLETE",
                "total_questions": session.current_question_index + 1,
            }

        return await self._advance(session)

    async def _on_checkpoint_ack(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._advance(session)

    async def _on_complete_interview(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        return {
            "summary": "Interview completed successfully",
            "answered_questions": len(session.answers),
        }

    async def _on_pause(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        return {
            "message": "Interview paused",
            "previous_state": session.state.value,
        }

    async def _on_resume(
        self, session: InterviewSession, data: dict[str, Any]
    ) -> dict[str, Any]:
        question = await self._get_question(session.current_question_index)
        return {
            "question": self._dump(question),
            "message": "Interview resumed",
        }

    async def _advance(self, session: InterviewSession) -> dict[str, Any]:
        """Move past the answered question and fetch the next one."""
        await self._record_answered(session)
        session.current_question_index += 1
        question = await self._get_question(session.current_question_index)
        return {
            "question": self._dump(question),
            "progress": session.progress,
        }

    async def _record_answered(self, session: InterviewSession) -> None:
        question = await self._get_question(session.current_question_index)
        if question.id not in session.asked_questions:
            session.asked_questions.append(question.id)

    async def _get_question(self, index: int) -> Question:
        return await _resolve(self.question_engine.get_question(index))

    # =========================================================================
    # INTERVIEW FLOW
    # =========================================================================

    async def start_interview(self, user_id: str, role_id: str) -> dict[str, Any]:
        """
        Create a session and move it to the first question.

        Any previous active session of the user stops being active.

        Returns:
            Session id, state, first question, question count and
            estimated duration in seconds
        """
        total = self.question_engine.get_total_questions()
        session = InterviewSession(
            user_id=user_id,
            role_id=role_id,
            total_questions=total,
        )
        await self.store.create(session)
        logger.info(f"Created interview session: {session.id} (user={user_id}, role={role_id})")

        result = await self.dispatch(session.id, InterviewEvent.INTRO_DONE)

        return {
            "id": session.id,
            "state": result["state"],
            "current_question": result["payload"]["question"],
            "total_questions": total,
            "estimated_duration": total * self.settings.seconds_per_question,
        }

    async def submit_answer(
        self,
        session_id: str,
        audio_url: str,
        duration_ms: int,
    ) -> dict[str, Any]:
        """
        Submit an answer to the current question.

        Runs QUESTION → RECORDING → PROCESSING → MICRO_FEEDBACK in one go
        because the current feedback strategy is synchronous. A strategy
        that processes answers in the background would deliver
        PROCESSING_DONE later through ``dispatch``.

        Returns:
            Answer id, estimated processing time and the partial feedback
        """
        answer_id = str(uuid4())

        async with self._session_lock(session_id):
            session = await self._load(session_id)

            if session.state == InterviewState.QUESTION:
                await self._next(session_id, InterviewEvent.START_RECORDING)

            result = await self._next(
                session_id,
                InterviewEvent.ANSWER_SUBMITTED,
                {
                    "answer_id": answer_id,
                    "audio_url": audio_url,
                    "duration_ms": duration_ms,
                },
            )

            await self._next(session_id, InterviewEvent.PROCESSING_DONE)

        return {
            "answer_id": answer_id,
            "estimated_time_ms": self.settings.estimated_processing_ms,
            "partial_feedback": result["payload"].get("feedback"),
        }

    async def get_state(self, session_id: str) -> dict[str, Any]:
        """Get the current state, screen and a state-specific payload."""
        session = await self._load(session_id)
        state = session.state
        payload: dict[str, Any] = {}

        if state in (InterviewState.QUESTION, InterviewState.RECORDING):
            question = await self._get_question(session.current_question_index)
            payload = {
                "question": self._dump(question),
                "progress": session.progress,
            }
        elif state == InterviewState.PROCESSING:
            payload = {
                "answer_id": session.answers[-1].id if session.answers else None,
                "estimated_time_ms": self.settings.estimated_processing_ms,
            }
        elif state == InterviewState.MICRO_FEEDBACK:
            payload = {
                "feedback": self._dump(session.last_feedback),
                "progress": session.progress,
            }
        elif state == InterviewState.CHECKPOINT:
            checkpoint = session.checkpoint_history[-1] if session.checkpoint_history else None
            payload = {
                "type": "CHECKPOINT",
                "score": checkpoint.score if checkpoint else 0.0,
                "progress": session.progress,
                "answers_count": len(session.answers),
                "checkpoint": self._dump(checkpoint),
            }
        elif state == InterviewState.PAUSED:
            payload = {
                "message": "Interview paused",
                "previous_state": session.previous_state.value if session.previous_state else None,
            }
        elif state == InterviewState.COMPLETED:
            payload = {
                "summary": "Interview completed successfully",
                "total_questions": len(session.answers),
            }

        return self._response(state, payload)

    async def continue_interview(self, session_id: str) -> dict[str, Any]:
        """
        Continue after micro-feedback or a checkpoint.

        Raises:
            InvalidTransition: If the session is in neither state
        """
        async with self._session_lock(session_id):
            session = await self._load(session_id)

            if session.state == InterviewState.MICRO_FEEDBACK:
                event = InterviewEvent.FEEDBACK_ACK
            elif session.state == InterviewState.CHECKPOINT:
                event = InterviewEvent.CHECKPOINT_ACK
            else:
                raise InvalidTransition(
                    session.state,
                    None,
                    f"Cannot continue from state {session.state.value}",
                )

            result = await self._next(session_id, event)

        payload = result["payload"]
        return {
            "state": result["state"],
            "screen": result["screen"],
            "question": payload.get("question"),
            "checkpoint": payload if payload.get("type") == "CHECKPOINT" else None,
        }

    async def pause(self, session_id: str) -> None:
        """Pause the interview."""
        await self.dispatch(session_id, InterviewEvent.PAUSE)

    async def resume(self, session_id: str) -> dict[str, Any]:
        """
        Resume a paused interview.

        Raises:
            CannotResume: If the session is not resumable or has expired
            InvalidTransition: If the session is resumable but not paused
        """
        async with self._session_lock(session_id):
            session = await self._load(session_id)

            if not session.is_resumable() or self._is_expired(session):
                raise CannotResume(f"Interview {session_id} cannot be resumed")

            self._validate(session, InterviewEvent.RESUME)
            await self.store.update_heartbeat(session_id)
            result = await self._next(session_id, InterviewEvent.RESUME)

        return {
            "state": result["state"],
            "screen": result["screen"],
            "question": result["payload"].get("question"),
            "message": RESUME_MESSAGE,
        }

    async def end_interview(self, session_id: str) -> dict[str, Any]:
        """End the interview early."""
        return await self.dispatch(session_id, InterviewEvent.COMPLETE_INTERVIEW)

    async def get_summary(self, session_id: str) -> dict[str, Any]:
        """
        Get the final summary of a completed interview.

        Returns:
            The summary, or {"is_processing": True} while answers are
            still being analysed

        Raises:
            NotReady: If the interview has not completed
        """
        session = await self._load(session_id)

        if session.state != InterviewState.COMPLETED:
            raise NotReady(f"Interview {session_id} not completed yet")

        if session.has_pending_answers():
            return {"is_processing": True}

        return self._dump(self.report_generator.generate_summary(session))

    async def get_active_interview(self, user_id: str) -> dict[str, Any] | None:
        """
        Get the user's active interview and whether it can be resumed.

        Returns:
            None if the user has no active interview
        """
        session = await self.store.get_active_by_user_id(user_id)
        if session is None:
            return None

        can_resume = session.is_resumable() and not self._is_expired(session)

        return {
            "can_resume": can_resume,
            "interview": {
                "id": session.id,
                "state": session.state,
                "current_question_index": session.current_question_index,
                "total_questions": session.total_questions,
                "last_heartbeat": session.last_heartbeat.isoformat(),
                "progress": session.progress,
            } if can_resume else None,
        }

    async def update_heartbeat(self, session_id: str) -> None:
        """Record client liveness without touching the transition lock."""
        await self.store.update_heartbeat(session_id)

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    async def _load(self, session_id: str) -> InterviewSession:
        session = await self.store.get_by_id(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def _is_expired(self, session: InterviewSession) -> bool:
        return session.is_expired(expiry_hours=self.settings.session_expiry_hours)

    def _dump(self, model) -> dict[str, Any] | None:
        return model.model_dump(mode="json") if model is not None else None
