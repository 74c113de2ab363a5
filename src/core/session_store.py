"""
In-memory session store.

Two indexes:
- sessions by id
- user id -> that user's single active session id

The store hands out deep copies, so a session being worked on by the
orchestrator is never visible to other readers until it is saved. Nothing
here validates states or transitions.
"""

import logging
from threading import RLock

from src.core.errors import SessionNotFound
from src.models.common import utcnow
from src.models.interview import InterviewSession, InterviewState

logger = logging.getLogger(__name__)


class InMemorySessionStore:
    """Thread-safe in-memory store with a one-active-session-per-user index."""

    def __init__(self) -> None:
        self._sessions: dict[str, InterviewSession] = {}
        self._active_by_user: dict[str, str] = {}
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    async def create(self, session: InterviewSession) -> None:
        """
        Insert a new session.

        A non-completed session becomes the user's active one, replacing
        any previous active session (last writer wins).
        """
        with self._lock:
            self._sessions[session.id] = session.model_copy(deep=True)
            if session.state != InterviewState.COMPLETED:
                replaced = self._active_by_user.get(session.user_id)
                if replaced and replaced != session.id:
                    logger.info(
                        f"User {session.user_id} active session {replaced} replaced by {session.id}"
                    )
                self._active_by_user[session.user_id] = session.id

    async def get_by_id(self, session_id: str) -> InterviewSession | None:
        """Get a copy of a session, or None if unknown."""
        with self._lock:
            return self._copy_of(session_id)

    async def save(self, session: InterviewSession) -> None:
        """
        Upsert a session and repair the active-user index.

        Touches ``updated_at``. The heartbeat keeps whichever value is newer,
        so a heartbeat landing during a dispatch is not rolled back.
        """
        with self._lock:
            session.updated_at = utcnow()

            record = session.model_copy(deep=True)
            existing = self._sessions.get(session.id)
            if existing and existing.last_heartbeat > record.last_heartbeat:
                record.last_heartbeat = existing.last_heartbeat
            self._sessions[session.id] = record

            if session.state == InterviewState.COMPLETED:
                if self._active_by_user.get(session.user_id) == session.id:
                    del self._active_by_user[session.user_id]
            else:
                self._active_by_user[session.user_id] = session.id

    async def get_active_by_user_id(self, user_id: str) -> InterviewSession | None:
        """Get a copy of the user's active session, or None."""
        with self._lock:
            session_id = self._active_by_user.get(user_id)
            if not session_id:
                return None
            return self._copy_of(session_id)

    async def update_heartbeat(self, session_id: str) -> None:
        """
        Bump only the heartbeat of a stored session.

        Does not go through ``save``, so ``updated_at`` is left alone.

        Raises:
            SessionNotFound: If the session id is unknown
        """
        with self._lock:
            stored = self._sessions.get(session_id)
            if stored is None:
                raise SessionNotFound(session_id)
            stored.touch_heartbeat()

    async def complete(self, session_id: str) -> None:
        """Mark a stored session completed and drop it from the active index."""
        with self._lock:
            stored = self._sessions.get(session_id)
            if stored is None:
                raise SessionNotFound(session_id)
            stored.complete()
            stored.updated_at = stored.completed_at
            if self._active_by_user.get(stored.user_id) == session_id:
                del self._active_by_user[stored.user_id]

    async def delete(self, session_id: str) -> None:
        """Remove a session (administrative/testing use)."""
        with self._lock:
            stored = self._sessions.pop(session_id, None)
            if stored and self._active_by_user.get(stored.user_id) == session_id:
                del self._active_by_user[stored.user_id]

    async def clear(self) -> None:
        """Remove every session (testing use)."""
        with self._lock:
            self._sessions.clear()
            self._active_by_user.clear()

    def _copy_of(self, session_id: str) -> InterviewSession | None:
        stored = self._sessions.get(session_id)
        return stored.model_copy(deep=True) if stored else None
