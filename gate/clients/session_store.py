from __future__ import annotations

import secrets
import threading

from gate.core.logging import get_logger, short_id
from gate.schemas.session import Session

logger = get_logger(__name__)

SESSION_ID_BYTES = 32


class SessionStore:
    """In-memory owner of all Session records, keyed by opaque id.

    Records are immutable; every mark operation swaps in a validated copy under
    the lock, so readers never observe a half-applied update.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self) -> str:
        with self._lock:
            session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
            while session_id in self._sessions:
                session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
            self._sessions[session_id] = Session(id=session_id)
        logger.debug("session_created", session=short_id(session_id))
        return session_id

    def get(self, session_id: str | None) -> Session | None:
        if session_id is None:
            return None
        return self._sessions.get(session_id)

    def mark_logged_in(self, session_id: str, now: int) -> None:
        with self._lock:
            current = self._sessions.get(session_id)
            if current is None:
                return
            self._sessions[session_id] = Session(
                id=session_id, is_logged_in=True, login_time=now, is_answered=False
            )
        logger.info("session_logged_in", session=short_id(session_id), login_time=now)

    def mark_answered(self, session_id: str) -> None:
        with self._lock:
            current = self._sessions.get(session_id)
            if current is None or not current.is_logged_in:
                logger.warning("mark_answered_ignored", session=short_id(session_id))
                return
            self._sessions[session_id] = current.model_copy(update={"is_answered": True})
        logger.info("session_answered", session=short_id(session_id))

    def destroy(self, session_id: str | None) -> None:
        if session_id is None:
            return
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("session_destroyed", session=short_id(session_id))
