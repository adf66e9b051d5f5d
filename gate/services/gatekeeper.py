from __future__ import annotations

import hmac
from typing import Callable

from gate.clients.notifier import Notifier
from gate.clients.session_store import SessionStore
from gate.config import Settings
from gate.core.exceptions import (
    InvalidCredentialsError,
    NotAnsweredError,
    SessionBlockedError,
    WrongAnswerError,
)
from gate.core.logging import get_logger, short_id
from gate.schemas.enums import SessionState
from gate.schemas.session import Session
from gate.services.expiry import is_expired, now_ms

logger = get_logger(__name__)


def _matches(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


class GateKeeper:
    """Drives a session through Anonymous -> LoggedIn -> Answered.

    Every gated call re-reads the session and re-evaluates expiry against the
    clock; nothing about validity is cached between requests.
    """

    def __init__(
        self,
        store: SessionStore,
        settings: Settings,
        notifier: Notifier,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._store = store
        self._settings = settings
        self._notifier = notifier
        self._clock = clock

    def state_of(self, session: Session | None, now: int | None = None) -> SessionState:
        if session is None or not session.is_logged_in:
            return SessionState.ANONYMOUS
        if now is None:
            now = self._clock()
        if is_expired(session, now, self._settings.SESSION_DURATION_MS):
            return SessionState.EXPIRED
        if session.is_answered:
            return SessionState.ANSWERED
        return SessionState.LOGGED_IN

    def is_logged_in(self, session_id: str | None) -> bool:
        session = self._store.get(session_id)
        return session is not None and session.is_logged_in

    def login(self, session_id: str | None, user_id: str, password: str) -> str:
        """Check credentials and log the session in, returning its id.

        A session is only allocated once the credentials match.
        """
        valid_id = _matches(user_id, self._settings.VALID_ID)
        valid_pw = _matches(password, self._settings.VALID_PW.get_secret_value())
        if not (valid_id and valid_pw):
            logger.info("login_failed", session=short_id(session_id))
            raise InvalidCredentialsError(message="Invalid id or password")
        if self._store.get(session_id) is None:
            session_id = self._store.create()
        self._store.mark_logged_in(session_id, self._clock())
        return session_id

    def require_active(self, session_id: str | None) -> Session:
        """Return the logged-in, unexpired session or destroy it and block."""
        session = self._store.get(session_id)
        state = self.state_of(session)
        if state in (SessionState.ANONYMOUS, SessionState.EXPIRED):
            self._store.destroy(session_id)
            logger.info("session_blocked", session=short_id(session_id), state=state.value)
            raise SessionBlockedError(
                message="Session missing or expired",
                detail=state.value,
            )
        return session

    def enter_problem(self, session_id: str | None) -> Session:
        """Gate the puzzle and fire the hint notification without waiting on it."""
        session = self.require_active(session_id)
        self._notifier.notify(self._settings.NOTIFY_MESSAGE)
        return session

    def submit_answer(self, session_id: str | None, answer: str) -> None:
        session = self.require_active(session_id)
        if not _matches(answer.strip(), self._settings.CORRECT_ANSWER.get_secret_value()):
            logger.info("answer_rejected", session=short_id(session.id))
            raise WrongAnswerError(message="Incorrect answer")
        self._store.mark_answered(session.id)

    def require_answered(self, session_id: str | None) -> Session:
        session = self.require_active(session_id)
        if not session.is_answered:
            raise NotAnsweredError(message="Puzzle not solved yet")
        return session

    def logout(self, session_id: str | None) -> None:
        self._store.destroy(session_id)
