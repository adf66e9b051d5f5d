from __future__ import annotations

import time

from gate.schemas.session import Session

SESSION_DURATION_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def is_expired(session: Session, now: int, duration_ms: int = SESSION_DURATION_MS) -> bool:
    """True when the session has no login time or logged in more than duration_ms ago.

    Exactly ``duration_ms`` after login is still valid.
    """
    if session.login_time is None:
        return True
    return now - session.login_time > duration_ms
