from __future__ import annotations

import time

from gate.schemas.session import Session
from gate.services.expiry import SESSION_DURATION_MS, is_expired, now_ms


def _logged_in(at: int) -> Session:
    return Session(id="s", is_logged_in=True, login_time=at)


class TestIsExpired:
    def test_duration_is_24_hours(self):
        assert SESSION_DURATION_MS == 86_400_000

    def test_no_login_time_is_expired(self):
        assert is_expired(Session(id="s"), now=0) is True

    def test_fresh_login_is_valid(self):
        assert is_expired(_logged_in(0), now=0) is False

    def test_exact_boundary_is_valid(self):
        assert is_expired(_logged_in(0), now=SESSION_DURATION_MS) is False

    def test_one_past_boundary_is_expired(self):
        assert is_expired(_logged_in(0), now=SESSION_DURATION_MS + 1) is True

    def test_custom_duration(self):
        session = _logged_in(1000)
        assert is_expired(session, now=1500, duration_ms=500) is False
        assert is_expired(session, now=1501, duration_ms=500) is True

    def test_login_time_zero_is_still_a_login(self):
        assert is_expired(_logged_in(0), now=1) is False


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1
