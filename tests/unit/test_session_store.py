from __future__ import annotations

import pytest

from gate.clients.session_store import SessionStore


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


def _check_invariants(store: SessionStore, session_id: str) -> None:
    session = store.get(session_id)
    if session is None:
        return
    if session.is_answered:
        assert session.is_logged_in
    assert (session.login_time is not None) == session.is_logged_in


class TestSessionStore:
    def test_create_starts_anonymous(self, store):
        session_id = store.create()
        session = store.get(session_id)
        assert session is not None
        assert session.id == session_id
        assert session.is_logged_in is False
        assert session.is_answered is False
        assert session.login_time is None

    def test_create_ids_are_unique(self, store):
        ids = {store.create() for _ in range(200)}
        assert len(ids) == 200
        assert len(store) == 200

    def test_get_absent(self, store):
        assert store.get("nope") is None
        assert store.get(None) is None

    def test_mark_logged_in(self, store):
        session_id = store.create()
        store.mark_logged_in(session_id, 1234)
        session = store.get(session_id)
        assert session.is_logged_in is True
        assert session.login_time == 1234
        assert session.is_answered is False
        _check_invariants(store, session_id)

    def test_mark_logged_in_absent_is_noop(self, store):
        store.mark_logged_in("missing", 1234)
        assert "missing" not in store
        assert len(store) == 0

    def test_mark_logged_in_resets_answered(self, store):
        session_id = store.create()
        store.mark_logged_in(session_id, 1)
        store.mark_answered(session_id)
        store.mark_logged_in(session_id, 2)
        session = store.get(session_id)
        assert session.is_answered is False
        assert session.login_time == 2

    def test_mark_answered(self, store):
        session_id = store.create()
        store.mark_logged_in(session_id, 10)
        store.mark_answered(session_id)
        session = store.get(session_id)
        assert session.is_answered is True
        assert session.login_time == 10
        _check_invariants(store, session_id)

    def test_mark_answered_requires_login(self, store):
        session_id = store.create()
        store.mark_answered(session_id)
        assert store.get(session_id).is_answered is False
        _check_invariants(store, session_id)

    def test_mark_answered_absent_is_noop(self, store):
        store.mark_answered("missing")
        assert store.get("missing") is None

    def test_destroy_is_idempotent(self, store):
        session_id = store.create()
        store.destroy(session_id)
        assert store.get(session_id) is None
        store.destroy(session_id)
        store.destroy(None)
        assert session_id not in store

    def test_destroy_leaves_other_sessions(self, store):
        keep = store.create()
        drop = store.create()
        store.mark_logged_in(keep, 5)
        store.destroy(drop)
        assert store.get(keep).is_logged_in is True
        assert store.get(drop) is None
