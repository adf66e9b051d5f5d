from __future__ import annotations

import pytest
from pydantic import ValidationError

from gate.schemas.enums import ErrorCode, SessionState
from gate.schemas.forms import AnswerForm, LoginForm
from gate.schemas.responses import ErrorResponse, HealthResponse
from gate.schemas.session import Session


class TestSession:
    def test_defaults(self):
        session = Session(id="abc")
        assert session.is_logged_in is False
        assert session.login_time is None
        assert session.is_answered is False

    def test_answered_requires_login(self):
        with pytest.raises(ValidationError):
            Session(id="abc", is_answered=True)

    def test_login_time_requires_login(self):
        with pytest.raises(ValidationError):
            Session(id="abc", login_time=5)

    def test_login_requires_login_time(self):
        with pytest.raises(ValidationError):
            Session(id="abc", is_logged_in=True)

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            Session(id="")

    def test_frozen(self):
        session = Session(id="abc")
        with pytest.raises(ValidationError):
            session.is_logged_in = True

    def test_answered_session(self):
        session = Session(id="abc", is_logged_in=True, login_time=1, is_answered=True)
        assert session.is_answered is True


class TestForms:
    def test_login_defaults_to_empty(self):
        form = LoginForm()
        assert form.id == ""
        assert form.pw == ""

    def test_long_values_accepted(self):
        assert LoginForm(id="a", pw="x" * 5000).pw == "x" * 5000
        assert AnswerForm(answer="x" * 5000).answer == "x" * 5000


class TestResponses:
    def test_health(self):
        assert HealthResponse().model_dump() == {"status": "ok", "service": "puzzle-gate"}

    def test_error_response(self):
        body = ErrorResponse(error_code="DOWNLOAD_FAILED", message="Download error")
        assert body.error_code is ErrorCode.DOWNLOAD_FAILED
        assert body.model_dump(mode="json")["error_code"] == "DOWNLOAD_FAILED"

    def test_unknown_error_code(self):
        with pytest.raises(ValidationError):
            ErrorResponse(error_code="NOPE", message="x")


def test_session_states():
    assert {s.value for s in SessionState} == {"ANONYMOUS", "LOGGED_IN", "ANSWERED", "EXPIRED"}
