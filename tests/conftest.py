from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from gate.config import Settings
from gate.main import create_app

START_MS = 1_700_000_000_000
ARCHIVE_BYTES = b"PK\x05\x06" + b"\x00" * 18


class FakeClock:
    def __init__(self, now: int = START_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def archive(tmp_path):
    path = tmp_path / "reward.zip"
    path.write_bytes(ARCHIVE_BYTES)
    return path


@pytest.fixture
def settings(archive, unused_tcp_port) -> Settings:
    return Settings(
        _env_file=None,
        VALID_ID="alice",
        VALID_PW="open-sesame",
        CORRECT_ANSWER="0700-1234",
        SESSION_SECRET="test-session-secret",
        NOTIFY_PORT=unused_tcp_port,
        NOTIFY_TIMEOUT=1.0,
        LISTENER_ENABLED=False,
        DOWNLOAD_PATH=str(archive),
        DOWNLOAD_NAME="reward.zip",
    )


@pytest.fixture
def app(settings, clock):
    return create_app(settings=settings, clock=clock)


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture
def logged_in(client) -> TestClient:
    resp = client.post("/login", data={"id": "alice", "pw": "open-sesame"})
    assert resp.status_code == 303
    assert resp.headers["location"] == "/problem"
    return client
