from __future__ import annotations

import secrets
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Callable

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from gate.api.router import gate_router
from gate.clients.notifier import Notifier
from gate.clients.session_store import SessionStore
from gate.config import Settings, load_settings
from gate.core.exceptions import GateError
from gate.core.logging import get_logger, setup_logging
from gate.core.middleware import (
    gate_exception_handler,
    make_cookie_serializer,
    session_cookie_middleware,
)
from gate.services.expiry import now_ms
from gate.services.gatekeeper import GateKeeper
from gate.services.listener import Listener

logger = get_logger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _session_secret(settings: Settings) -> str:
    secret = settings.SESSION_SECRET.get_secret_value()
    if secret:
        return secret
    logger.warning("session_secret_generated", reason="SESSION_SECRET not set")
    return secrets.token_hex(32)


def create_app(
    settings: Settings | None = None,
    clock: Callable[[], int] = now_ms,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        current = settings if settings is not None else load_settings()
        setup_logging(log_level=current.LOG_LEVEL, debug=current.DEBUG)

        store = SessionStore()
        notifier = Notifier.from_settings(current)
        app.state.settings = current
        app.state.session_secret = _session_secret(current)
        app.state.cookie_serializer = make_cookie_serializer(app.state.session_secret)
        app.state.session_store = store
        app.state.notifier = notifier
        app.state.gatekeeper = GateKeeper(store, current, notifier, clock=clock)

        listener = Listener.from_settings(current)
        app.state.listener = listener
        if current.LISTENER_ENABLED:
            await listener.start()
        try:
            yield
        finally:
            await listener.stop()
            await notifier.aclose()

    app = FastAPI(
        title="Puzzle Gate",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(GateError, gate_exception_handler)
    app.middleware("http")(session_cookie_middleware)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(gate_router)
    return app


app = create_app()


def run() -> None:
    settings = load_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
