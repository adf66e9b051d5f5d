from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from itsdangerous import BadSignature, URLSafeSerializer

from gate.core.exceptions import GateError
from gate.core.logging import get_logger
from gate.schemas.responses import ErrorResponse

logger = get_logger(__name__)

SESSION_COOKIE_SALT = "gate-session"


def make_cookie_serializer(secret: str) -> URLSafeSerializer:
    return URLSafeSerializer(secret, salt=SESSION_COOKIE_SALT)


def load_session_id(serializer: URLSafeSerializer, raw: str | None) -> str | None:
    """Decode a signed session cookie; None when absent or tampered with."""
    if not raw:
        return None
    try:
        value = serializer.loads(raw)
    except BadSignature:
        return None
    return value if isinstance(value, str) and value else None


async def gate_exception_handler(request: Request, exc: GateError) -> Response:
    if exc.redirect_to is not None:
        logger.info(
            "gate_redirect",
            error_code=exc.error_code,
            path=request.url.path,
            location=exc.redirect_to,
        )
        return RedirectResponse(exc.redirect_to, status_code=status.HTTP_303_SEE_OTHER)

    logger.error(
        "gate_error",
        error_code=exc.error_code,
        message=exc.message,
        detail=exc.detail,
        path=request.url.path,
    )
    body = ErrorResponse(
        error_code=exc.error_code,
        message=exc.message,
        detail=exc.detail,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


async def session_cookie_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Resolve the session id from its signed cookie.

    Sessions are only created by a successful login; handlers that do so put
    the new id on ``request.state.session_id`` and the cookie is issued here.
    """
    settings = request.app.state.settings
    store = request.app.state.session_store
    serializer = request.app.state.cookie_serializer
    cookie_name = settings.SESSION_COOKIE_NAME

    raw_cookie = request.cookies.get(cookie_name)
    resolved = load_session_id(serializer, raw_cookie)
    if store.get(resolved) is None:
        resolved = None
    request.state.session_id = resolved

    response = await call_next(request)

    current = getattr(request.state, "session_id", None)
    if current is not None and current in store:
        if current != resolved:
            response.set_cookie(
                cookie_name,
                serializer.dumps(current),
                max_age=settings.SESSION_DURATION_MS // 1000,
                httponly=True,
                samesite="lax",
                secure=settings.COOKIE_SECURE,
                path="/",
            )
    elif raw_cookie is not None:
        response.delete_cookie(cookie_name, path="/")
    return response
