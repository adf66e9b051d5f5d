from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from gate.api.deps import get_gatekeeper, get_session_id, get_settings, templates
from gate.config import Settings
from gate.schemas.forms import AnswerForm
from gate.services.gatekeeper import GateKeeper

router = APIRouter()


@router.get("/problem")
async def problem(
    gate: GateKeeper = Depends(get_gatekeeper),
    settings: Settings = Depends(get_settings),
    session_id: str | None = Depends(get_session_id),
) -> RedirectResponse:
    session = gate.enter_problem(session_id)
    response = RedirectResponse("/problem-page", status_code=status.HTTP_303_SEE_OTHER)
    # Display only; expiry is always decided from the server-side session.
    response.set_cookie(
        "loginTime",
        str(session.login_time),
        max_age=settings.SESSION_DURATION_MS // 1000,
        httponly=False,
        samesite="lax",
        secure=settings.COOKIE_SECURE,
    )
    return response


@router.get("/problem-page", response_class=HTMLResponse)
async def problem_page(
    request: Request,
    error: int | None = None,
    gate: GateKeeper = Depends(get_gatekeeper),
    settings: Settings = Depends(get_settings),
    session_id: str | None = Depends(get_session_id),
) -> Response:
    session = gate.require_active(session_id)
    return templates.TemplateResponse(
        request,
        "problem.html",
        {
            "error": error == 1,
            "login_time": session.login_time,
            "duration_ms": settings.SESSION_DURATION_MS,
        },
    )


@router.post("/submit-answer")
async def submit_answer(
    form: Annotated[AnswerForm, Form()],
    gate: GateKeeper = Depends(get_gatekeeper),
    session_id: str | None = Depends(get_session_id),
) -> RedirectResponse:
    gate.submit_answer(session_id, form.answer)
    return RedirectResponse("/success", status_code=status.HTTP_303_SEE_OTHER)
