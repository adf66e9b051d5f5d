from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from gate.api.deps import get_gatekeeper, get_session_id, templates
from gate.schemas.forms import LoginForm
from gate.services.gatekeeper import GateKeeper

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def login_page(
    request: Request,
    error: int | None = None,
    gate: GateKeeper = Depends(get_gatekeeper),
    session_id: str | None = Depends(get_session_id),
) -> Response:
    if gate.is_logged_in(session_id):
        return RedirectResponse("/problem", status_code=status.HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(request, "login.html", {"error": error == 1})


@router.post("/login")
async def login(
    request: Request,
    form: Annotated[LoginForm, Form()],
    gate: GateKeeper = Depends(get_gatekeeper),
    session_id: str | None = Depends(get_session_id),
) -> RedirectResponse:
    request.state.session_id = gate.login(session_id, form.id, form.pw)
    return RedirectResponse("/problem", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/logout")
async def logout(
    gate: GateKeeper = Depends(get_gatekeeper),
    session_id: str | None = Depends(get_session_id),
) -> RedirectResponse:
    gate.logout(session_id)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/expired", response_class=HTMLResponse)
async def expired(request: Request) -> Response:
    return templates.TemplateResponse(request, "expired.html", {})
