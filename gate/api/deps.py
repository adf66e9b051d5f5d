from __future__ import annotations

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from gate.config import Settings
from gate.services.gatekeeper import GateKeeper

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gatekeeper(request: Request) -> GateKeeper:
    return request.app.state.gatekeeper


def get_session_id(request: Request) -> str | None:
    return getattr(request.state, "session_id", None)
