from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, HTMLResponse, Response

from gate.api.deps import get_gatekeeper, get_session_id, get_settings, templates
from gate.config import Settings
from gate.core.logging import get_logger, short_id
from gate.services.download import resolve_download
from gate.services.gatekeeper import GateKeeper

logger = get_logger(__name__)

router = APIRouter()


@router.get("/success", response_class=HTMLResponse)
async def success(
    request: Request,
    gate: GateKeeper = Depends(get_gatekeeper),
    settings: Settings = Depends(get_settings),
    session_id: str | None = Depends(get_session_id),
) -> Response:
    gate.require_answered(session_id)
    return templates.TemplateResponse(
        request, "success.html", {"download_name": settings.DOWNLOAD_NAME}
    )


@router.get("/download")
async def download(
    gate: GateKeeper = Depends(get_gatekeeper),
    settings: Settings = Depends(get_settings),
    session_id: str | None = Depends(get_session_id),
) -> FileResponse:
    gate.require_answered(session_id)
    path = resolve_download(settings)
    logger.info("download_started", session=short_id(session_id), file=path.name)
    return FileResponse(
        path,
        filename=settings.DOWNLOAD_NAME,
        media_type="application/zip",
    )
