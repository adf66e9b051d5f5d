from __future__ import annotations

from pydantic import BaseModel

from gate.schemas.enums import ErrorCode


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str = "puzzle-gate"


class ErrorResponse(BaseModel):
    error_code: ErrorCode
    message: str
    detail: str | None = None
