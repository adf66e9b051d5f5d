from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Session(BaseModel):
    """Server-held state of one browsing context."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    is_logged_in: bool = False
    login_time: int | None = Field(default=None, description="Login time, ms since epoch")
    is_answered: bool = False

    @model_validator(mode="after")
    def _check_invariants(self) -> Session:
        if self.is_answered and not self.is_logged_in:
            raise ValueError("an anonymous session cannot be answered")
        if (self.login_time is not None) != self.is_logged_in:
            raise ValueError("login_time must be set exactly when logged in")
        return self
