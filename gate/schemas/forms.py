from __future__ import annotations

from pydantic import BaseModel


class LoginForm(BaseModel):
    id: str = ""
    pw: str = ""


class AnswerForm(BaseModel):
    answer: str = ""
