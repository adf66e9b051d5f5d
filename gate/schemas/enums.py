from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    WRONG_ANSWER = "WRONG_ANSWER"
    SESSION_BLOCKED = "SESSION_BLOCKED"
    NOT_ANSWERED = "NOT_ANSWERED"
    DOWNLOAD_FAILED = "DOWNLOAD_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class SessionState(str, Enum):
    ANONYMOUS = "ANONYMOUS"
    LOGGED_IN = "LOGGED_IN"
    ANSWERED = "ANSWERED"
    EXPIRED = "EXPIRED"
