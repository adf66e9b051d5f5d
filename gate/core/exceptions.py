from __future__ import annotations


class GateError(Exception):
    """Base exception for all puzzle gate errors.

    Subclasses that set ``redirect_to`` are user-facing flow outcomes and are
    answered with a redirect instead of an error body.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    redirect_to: str | None = None

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message)


class ConfigurationError(GateError):
    error_code = "CONFIGURATION_ERROR"


class InvalidCredentialsError(GateError):
    status_code = 401
    error_code = "INVALID_CREDENTIALS"
    redirect_to = "/?error=1"


class WrongAnswerError(GateError):
    status_code = 400
    error_code = "WRONG_ANSWER"
    redirect_to = "/problem-page?error=1"


class SessionBlockedError(GateError):
    status_code = 403
    error_code = "SESSION_BLOCKED"
    redirect_to = "/expired"


class NotAnsweredError(GateError):
    status_code = 403
    error_code = "NOT_ANSWERED"
    redirect_to = "/expired"


class DownloadError(GateError):
    status_code = 500
    error_code = "DOWNLOAD_FAILED"
