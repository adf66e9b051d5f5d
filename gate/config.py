from __future__ import annotations

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gate.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Gate values (no safe defaults)
    VALID_ID: str
    VALID_PW: SecretStr
    CORRECT_ANSWER: SecretStr

    # Web
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Session
    SESSION_SECRET: SecretStr = SecretStr("")
    SESSION_DURATION_MS: int = 24 * 60 * 60 * 1000
    SESSION_COOKIE_NAME: str = "gate_session"
    COOKIE_SECURE: bool = False

    # Notifier
    NOTIFY_HOST: str = "127.0.0.1"
    NOTIFY_PORT: int = 5000
    NOTIFY_TIMEOUT: float = 5.0
    NOTIFY_MESSAGE: str = "0700으로 시작하는 조합"

    # Listener
    LISTENER_ENABLED: bool = True
    LISTENER_HOST: str = "127.0.0.1"
    LISTENER_PORT: int = 5000
    LISTENER_CHUNK_SIZE: int = 4096

    # Download
    DOWNLOAD_PATH: str = "files/키케로의 분노.zip"
    DOWNLOAD_NAME: str = "키케로의 분노.zip"

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    @field_validator("VALID_ID")
    @classmethod
    def _id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("VALID_PW", "CORRECT_ANSWER")
    @classmethod
    def _secret_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("PORT", "NOTIFY_PORT", "LISTENER_PORT")
    @classmethod
    def _valid_port(cls, value: int) -> int:
        if not 0 <= value <= 65535:
            raise ValueError("must be between 0 and 65535")
        return value

    @field_validator("SESSION_DURATION_MS", "LISTENER_CHUNK_SIZE")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be positive")
        return value


def load_settings(**overrides) -> Settings:
    """Build Settings, turning validation failures into a ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise ConfigurationError(
            message="Invalid or missing configuration",
            detail=", ".join(fields),
        ) from exc
