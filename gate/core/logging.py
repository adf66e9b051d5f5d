from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO", debug: bool = False) -> None:
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    renderer = structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(
        ensure_ascii=False
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    # uvicorn keeps its own access log format
    logging.getLogger("uvicorn.access").setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def short_id(session_id: str | None) -> str | None:
    """Loggable prefix of a session id."""
    if session_id is None:
        return None
    return session_id[:8]
