"""Logging configuration using structlog.

Console output is colored key/value lines for local work and the CLI;
``LOG_JSON=true`` switches to one JSON object per line for log shipping.
Order ID events carry ``order_id``, ``key`` (counter) and ``user_id`` fields.
"""

import logging
import sys

import structlog
from structlog.typing import Processor

from swiftwash.config import settings

# Third-party loggers and the level they are capped at
_QUIET_LOGGERS: dict[str, int] = {
    "httpx": logging.INFO,
    "httpcore": logging.WARNING,
    "asyncio": logging.INFO,
    "aiosqlite": logging.WARNING,
    "asyncpg": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    # SQLAlchemy logs every statement at INFO when echo is on
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}


def _renderer(json_output: bool) -> Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        level: Log level name. Defaults to ``settings.log_level``.
        json_output: Render JSON lines. Defaults to ``settings.log_json``.
    """
    if json_output is None:
        json_output = settings.log_json

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso" if json_output else "%Y-%m-%d %H:%M:%S", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_output:
        shared_processors.append(structlog.processors.dict_tracebacks)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        # uvicorn, sqlalchemy and other stdlib loggers go through the same chain
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    level_name = (level or settings.log_level).upper()
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


_configured = False


def setup_logging() -> None:
    """Setup logging once. Safe to call multiple times."""
    global _configured
    if not _configured:
        configure_logging()
        _configured = True
