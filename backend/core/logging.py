"""Structured Logging for the Declension Engine

structlog on top of the standard library, so uvicorn and SQLAlchemy records
go through the same renderer:
- Colored console output in development, JSON lines in production
- Greek text rendered as-is (no ASCII escaping)
- Long prompts and coverage lists shortened before rendering
- Per-run context (e.g. a migration id) bound through contextvars

Usage:
    from core.logging import engine_logger

    log = engine_logger()
    log.warning("sentence_skipped", sentence_id=12, reason="article 'την' not found")
"""
import logging
import sys
from contextlib import contextmanager
from typing import Iterator
from uuid import uuid4

import structlog
from structlog.types import EventDict, Processor

SERVICE_NAME = "declension-engine"
SERVICE_VERSION = "0.1.0"
LOGGER_PREFIX = "declension"

MAX_VALUE_CHARS = 200
MAX_LIST_ITEMS = 20

# DATABASE_URL may embed credentials
_REDACTED_KEYS = frozenset({"database_url", "password"})


def _shorten(value):
    if isinstance(value, str) and len(value) > MAX_VALUE_CHARS:
        return value[:MAX_VALUE_CHARS] + "…"
    if isinstance(value, list) and len(value) > MAX_LIST_ITEMS:
        return [*value[:MAX_LIST_ITEMS], f"... {len(value) - MAX_LIST_ITEMS} more"]
    return value


def _scrub_event(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Redact credentials and shorten oversized values."""
    for key, value in event_dict.items():
        if key.lower() in _REDACTED_KEYS:
            event_dict[key] = "[REDACTED]"
        elif key != "event":
            event_dict[key] = _shorten(value)
    return event_dict


def _add_service(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", SERVICE_VERSION)
    return event_dict


def shared_processors() -> list[Processor]:
    """Pre-render chain for both structlog and stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        _add_service,
        _scrub_event,
    ]


def _renderer(json_logs: bool) -> Processor:
    if json_logs:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def _tune_library_loggers(log_sql: bool) -> None:
    # uvicorn installs its own handlers; route everything through root instead
    for name in ("uvicorn", "uvicorn.error"):
        logging.getLogger(name).handlers = []
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if log_sql else logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    log_sql: bool = False,
) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
        json_logs: JSON lines instead of console output
        log_sql: Emit SQLAlchemy statements at INFO
    """
    pre_chain = shared_processors()

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_logs),
        ],
    ))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    _tune_library_loggers(log_sql)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_correlation_id() -> str:
    """Short id tying together the log lines of one operation."""
    return uuid4().hex[:8]


@contextmanager
def bound_context(**kwargs) -> Iterator[None]:
    """Bind key-value pairs to every log line emitted inside the block."""
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


class LoggerRegistry:
    """One cached logger per application area, named ``declension.<area>``."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, area: str) -> structlog.stdlib.BoundLogger:
        logger = cls._loggers.get(area)
        if logger is None:
            logger = cls._loggers[area] = get_logger(f"{LOGGER_PREFIX}.{area}")
        return logger


def api_logger() -> structlog.stdlib.BoundLogger:
    return LoggerRegistry.get("api")


def engine_logger() -> structlog.stdlib.BoundLogger:
    """Extraction, coverage, synthesis and practice generation."""
    return LoggerRegistry.get("engine")


def db_logger() -> structlog.stdlib.BoundLogger:
    """Template store and seeding."""
    return LoggerRegistry.get("db")


def migration_logger() -> structlog.stdlib.BoundLogger:
    return LoggerRegistry.get("migration")
