"""Structured logging helpers with correlation and session metadata."""

from __future__ import annotations

import logging
import sys
import tempfile
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from star_gazer.core.config import settings

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_session_id: ContextVar[Optional[str]] = ContextVar("session_id", default=None)

LEVEL_NAME = str(getattr(settings, "STAR_GAZER_LOG_LEVEL", "info")).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent


def _resolve_logs_dir() -> Optional[Path]:
    """Select a writable logs directory honoring configuration overrides.

    Returns ``None`` when no candidate can be created (read-only filesystems such
    as AWS Lambda outside ``/tmp``); logging then goes to stdout only.
    """

    configured_dir = getattr(settings, "STAR_GAZER_LOG_DIR", None)
    candidates = []
    if configured_dir:
        candidates.append(Path(configured_dir))

    data_dir = Path(getattr(settings, "DATA_DIR", Path("/data")))
    # Precedence: explicit override → repo root logs → DATA_DIR/logs → package-local logs → tmp
    candidates.append(ROOT_DIR / "logs")
    candidates.append(data_dir / "logs")
    candidates.append(BASE_DIR / "logs")
    candidates.append(Path(tempfile.gettempdir()) / "star_gazer" / "logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except (PermissionError, OSError):
            continue
        return candidate

    return None


LOGS_DIR = _resolve_logs_dir()
LOG_SCHEMA_VERSION = str(getattr(settings, "STAR_GAZER_LOG_SCHEMA_VERSION", "1.0.0"))
LOG_FILE_PATH: Optional[Path] = LOGS_DIR / "star_gazer.log" if LOGS_DIR is not None else None
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        # Explicit overrides on the record win.
        log_record.setdefault("schema_version", self._schema_version)


class CorrelationIdFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach correlation and session metadata to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.session_id = get_session_id() or "-"
        return True


def bind_correlation_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind ``value`` to the correlation id context variable."""

    return _correlation_id.set(value)


def reset_correlation_id(token: Token[Optional[str]]) -> None:
    """Reset the correlation id context variable to a previous state."""

    _correlation_id.reset(token)


def get_correlation_id() -> Optional[str]:
    """Return the current correlation id if bound."""

    return _correlation_id.get()


def bind_session_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind the skill session identifier for downstream logging."""

    return _session_id.set(value)


def reset_session_id(token: Token[Optional[str]]) -> None:
    """Reset the session identifier context variable."""

    _session_id.reset(token)


def get_session_id() -> Optional[str]:
    """Return the current session identifier if bound."""

    return _session_id.get()


@contextmanager
def correlation_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a correlation id."""

    token = bind_correlation_id(value)
    try:
        yield
    finally:
        reset_correlation_id(token)


@contextmanager
def session_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a session id."""

    token = bind_session_id(value)
    try:
        yield
    finally:
        reset_session_id(token)


def _has_shared_handlers(root: logging.Logger) -> bool:
    return any(
        any(isinstance(flt, CorrelationIdFilter) for flt in handler.filters)
        for handler in root.handlers
    )


def _build_handlers(log_file_path: Optional[Path]) -> list[logging.Handler]:
    """Build the stdout handler and, when a log file is available, the rotating file handler."""

    formatter = VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(correlation_id)s",
                "%(session_id)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
            "session_id": "session",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )
    correlation_filter = CorrelationIdFilter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file_path is not None:
        handlers.append(
            RotatingFileHandler(
                log_file_path,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.addFilter(correlation_filter)
        handler.setFormatter(formatter)
    return handlers


def _ensure_handlers() -> None:
    root = logging.getLogger()
    if _has_shared_handlers(root):
        return
    for handler in _build_handlers(LOG_FILE_PATH):
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger that writes through the shared JSON handlers."""

    _ensure_handlers()
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    return logger


__all__ = [
    "CorrelationIdFilter",
    "bind_correlation_id",
    "bind_session_id",
    "reset_correlation_id",
    "reset_session_id",
    "get_correlation_id",
    "get_session_id",
    "correlation_id_context",
    "session_id_context",
    "get_logger",
    "LOG_FILE_PATH",
    "LOG_SCHEMA_VERSION",
]
