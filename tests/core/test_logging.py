"""Tests for the logging helpers with correlation ids."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

from pythonjsonlogger import jsonlogger

from star_gazer.core.logging import (
    LOG_FILE_PATH,
    CorrelationIdFilter,
    VersionedJsonFormatter,
    bind_correlation_id,
    bind_session_id,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    get_session_id,
    reset_correlation_id,
    reset_session_id,
    session_id_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="hello",
        args=None,
        exc_info=None,
    )


def test_correlation_filter_attaches_context():
    """Filter should attach the current correlation and session ids onto log records."""
    cid_token = bind_correlation_id("abc123")
    session_token = bind_session_id("SessionId.1")
    try:
        record = _record()
        filt = CorrelationIdFilter()
        assert filt.filter(record) is True
        record_any = cast(Any, record)
        assert record_any.__dict__["correlation_id"] == "abc123"
        assert record_any.__dict__["session_id"] == "SessionId.1"
    finally:
        reset_session_id(session_token)
        reset_correlation_id(cid_token)


def test_correlation_filter_uses_placeholder_when_unbound():
    """Records outside a request carry a dash placeholder."""
    record = _record()
    CorrelationIdFilter().filter(record)
    record_any = cast(Any, record)
    assert record_any.__dict__["correlation_id"] == "-"
    assert record_any.__dict__["session_id"] == "-"


def test_correlation_context_manager_restores_state():
    """Nested contexts restore the original correlation id."""
    with (
        correlation_id_context("ctx"),
        correlation_id_context("nested"),
        session_id_context("session-a"),
    ):
        assert get_correlation_id() == "nested"
        assert get_session_id() == "session-a"
    assert get_correlation_id() is None
    assert get_session_id() is None


def test_formatter_adds_schema_version():
    """Every structured entry carries the schema version."""
    formatter = VersionedJsonFormatter("%(message)s", schema_version="9.9.9")
    record = _record()
    CorrelationIdFilter().filter(record)
    assert '"schema_version": "9.9.9"' in formatter.format(record)


def test_get_logger_has_correlation_filter():
    """Shared handlers installed on the root logger include the correlation filter."""
    logger = get_logger("star_gazer.tests.logging")
    root_logger = logging.getLogger()
    handlers = [
        handler
        for handler in root_logger.handlers
        if (
            isinstance(handler, RotatingFileHandler)
            and Path(getattr(handler, "baseFilename", "")) == LOG_FILE_PATH
        )
        or (
            isinstance(handler, logging.StreamHandler)
            and getattr(handler, "stream", None) is sys.stdout
        )
    ]
    assert handlers, "expected shared stream/file handlers to be installed"
    assert not logger.handlers, "module logger should rely on shared handlers"
    assert all(
        any(isinstance(flt, CorrelationIdFilter) for flt in handler.filters) for handler in handlers
    )
    assert all(isinstance(handler.formatter, jsonlogger.JsonFormatter) for handler in handlers)


def test_get_logger_uses_shared_rotating_handler():
    """Calling get_logger repeatedly should not duplicate file handlers."""
    first = get_logger("star_gazer.tests.logging.first")
    second = get_logger("star_gazer.tests.logging.second")

    assert not first.handlers
    assert not second.handlers

    rotating_handlers = [
        handler
        for handler in logging.getLogger().handlers
        if isinstance(handler, RotatingFileHandler)
    ]
    assert len(rotating_handlers) == 1, "expected exactly one shared RotatingFileHandler"
