# topmark:header:start
#
#   project      : DocVariant
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Tests for the logging helpers."""

from __future__ import annotations

import logging

import pytest

from docvariant.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    DocvariantLogger,
    get_logger,
    resolve_env_log_level,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        ("warn", logging.WARNING),
        ("20", 20),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers are `DocvariantLogger` instances with a TRACE method."""
    log = get_logger("docvariant.tests.trace")
    assert isinstance(log, DocvariantLogger)
    with caplog.at_level(TRACE_LEVEL, logger="docvariant.tests.trace"):
        log.trace("tracing %s", "works")
    assert "tracing works" in caplog.text


def test_chalk_formatter_keeps_message() -> None:
    """Colouring wraps the formatted text without altering it."""
    formatter = ChalkFormatter("[%(levelname)s] %(message)s")
    for level in (TRACE_LEVEL, logging.DEBUG, logging.WARNING, logging.CRITICAL):
        record = logging.LogRecord("docvariant.x", level, __file__, 1, "hello %s", ("x",), None)
        assert f"[{logging.getLevelName(level)}] hello x" in formatter.format(record)
