# outroute:header:start
#
#   project      : OutRoute
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Unit tests for :mod:`outroute.config.logging`."""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from outroute.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from outroute.constants import LOG_LEVEL_ENV
from outroute.printer import Mode, Printer
from tests.conftest import parametrize

if TYPE_CHECKING:
    import pytest


@parametrize(
    ("raw", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("FATAL", logging.CRITICAL),
        ("10", 10),
        ("loud", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_trace_level_is_registered() -> None:
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
    assert TRACE_LEVEL < logging.DEBUG


def test_setup_logging_writes_to_given_stream() -> None:
    stream = io.StringIO()
    setup_logging(level=logging.INFO, stream=stream)
    get_logger("outroute.tests").info("hello")
    assert "[INFO] hello" in stream.getvalue()


def test_trace_method_respects_level() -> None:
    stream = io.StringIO()
    setup_logging(level=logging.DEBUG, stream=stream)
    get_logger("outroute.tests").trace("hidden %s", "detail")
    assert stream.getvalue() == ""

    setup_logging(level=TRACE_LEVEL, stream=stream)
    get_logger("outroute.tests").trace("shown %s", "detail")
    assert "shown detail" in stream.getvalue()


def test_setup_logging_replaces_handlers() -> None:
    setup_logging(level=logging.INFO, stream=io.StringIO())
    setup_logging(level=logging.INFO, stream=io.StringIO())
    assert len(logging.getLogger().handlers) == 1


def test_logging_through_disabled_diagnostic_sink_is_dropped() -> None:
    """Pointing the handler at a silent printer's stderr discards records."""
    err = io.StringIO()
    printer = Printer(Mode.SILENT, out=io.StringIO(), err=err)
    setup_logging(level=logging.DEBUG, stream=printer.stderr())
    get_logger("outroute.tests").error("boom")
    assert err.getvalue() == ""


def test_logging_through_enabled_diagnostic_sink_is_kept() -> None:
    err = io.StringIO()
    printer = Printer(Mode.QUIET, out=io.StringIO(), err=err)
    setup_logging(level=logging.ERROR, stream=printer.stderr())
    get_logger("outroute.tests").error("boom")
    assert "boom" in err.getvalue()


def test_chalk_formatter_keeps_message() -> None:
    formatter = ChalkFormatter("%(message)s")
    for level in (TRACE_LEVEL, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
        record = logging.LogRecord("x", level, __file__, 1, "msg %d", (level,), None)
        assert f"msg {level}" in formatter.format(record)
