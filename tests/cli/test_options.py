# outroute:header:start
#
#   project      : OutRoute
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Unit tests for flag resolution in :mod:`outroute.cli.options`."""

from __future__ import annotations

import logging

import pytest

from outroute.cli.errors import OutrouteUsageError
from outroute.cli.options import resolve_log_level, resolve_mode
from outroute.config.logging import TRACE_LEVEL
from outroute.core.exit_codes import ExitCode
from outroute.printer import Mode
from tests.conftest import parametrize


@parametrize(
    ("verbose", "quiet", "no_progress", "expected"),
    [
        (0, 0, False, Mode.NORMAL),
        (0, 0, True, Mode.NO_PROGRESS),
        (0, 1, False, Mode.QUIET),
        (0, 2, False, Mode.SILENT),
        (0, 5, False, Mode.SILENT),
        (1, 0, False, Mode.VERBOSE),
        (3, 0, False, Mode.VERBOSE),
        # Quiet and verbose take precedence over --no-progress
        (0, 1, True, Mode.QUIET),
        (1, 0, True, Mode.VERBOSE),
    ],
)
def test_resolve_mode(verbose: int, quiet: int, no_progress: bool, expected: Mode) -> None:
    assert resolve_mode(verbose, quiet, no_progress) is expected


def test_resolve_mode_rejects_verbose_with_quiet() -> None:
    with pytest.raises(OutrouteUsageError) as excinfo:
        resolve_mode(1, 1)
    assert excinfo.value.exit_code == ExitCode.USAGE_ERROR


@parametrize(
    ("mode", "verbose", "expected"),
    [
        (Mode.SILENT, 0, logging.CRITICAL),
        (Mode.QUIET, 0, logging.ERROR),
        (Mode.NORMAL, 0, logging.WARNING),
        (Mode.NO_PROGRESS, 0, logging.WARNING),
        (Mode.VERBOSE, 1, logging.INFO),
        (Mode.VERBOSE, 2, logging.DEBUG),
        (Mode.VERBOSE, 3, TRACE_LEVEL),
    ],
)
def test_resolve_log_level(mode: Mode, verbose: int, expected: int) -> None:
    assert resolve_log_level(mode, verbose) == expected
