# outroute:header:start
#
#   project      : OutRoute
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from outroute.constants import OUTROUTE_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == OUTROUTE_VERSION


@mark_cli
def test_version_json() -> None:
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": OUTROUTE_VERSION}


@mark_cli
def test_version_survives_quiet_but_not_silent() -> None:
    assert run_cli(["-q", "version"]).stdout.strip() == OUTROUTE_VERSION
    assert run_cli(["-qq", "version"]).stdout == ""


@mark_cli
def test_version_verbose_has_heading() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert result.stdout.splitlines() == ["OutRoute version:", f"    {OUTROUTE_VERSION}"]
