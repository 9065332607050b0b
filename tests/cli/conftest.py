# outroute:header:start
#
#   project      : OutRoute
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""CLI test helpers for running OutRoute through Click's `CliRunner`.

`CliRunner` keeps stdout and stderr apart (``result.stdout`` /
``result.stderr``), which is what the routing tests assert on.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from outroute.cli.main import cli
from outroute.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Mapping


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI and capture its output streams.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["-q", "routes"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.
        env (Mapping[str, str | None] | None): Extra environment variables for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["-q", "echo", "done"])
        assert result.stdout == ""
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
