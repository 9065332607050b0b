# outroute:header:start
#
#   project      : OutRoute
#   file         : errors.py
#   file_relpath : src/outroute/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Exceptions for the OutRoute CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`), which
    writes to the diagnostic channel and therefore stays silent in silent mode.
    If no console is present in the Click context, they fall back to Click's
    default display.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from outroute.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from outroute.cli_shared.console_api import ConsoleLike


class OutrouteError(click.ClickException):
    """Base class for all OutRoute CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        # Click shows errors after the context is popped; remember it now.
        self.ctx: click.Context | None = click.get_current_context(silent=True)

    def format_message(self) -> str:
        """Return the plain error message text (no color, no prefix)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = self.ctx
        if ctx is not None and isinstance(ctx.obj, dict) and "console" in ctx.obj:
            console: ConsoleLike = ctx.obj["console"]
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class OutrouteUsageError(OutrouteError):
    """Error for command-line invocation errors (invalid or conflicting flags)."""

    exit_code = ExitCode.USAGE_ERROR


class OutrouteIOError(OutrouteError):
    """Error when an enabled output stream fails (e.g. a closed pipe)."""

    exit_code = ExitCode.IO_ERROR
