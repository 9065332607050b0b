# outroute:header:start
#
#   project      : OutRoute
#   file         : console_api.py
#   file_relpath : src/outroute/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Framework-agnostic console interface for program output.

This protocol defines the small surface used by CLI commands to emit
user-facing output, separate from internal logging. Each method maps to one
output channel of an `outroute.printer.Printer`.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to the primary stream."""
        ...

    def important(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to the primary stream, even in quiet mode."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to the diagnostic stream."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message (styled as an error) to the diagnostic stream."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
