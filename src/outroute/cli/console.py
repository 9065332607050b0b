# outroute:header:start
#
#   project      : OutRoute
#   file         : console.py
#   file_relpath : src/outroute/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` that writes through the gated sinks of
an `outroute.printer.Printer`: each method targets one output channel, and a
disabled channel swallows the text. Use this for messages intended for end
users, while reserving `logging` for internal diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypedDict

import click

from outroute.cli_shared.console_api import ConsoleLike

if TYPE_CHECKING:
    from outroute.printer.router import Printer


# This TypedDict is for documentation and type-checking on the *caller* side.
class StyleKwargs(TypedDict, total=False):
    """Keyword arguments accepted by click.style()."""

    fg: str
    bg: str
    bold: bool
    dim: bool
    underline: bool
    blink: bool
    reverse: bool
    strikethrough: bool


class ClickConsole(ConsoleLike):
    """Program-output console routed by a `Printer`.

    Args:
        printer (Printer): Router providing the per-channel sinks.
        enable_color (bool): If True, enables ANSI color codes on the primary stream.
            Otherwise, primary output is plain text.
        enable_err_color (bool | None): Color switch for the diagnostic stream,
            which may be a terminal when stdout is not. Defaults to ``enable_color``.

    Attributes:
        printer (Printer): The router this console writes through.
        enable_color (bool): Whether to emit ANSI color codes on the primary stream.
        enable_err_color (bool): Whether to emit ANSI color codes on the diagnostic stream.
    """

    printer: Printer
    enable_color: bool
    enable_err_color: bool

    def __init__(
        self,
        printer: Printer,
        *,
        enable_color: bool = True,
        enable_err_color: bool | None = None,
    ) -> None:
        self.printer = printer
        self.enable_color = enable_color
        self.enable_err_color = enable_color if enable_err_color is None else enable_err_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to the primary stream.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.printer.stdout(), color=self.enable_color)

    def important(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message the user asked for; kept in quiet mode.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.printer.stdout_important(), color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to the diagnostic stream.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        click.echo(
            self._styled_err(text, fg="yellow"),
            nl=nl,
            file=self.printer.stderr(),
            color=self.enable_err_color,
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to the diagnostic stream.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.echo(
            self._styled_err(text, fg="bright_red"),
            nl=nl,
            file=self.printer.stderr(),
            color=self.enable_err_color,
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Subset of keyword arguments supported by click.style.
                Expected keys are defined in the StyleKwargs TypedDict.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def _styled_err(self, text: str, **style_kwargs: Any) -> str:
        if not self.enable_err_color:
            return text
        return click.style(text, **style_kwargs)
