# outroute:header:start
#
#   project      : OutRoute
#   file         : options.py
#   file_relpath : src/outroute/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Common CLI option utilities for OutRoute.

This module centralizes reusable options (verbosity, progress, color) and the
resolution of those flags into an output `Mode` and an internal log level, so
the command group can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from outroute.cli.cli_types import EnumChoiceParam
from outroute.cli.commands.formats import OutputFormat
from outroute.cli.errors import OutrouteUsageError
from outroute.cli_shared.color import ColorMode, resolve_color_mode
from outroute.config.logging import TRACE_LEVEL, OutrouteLogger, get_logger
from outroute.constants import NO_PROGRESS_ENV
from outroute.printer.types import Mode

if TYPE_CHECKING:
    from outroute.printer.router import Printer

P = ParamSpec("P")
R = TypeVar("R")

logger: OutrouteLogger = get_logger(__name__)

# Internal log level per output mode; verbose is refined by the -v count.
MODE_LOG_LEVELS: dict[Mode, int] = {
    Mode.SILENT: logging.CRITICAL,
    Mode.QUIET: logging.ERROR,
    Mode.NORMAL: logging.WARNING,
    Mode.VERBOSE: logging.INFO,
    Mode.NO_PROGRESS: logging.WARNING,
}


def resolve_mode(verbose_count: int, quiet_count: int, no_progress: bool = False) -> Mode:
    """Resolve the output mode from the verbosity flags.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.
        no_progress: Whether ``--no-progress`` was passed (or set via env).

    Returns:
        The selected `Mode`.

    Raises:
        OutrouteUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        The --verbose and --quiet options are mutually exclusive.
        Two or more -q flags select SILENT, one selects QUIET.
        Any -v flag selects VERBOSE.
        Otherwise --no-progress selects NO_PROGRESS; the default is NORMAL.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise OutrouteUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if quiet_count >= 2:  # -qq
        return Mode.SILENT
    if quiet_count == 1:  # -q
        return Mode.QUIET
    if verbose_count > 0:  # -v, -vv, -vvv
        return Mode.VERBOSE
    if no_progress:
        return Mode.NO_PROGRESS
    return Mode.NORMAL


def resolve_log_level(mode: Mode, verbose_count: int = 0) -> int:
    """Return the internal logging level for ``mode``.

    Args:
        mode: The resolved output mode.
        verbose_count: Number of -v flags; refines the level in verbose mode.

    Returns:
        The logging level as an integer.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        Other modes use `MODE_LOG_LEVELS`.
    """
    if mode is Mode.VERBOSE:
        if verbose_count >= 3:
            return TRACE_LEVEL
        if verbose_count == 2:
            return logging.DEBUG
    return MODE_LOG_LEVELS[mode]


def resolve_output_color(ctx: click.Context, output_format: OutputFormat) -> bool:
    """Decide whether a reporting command may colorize its output.

    Re-applies the group-level color choice with the command's output format,
    so machine formats are never colored.

    Args:
        ctx: Current Click context, initialized by the command group.
        output_format: Output format selected for the command.

    Returns:
        True if ANSI color should be emitted on the important primary stream.
    """
    printer: Printer = ctx.obj["printer"]
    return resolve_color_mode(
        color_mode_override=ctx.obj.get("color_mode"),
        output_format=output_format.value,
        stream_isatty=printer.stdout_important().isatty(),
    )


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose, --quiet and --no-progress options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Use verbose output. Repeat for debug (-vv) and trace (-vvv) logging.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Use quiet output. Repeat (-qq) to silence all output.",
    )(f)
    f = click.option(
        "--no-progress",
        "no_progress",
        is_flag=True,
        default=False,
        envvar=NO_PROGRESS_ENV,
        show_envvar=True,
        help="Hide all progress outputs.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply color-related options.

    Adds ``--color`` (auto/always/never) and ``--no-color``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
