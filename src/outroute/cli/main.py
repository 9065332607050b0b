# outroute:header:start
#
#   project      : OutRoute
#   file         : main.py
#   file_relpath : src/outroute/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Click entry point for the OutRoute CLI.

Key ideas:
- Group-level options (verbosity, progress, color) are resolved once into an
  output `Mode`, a `Printer` and a console, and placed into ``ctx.obj``.
- Internal logging is pointed at the printer's diagnostic sink, so it is
  gated exactly like user-facing diagnostics.
- Subcommands only ever write through ``ctx.obj["console"]`` or
  ``ctx.obj["printer"]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from outroute.cli.commands.echo import echo_command
from outroute.cli.commands.progress import progress_command
from outroute.cli.commands.routes import routes_command
from outroute.cli.commands.version import version_command
from outroute.cli.console import ClickConsole
from outroute.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_log_level,
    resolve_mode,
)
from outroute.cli_shared.color import ColorMode, resolve_color_mode
from outroute.config.logging import get_logger, resolve_env_log_level, setup_logging
from outroute.printer.router import Printer

if TYPE_CHECKING:
    from outroute.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_progress: bool,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (mode, printer, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_progress (bool): Whether ``--no-progress`` was passed.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    mode = resolve_mode(verbose, quiet, no_progress)
    printer = Printer(mode)
    ctx.obj["mode"] = mode
    ctx.obj["printer"] = printer

    # The environment wins over the flag-derived level for internal logging
    level = resolve_env_log_level()
    if level is None:
        level = resolve_log_level(mode, verbose)
    ctx.obj["log_level"] = level
    setup_logging(level=level, stream=printer.stderr())

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    # Each stream is checked on its own: stderr may be a terminal while stdout is piped
    enable_color = resolve_color_mode(
        color_mode_override=effective_color_mode,
        stream_isatty=printer.stdout_important().isatty(),
    )
    enable_err_color = resolve_color_mode(
        color_mode_override=effective_color_mode,
        stream_isatty=printer.stderr().isatty(),
    )
    ctx.obj["color_mode"] = effective_color_mode
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(
        printer,
        enable_color=enable_color,
        enable_err_color=enable_err_color,
    )
    logger.debug(
        "Output mode: %s (log level %d, color %s, stderr color %s)",
        mode.key,
        level,
        enable_color,
        enable_err_color,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="OutRoute CLI: route program output by verbosity mode.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_progress: bool,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the OutRoute CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_progress=no_progress,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'outroute routes' to show how output is routed.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(routes_command)

cli.add_command(echo_command)

cli.add_command(progress_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
