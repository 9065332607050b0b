# outroute:header:start
#
#   project      : OutRoute
#   file         : progress.py
#   file_relpath : src/outroute/cli/commands/progress.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""OutRoute `progress` command.

Drives a progress bar over COUNT steps and reports completion. The bar is only
drawn in normal mode; quiet, silent, verbose and no-progress modes hide it.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import click

from outroute.config.logging import OutrouteLogger, get_logger

if TYPE_CHECKING:
    from outroute.cli_shared.console_api import ConsoleLike
    from outroute.printer.router import Printer

logger: OutrouteLogger = get_logger(__name__)


@click.command(
    name="progress",
    help="Run a progress bar over COUNT steps.",
)
@click.argument("count", type=click.IntRange(min=0))
@click.option(
    "--label",
    "label",
    type=str,
    default="Working",
    show_default=True,
    help="Label shown next to the progress bar.",
)
@click.option(
    "--delay",
    "delay",
    type=click.FloatRange(min=0.0),
    default=0.0,
    help="Seconds to sleep per step.",
)
def progress_command(
    *,
    count: int,
    label: str = "Working",
    delay: float = 0.0,
) -> None:
    """Advance a progress bar ``count`` times, then print a summary line.

    Args:
        count (int): Number of steps.
        label (str): Label for the progress bar.
        delay (float): Seconds to sleep per step.
    """
    ctx = click.get_current_context()
    printer: Printer = ctx.obj["printer"]
    console: ConsoleLike = ctx.obj["console"]

    logger.info("progress: %d step(s), target=%s", count, printer.target().value)
    done: int = 0
    with printer.progressbar(range(count), label=label) as steps:
        for step in steps:
            logger.debug("progress: step %d", step)
            if delay:
                time.sleep(delay)
            done += 1

    console.print(f"{label}: {done}/{count} step(s) done")
