# outroute:header:start
#
#   project      : OutRoute
#   file         : echo.py
#   file_relpath : src/outroute/cli/commands/echo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""OutRoute `echo` command.

Writes its arguments to one output channel of the active mode. Useful in shell
scripts that want to honor ``-q``/``-qq`` without testing the flags themselves::

    outroute -q echo --channel diagnostic "error: x"   # shown
    outroute -q echo "done"                            # discarded
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import click

from outroute.cli.cli_types import EnumChoiceParam
from outroute.cli.errors import OutrouteIOError
from outroute.config.logging import OutrouteLogger, get_logger

if TYPE_CHECKING:
    from outroute.printer.router import Printer
    from outroute.printer.sinks import Sink

logger: OutrouteLogger = get_logger(__name__)


class Channel(str, Enum):
    """Output channel addressed by `echo`."""

    PRIMARY = "primary"
    IMPORTANT = "important"
    DIAGNOSTIC = "diagnostic"


def sink_for(printer: Printer, channel: Channel) -> Sink:
    """Return the printer sink backing ``channel``."""
    if channel is Channel.DIAGNOSTIC:
        return printer.stderr()
    if channel is Channel.IMPORTANT:
        return printer.stdout_important()
    return printer.stdout()


@click.command(
    name="echo",
    help="Write TEXT to an output channel, honoring the active mode.",
)
@click.argument("text", nargs=-1)
@click.option(
    "--channel",
    "channel",
    type=EnumChoiceParam(Channel),
    default=None,
    help=f"Target channel ({', '.join(c.value for c in Channel)}). Defaults to primary.",
)
@click.option(
    "-n",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not output the trailing newline.",
)
def echo_command(
    *,
    text: tuple[str, ...],
    channel: Channel | None = None,
    no_newline: bool = False,
) -> None:
    """Write the arguments, joined by spaces, to the selected channel.

    Args:
        text (tuple[str, ...]): Words to write.
        channel (Channel | None): Target channel; ``None`` means primary.
        no_newline (bool): Omit the trailing newline if True.

    Raises:
        OutrouteIOError: If the underlying stream of an enabled channel fails.
    """
    ctx = click.get_current_context()
    printer: Printer = ctx.obj["printer"]
    target: Channel = channel or Channel.PRIMARY

    message: str = " ".join(text) + ("" if no_newline else "\n")
    sink: Sink = sink_for(printer, target)
    logger.debug("echo: %d chars to %s via %r", len(message), target.value, sink)
    try:
        sink.write(message)
        sink.flush()
    except OSError as exc:
        raise OutrouteIOError(f"Cannot write to the {target.value} stream: {exc}") from exc
