# outroute:header:start
#
#   project      : OutRoute
#   file         : version.py
#   file_relpath : src/outroute/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""OutRoute `version` command.

Prints the current OutRoute version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from outroute.cli.cli_types import EnumChoiceParam
from outroute.cli.commands.formats import OutputFormat
from outroute.cli.options import resolve_output_color
from outroute.constants import OUTROUTE_VERSION
from outroute.printer.types import Mode

if TYPE_CHECKING:
    from outroute.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of OutRoute.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of OutRoute.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    mode: Mode = ctx.obj["mode"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    color: bool = resolve_output_color(ctx, fmt)

    def _styled(text: str, **style_kwargs: Any) -> str:
        return click.style(text, **style_kwargs) if color else text

    if fmt == OutputFormat.JSON:
        console.important(json.dumps({"version": OUTROUTE_VERSION}))
    elif mode is Mode.VERBOSE:
        console.important(_styled("OutRoute version:", bold=True, underline=True))
        console.important(f"    {_styled(OUTROUTE_VERSION, bold=True)}")
    else:
        console.important(_styled(OUTROUTE_VERSION, bold=True))
