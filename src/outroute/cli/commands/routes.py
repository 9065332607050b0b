# outroute:header:start
#
#   project      : OutRoute
#   file         : routes.py
#   file_relpath : src/outroute/cli/commands/routes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""OutRoute `routes` command.

Reports the progress target and channel states of the active output mode, of
another mode named with ``--mode`` (keys or aliases such as ``qq``), or of
every mode with ``--all``. The report is *important* output: it is shown in
quiet mode and suppressed only in silent mode.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from outroute.cli.cli_types import EnumChoiceParam, KeyedEnumParam
from outroute.cli.commands.formats import OutputFormat
from outroute.cli.options import resolve_output_color
from outroute.printer.router import (
    diagnostic_state,
    important_state,
    primary_state,
    progress_target,
    routing_table,
)
from outroute.printer.types import ChannelState, Mode, ProgressTarget

if TYPE_CHECKING:
    from outroute.cli_shared.console_api import ConsoleLike

_COLUMNS: tuple[str, ...] = ("mode", "progress", "stdout", "stdout_important", "stderr")


def render_routes_text(modes: list[Mode], *, color: bool) -> list[str]:
    """Render the routing table of ``modes`` as aligned text lines.

    Args:
        modes (list[Mode]): Modes to report, one row each.
        color (bool): Whether to colorize the state cells.

    Returns:
        list[str]: Header line followed by one line per mode.
    """
    mode_w: int = max(Mode.NORMAL.value_length, len(_COLUMNS[0]))
    progress_w: int = max(ProgressTarget.HIDDEN.value_length, len(_COLUMNS[1]))
    state_ws: list[int] = [
        max(ChannelState.ENABLED.value_length, len(c)) for c in _COLUMNS[2:]
    ]

    header: str = "  ".join(
        [_COLUMNS[0].ljust(mode_w), _COLUMNS[1].ljust(progress_w)]
        + [c.ljust(w) for c, w in zip(_COLUMNS[2:], state_ws)]
    )
    lines: list[str] = [header.rstrip()]
    for mode in modes:
        states: list[ChannelState] = [
            primary_state(mode),
            important_state(mode),
            diagnostic_state(mode),
        ]
        cells: list[str] = [
            mode.key.ljust(mode_w),
            progress_target(mode).render(color=color, width=progress_w),
        ] + [s.render(color=color, width=w) for s, w in zip(states, state_ws)]
        lines.append("  ".join(cells).rstrip())
    return lines


@click.command(
    name="routes",
    help="Show how output is routed for the active mode.",
)
@click.option(
    "--all",
    "all_modes",
    is_flag=True,
    default=False,
    help="Report every mode instead of the active one.",
)
@click.option(
    "--mode",
    "report_mode",
    type=KeyedEnumParam(Mode),
    default=None,
    help="Report this mode instead of the active one (e.g. quiet, qq, v).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def routes_command(
    *,
    all_modes: bool = False,
    report_mode: Mode | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the progress target and channel states for the output mode.

    Args:
        all_modes (bool): Report every mode if True; takes precedence over ``report_mode``.
        report_mode (Mode | None): Mode to report; ``None`` means the active mode.
        output_format (OutputFormat | None): Optional output format (text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    selected: Mode = report_mode or ctx.obj["mode"]

    modes: list[Mode] = list(Mode) if all_modes else [selected]
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    color: bool = resolve_output_color(ctx, fmt)

    if fmt == OutputFormat.JSON:
        payload: object = [routing_table(m) for m in modes] if all_modes else routing_table(selected)
        console.important(json.dumps(payload, indent=2))
        return

    for line in render_routes_text(modes, color=color):
        console.important(line)
