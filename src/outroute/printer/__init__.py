# outroute:header:start
#
#   project      : OutRoute
#   file         : __init__.py
#   file_relpath : src/outroute/printer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Output router: mode types, gated sinks and the `Printer`.

Modules:
    - ``types``: `Mode`, `ChannelState`, `ProgressTarget`.
    - ``sinks``: `Sink` protocol, `StreamSink`, `NullSink`, `select_sink`.
    - ``router``: pure mode projections and the `Printer` value object.
"""

from __future__ import annotations

from outroute.printer.router import (
    Printer,
    diagnostic_state,
    important_state,
    primary_state,
    progress_target,
    routing_table,
)
from outroute.printer.sinks import NullSink, Sink, StreamSink, select_sink
from outroute.printer.types import ChannelState, Mode, ProgressTarget

__all__: list[str] = [
    "ChannelState",
    "Mode",
    "NullSink",
    "Printer",
    "ProgressTarget",
    "Sink",
    "StreamSink",
    "diagnostic_state",
    "important_state",
    "primary_state",
    "progress_target",
    "routing_table",
    "select_sink",
]
