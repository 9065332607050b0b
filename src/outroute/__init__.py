# outroute:header:start
#
#   project      : OutRoute
#   file         : __init__.py
#   file_relpath : src/outroute/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""OutRoute package.

OutRoute is an output-routing policy for command-line tools. A single `Mode`
(silent, quiet, normal, verbose, no-progress) decides which output channels
are active: the progress indicator, the primary stream and the diagnostic
stream. Writes to a disabled channel are accepted and discarded, so the rest
of a program can write unconditionally.

Example:
    ```python
    from outroute import Mode, Printer

    printer = Printer(Mode.QUIET)
    printer.stdout().write("done\\n")  # discarded
    printer.stderr().write("error: x\\n")  # written to stderr
    ```
"""

from __future__ import annotations

from outroute.printer import (
    ChannelState,
    Mode,
    NullSink,
    Printer,
    ProgressTarget,
    Sink,
    StreamSink,
    diagnostic_state,
    important_state,
    primary_state,
    progress_target,
    select_sink,
)

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
    "select_sink",
]
