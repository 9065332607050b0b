# outroute:header:start
#
#   project      : OutRoute
#   file         : router.py
#   file_relpath : src/outroute/printer/router.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Output router: maps a `Mode` to channel states and write sinks.

The projections below are total, pure lookups over the closed `Mode` enum:

| Mode        | progress | stdout   | stdout (important) | stderr   |
|-------------|----------|----------|--------------------|----------|
| silent      | hidden   | disabled | disabled           | disabled |
| quiet       | hidden   | disabled | enabled            | enabled  |
| normal      | stderr   | enabled  | enabled            | enabled  |
| verbose     | hidden   | enabled  | enabled            | enabled  |
| no_progress | hidden   | enabled  | enabled            | enabled  |

`Printer` binds a mode to a pair of streams and selects one sink per channel
at construction time, so writing is unconditional for callers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, TextIO

import click

from outroute.printer.sinks import select_sink
from outroute.printer.types import ChannelState, Mode, ProgressTarget

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click._termui_impl import ProgressBar

    from outroute.printer.sinks import Sink

_ENABLED: Final = ChannelState.ENABLED
_DISABLED: Final = ChannelState.DISABLED

# Verbose hides progress: a redrawing bar interleaved with debug output corrupts both.
_PROGRESS_TARGETS: Final[dict[Mode, ProgressTarget]] = {
    Mode.SILENT: ProgressTarget.HIDDEN,
    Mode.QUIET: ProgressTarget.HIDDEN,
    Mode.NORMAL: ProgressTarget.STDERR,
    Mode.VERBOSE: ProgressTarget.HIDDEN,
    Mode.NO_PROGRESS: ProgressTarget.HIDDEN,
}

_PRIMARY_STATES: Final[dict[Mode, ChannelState]] = {
    Mode.SILENT: _DISABLED,
    Mode.QUIET: _DISABLED,
    Mode.NORMAL: _ENABLED,
    Mode.VERBOSE: _ENABLED,
    Mode.NO_PROGRESS: _ENABLED,
}

_IMPORTANT_STATES: Final[dict[Mode, ChannelState]] = {
    Mode.SILENT: _DISABLED,
    Mode.QUIET: _ENABLED,
    Mode.NORMAL: _ENABLED,
    Mode.VERBOSE: _ENABLED,
    Mode.NO_PROGRESS: _ENABLED,
}

# Quiet keeps the diagnostic stream so errors and warnings still surface.
_DIAGNOSTIC_STATES: Final[dict[Mode, ChannelState]] = {
    Mode.SILENT: _DISABLED,
    Mode.QUIET: _ENABLED,
    Mode.NORMAL: _ENABLED,
    Mode.VERBOSE: _ENABLED,
    Mode.NO_PROGRESS: _ENABLED,
}


def progress_target(mode: Mode) -> ProgressTarget:
    """Return where progress indicators are drawn in ``mode``."""
    return _PROGRESS_TARGETS[mode]


def primary_state(mode: Mode) -> ChannelState:
    """Return the state of the primary stream (stdout) in ``mode``."""
    return _PRIMARY_STATES[mode]


def important_state(mode: Mode) -> ChannelState:
    """Return the state of the important primary stream in ``mode``.

    Important output is what the user explicitly asked for (a report, a
    requested value); it survives ``QUIET`` and is only dropped in ``SILENT``.
    """
    return _IMPORTANT_STATES[mode]


def diagnostic_state(mode: Mode) -> ChannelState:
    """Return the state of the diagnostic stream (stderr) in ``mode``."""
    return _DIAGNOSTIC_STATES[mode]


def routing_table(mode: Mode) -> dict[str, str]:
    """Return all projections of ``mode`` keyed by channel name.

    Args:
        mode (Mode): The mode to project.

    Returns:
        dict[str, str]: ``mode``, ``progress``, ``stdout``, ``stdout_important``
        and ``stderr`` mapped to their machine keys.
    """
    return {
        "mode": mode.key,
        "progress": progress_target(mode).value,
        "stdout": primary_state(mode).value,
        "stdout_important": important_state(mode).value,
        "stderr": diagnostic_state(mode).value,
    }


@dataclass(frozen=True)
class Printer:
    """Mode-bound output router.

    The sinks are selected once in ``__post_init__``; the instance is
    immutable afterwards and can be shared between threads.

    Attributes:
        mode (Mode): The operating mode.
        out (TextIO): Primary stream. Defaults to ``sys.stdout`` at construction time.
        err (TextIO): Diagnostic stream. Defaults to ``sys.stderr`` at construction time.
    """

    mode: Mode
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    _sinks: dict[str, Sink] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        sinks: dict[str, Sink] = {
            "stdout": select_sink(primary_state(self.mode), self.out),
            "stdout_important": select_sink(important_state(self.mode), self.out),
            "stderr": select_sink(diagnostic_state(self.mode), self.err),
        }
        object.__setattr__(self, "_sinks", sinks)

    def target(self) -> ProgressTarget:
        """Return the progress draw target for this printer."""
        return progress_target(self.mode)

    def stdout_state(self) -> ChannelState:
        """Return the state of the primary stream."""
        return primary_state(self.mode)

    def stdout_important_state(self) -> ChannelState:
        """Return the state of the important primary stream."""
        return important_state(self.mode)

    def stderr_state(self) -> ChannelState:
        """Return the state of the diagnostic stream."""
        return diagnostic_state(self.mode)

    def stdout(self) -> Sink:
        """Return the primary-stream sink."""
        return self._sinks["stdout"]

    def stdout_important(self) -> Sink:
        """Return the sink for important primary output."""
        return self._sinks["stdout_important"]

    def stderr(self) -> Sink:
        """Return the diagnostic-stream sink."""
        return self._sinks["stderr"]

    def progressbar(self, iterable: Iterable[Any] | None = None, **kwargs: Any) -> ProgressBar[Any]:
        """Create a `click.progressbar` drawn according to `target()`.

        The bar renders on the diagnostic stream when the target is
        ``STDERR`` and is fully hidden otherwise.

        Args:
            iterable (Iterable[Any] | None): Items to iterate over. Pass ``length``
                in ``kwargs`` when omitted.
            **kwargs (Any): Extra keyword arguments for `click.progressbar`
                (``length``, ``label``, ``show_eta``...). ``hidden`` and
                ``file`` are controlled by the printer.

        Returns:
            ProgressBar[Any]: The progress bar; use it as a context manager.
        """
        kwargs["hidden"] = not self.target().visible
        kwargs["file"] = self.err
        return click.progressbar(iterable, **kwargs)
