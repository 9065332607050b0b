# outroute:header:start
#
#   project      : OutRoute
#   file         : types.py
#   file_relpath : src/outroute/printer/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Value types for output routing.

- `Mode`: the user-selected operating level (closed set of five members).
- `ChannelState`: whether a content channel forwards or discards writes.
- `ProgressTarget`: where a progress indicator is drawn, if anywhere.

All three are immutable enum members: they compare by value, hash, and can be
passed around freely.
"""

from __future__ import annotations

from yachalk import chalk

from outroute.core.enum_mixins import EnumIntrospectionMixin, KeyedStrEnum
from outroute.rendering.colored_enum import ColoredStrEnum


class Mode(EnumIntrospectionMixin, KeyedStrEnum):
    """Verbosity/operating mode controlling which output channels are active.

    Attributes:
        SILENT: Suppress all output.
        QUIET: Suppress routine output; keep diagnostics and important output.
        NORMAL: Print to the standard streams and show progress on stderr.
        VERBOSE: Print everything, including debug diagnostics; progress is hidden
            so it does not interleave with diagnostic text.
        NO_PROGRESS: Like ``NORMAL`` but never draw progress indicators.
    """

    SILENT = ("silent", "Suppress all output", ("qq",))
    QUIET = ("quiet", "Suppress most output, keep diagnostics", ("q",))
    NORMAL = ("normal", "Print to the standard streams", ("default",))
    VERBOSE = ("verbose", "Print all output, including debug messages", ("v",))
    NO_PROGRESS = ("no_progress", "Print to the standard streams, without progress")


class ChannelState(EnumIntrospectionMixin, ColoredStrEnum):
    """State of a content channel (primary or diagnostic stream)."""

    ENABLED = ("enabled", chalk.green)
    DISABLED = ("disabled", chalk.dim)

    @property
    def enabled(self) -> bool:
        """True if writes to the channel reach the underlying stream."""
        return self is ChannelState.ENABLED


class ProgressTarget(EnumIntrospectionMixin, ColoredStrEnum):
    """Draw target for progress indicators.

    Attributes:
        STDERR: Render the indicator on the diagnostic stream.
        HIDDEN: Do not render the indicator at all.
    """

    STDERR = ("stderr", chalk.cyan)
    HIDDEN = ("hidden", chalk.dim)

    @property
    def visible(self) -> bool:
        """True if a progress indicator should be drawn."""
        return self is ProgressTarget.STDERR
