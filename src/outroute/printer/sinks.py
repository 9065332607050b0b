# outroute:header:start
#
#   project      : OutRoute
#   file         : sinks.py
#   file_relpath : src/outroute/printer/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Write sinks for gated output channels.

A channel is represented by a sink chosen once, when the channel's state is
known, so callers never branch on the state themselves.

Sinks
-----
- StreamSink: forwards every write verbatim to the wrapped text stream.
- NullSink: accepts every write and discards it.

Both implement the small file-like surface (``write``, ``flush``, ``isatty``)
that `click.echo`, `logging.StreamHandler` and `click.progressbar` rely on.
Errors raised by the wrapped stream (e.g. ``BrokenPipeError``) propagate
unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from outroute.config.logging import OutrouteLogger, get_logger
from outroute.printer.types import ChannelState

if TYPE_CHECKING:
    from typing import TextIO

logger: OutrouteLogger = get_logger(__name__)


class Sink(Protocol):
    """Protocol for the write target of one output channel."""

    def write(self, s: str) -> int:
        """Write ``s`` to the channel.

        Args:
            s (str): Text to write.

        Returns:
            int: Number of characters accepted.
        """
        ...

    def flush(self) -> None:
        """Flush buffered output, if any."""
        ...

    def isatty(self) -> bool:
        """Return True if the channel is attached to an interactive terminal."""
        ...


class StreamSink:
    """Enabled channel: forwards writes to a text stream."""

    __slots__ = ("stream",)

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def __repr__(self) -> str:
        return f"StreamSink({self.stream!r})"

    def write(self, s: str) -> int:
        """Forward ``s`` to the wrapped stream.

        Args:
            s (str): Text to write.

        Returns:
            int: Number of characters accepted.
        """
        self.stream.write(s)
        return len(s)

    def flush(self) -> None:
        """Flush the wrapped stream."""
        self.stream.flush()

    def isatty(self) -> bool:
        """Report whether the wrapped stream is a terminal."""
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty()) if isatty is not None else False


class NullSink:
    """Disabled channel: does not write anything."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NullSink()"

    def write(self, s: str) -> int:
        """Discard ``s``.

        Args:
            s (str): Text to discard.

        Returns:
            int: ``len(s)``, as if the text had been written.
        """
        return len(s)

    def flush(self) -> None:
        """No-op."""

    def isatty(self) -> bool:
        """A discarded channel is never interactive."""
        return False


def select_sink(state: ChannelState, stream: TextIO) -> Sink:
    """Return the sink implementing ``state`` on top of ``stream``.

    Args:
        state (ChannelState): State of the channel.
        stream (TextIO): Underlying stream used when the channel is enabled.

    Returns:
        Sink: ``StreamSink`` when enabled, otherwise ``NullSink``.
    """
    if state is ChannelState.ENABLED:
        logger.trace("Selected STREAM sink for %r", stream)
        return StreamSink(stream)
    logger.trace("Selected NULL sink (channel disabled)")
    return NullSink()
