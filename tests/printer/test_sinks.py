# outroute:header:start
#
#   project      : OutRoute
#   file         : test_sinks.py
#   file_relpath : tests/printer/test_sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Unit tests for the write sinks in :mod:`outroute.printer.sinks`."""

from __future__ import annotations

import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from outroute.printer import ChannelState, NullSink, StreamSink, select_sink


class _BrokenStream(io.StringIO):
    """Stream whose writes fail like a closed pipe."""

    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_select_sink_enabled_forwards(out: io.StringIO) -> None:
    """An enabled channel wraps the stream."""
    sink = select_sink(ChannelState.ENABLED, out)
    assert isinstance(sink, StreamSink)
    assert sink.stream is out


def test_select_sink_disabled_discards(out: io.StringIO) -> None:
    """A disabled channel never touches the stream."""
    sink = select_sink(ChannelState.DISABLED, out)
    assert isinstance(sink, NullSink)
    assert sink.write("anything") == len("anything")
    sink.flush()
    assert out.getvalue() == ""


def test_stream_sink_write_is_verbatim(out: io.StringIO) -> None:
    """Content, including ANSI codes and odd whitespace, is forwarded untouched."""
    sink = StreamSink(out)
    payload = "\x1b[31mred\x1b[0m\r\n\ttab é\n"
    assert sink.write(payload) == len(payload)
    assert out.getvalue() == payload


def test_stream_sink_propagates_stream_errors() -> None:
    """Failures of the underlying stream are not suppressed."""
    sink = StreamSink(_BrokenStream())
    with pytest.raises(BrokenPipeError):
        sink.write("data")


def test_null_sink_ignores_broken_stream() -> None:
    """A disabled channel does not even attempt the write."""
    sink = select_sink(ChannelState.DISABLED, _BrokenStream())
    sink.write("data")


def test_isatty_reflects_stream() -> None:
    """StreamSink reports the stream's TTY status; NullSink is never a TTY."""
    assert StreamSink(_TtyStream()).isatty() is True
    assert StreamSink(io.StringIO()).isatty() is False
    assert NullSink().isatty() is False


@settings(max_examples=50)
@given(chunks=st.lists(st.text(), max_size=20))
def test_enabled_channel_concatenates_in_order(chunks: list[str]) -> None:
    """N writes to an enabled channel appear byte-for-byte, in call order."""
    stream = io.StringIO(newline="")
    sink = select_sink(ChannelState.ENABLED, stream)
    for chunk in chunks:
        sink.write(chunk)
    assert stream.getvalue() == "".join(chunks)


@settings(max_examples=50)
@given(chunks=st.lists(st.text(), max_size=20))
def test_disabled_channel_observes_nothing(chunks: list[str]) -> None:
    """N writes to a disabled channel produce zero characters on the stream."""
    stream = io.StringIO()
    sink = select_sink(ChannelState.DISABLED, stream)
    for chunk in chunks:
        assert sink.write(chunk) == len(chunk)
    assert stream.getvalue() == ""
