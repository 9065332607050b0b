# outroute:header:start
#
#   project      : OutRoute
#   file         : test_routing_property.py
#   file_relpath : tests/printer/test_routing_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Long-running property tests for `Printer` write gating across every mode.

Interleaves writes to all three channels of a `Printer` and checks that each
underlying stream receives exactly the writes of its enabled channels, in call
order. Run with ``nox -s property_test`` (excluded from ``nox -s qa``).
"""

from __future__ import annotations

import io

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from outroute.printer import Mode, Printer
from outroute.printer.router import diagnostic_state, important_state, primary_state

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

_CHANNELS: tuple[str, ...] = ("stdout", "stdout_important", "stderr")


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=1000,
)
@given(
    mode=st.sampled_from(list(Mode)),
    writes=st.lists(st.tuples(st.sampled_from(_CHANNELS), st.text()), max_size=50),
)
def test_interleaved_writes_reach_enabled_streams_only(
    mode: Mode,
    writes: list[tuple[str, str]],
) -> None:
    out = io.StringIO(newline="")
    err = io.StringIO(newline="")
    printer = Printer(mode, out=out, err=err)

    expected_out: list[str] = []
    expected_err: list[str] = []
    for channel, chunk in writes:
        sink = getattr(printer, channel)()
        assert sink.write(chunk) == len(chunk)
        if channel == "stdout" and primary_state(mode).enabled:
            expected_out.append(chunk)
        elif channel == "stdout_important" and important_state(mode).enabled:
            expected_out.append(chunk)
        elif channel == "stderr" and diagnostic_state(mode).enabled:
            expected_err.append(chunk)

    assert out.getvalue() == "".join(expected_out)
    assert err.getvalue() == "".join(expected_err)


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=500,
)
@given(chunks=st.lists(st.text(), max_size=100))
def test_silent_printer_never_touches_either_stream(chunks: list[str]) -> None:
    out = io.StringIO()
    err = io.StringIO()
    printer = Printer(Mode.SILENT, out=out, err=err)
    for chunk in chunks:
        for channel in _CHANNELS:
            getattr(printer, channel)().write(chunk)
    assert out.getvalue() == ""
    assert err.getvalue() == ""
