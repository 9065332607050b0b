# outroute:header:start
#
#   project      : OutRoute
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Pytest configuration for the OutRoute test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs. Output streams under test are plain `io.StringIO` objects, so tests
can assert on exactly what reached each channel.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from outroute.config import logging
from outroute.constants import LOG_LEVEL_ENV, NO_PROGRESS_ENV

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def clean_outroute_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure OutRoute's environment knobs are not inherited from the shell.

    A developer may have exported OUTROUTE_LOG_LEVEL, OUTROUTE_NO_PROGRESS,
    FORCE_COLOR or NO_COLOR; any of those would change mode or color
    resolution under test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (LOG_LEVEL_ENV, NO_PROGRESS_ENV, "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall the test logging configuration after each test.

    CLI invocations point the root handler at the runner's captured stderr;
    that stream is gone once the invocation returns.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def out() -> io.StringIO:
    """Captured primary stream."""
    return io.StringIO()


@pytest.fixture
def err() -> io.StringIO:
    """Captured diagnostic stream."""
    return io.StringIO()
