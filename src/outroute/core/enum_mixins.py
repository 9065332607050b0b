# outroute:header:start
#
#   project      : OutRoute
#   file         : enum_mixins.py
#   file_relpath : src/outroute/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Generic Enum utilities for OutRoute (typing-friendly, UI-agnostic).

This module provides helpers that add lightweight *introspection* and parsing
to Enum types without binding callers to UI/CLI concerns (like color). Keep
rendering-specific concepts in ``outroute.rendering``.

Provided:
    - ``EnumIntrospectionMixin``:
        Adds ``.value_length`` (cached) to any Enum subclass for formatting.
    - ``KeyedStrEnum``:
        ``str`` Enum whose ``.value`` is a stable machine key, with a human
        label and parse aliases attached to each member.

Example:
    ```python
    class Mode(EnumIntrospectionMixin, KeyedStrEnum):
        QUIET = ("quiet", "Quiet", ("q",))
        NORMAL = ("normal", "Normal", ("default",))

    assert Mode.parse("default") is Mode.NORMAL
    assert Mode.QUIET.value_length == 6
    ```
"""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


class EnumIntrospectionMixin:
    """Small, UI-agnostic mixin that adds introspection conveniences to Enums.

    When mixed into an Enum class, provides:

        - ``value_length`` (cached_property): maximum length (in characters) of all
          ``.value`` strings for the enum class. Useful for printing aligned labels.
    """

    @cached_property
    def value_length(self) -> int:
        """Maximum length of the enum's ``.value`` strings.

        Returns:
            int: The maximum length among all member ``.value`` strings of the
            enum class that this member belongs to.
        """
        # Pyright doesn't know 'self' is an Enum member; runtime guarantees it.
        return max(len(member.value) for member in type(self))  # type: ignore[attr-defined]


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return self.value

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key (`.value`), the member name (`.name`)
        and any configured aliases. Matching is case-insensitive and
        normalizes '-' and ' ' to '_'.

        Args:
            raw (str | None): Token to parse. ``None`` yields ``None``.

        Returns:
            _KS | None: The matching member, or ``None`` if nothing matches.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None
