# outroute:header:start
#
#   project      : OutRoute
#   file         : cli_types.py
#   file_relpath : src/outroute/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Shared Click parameter types for OutRoute."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Iterable, NoReturn, Protocol, TypeVar, cast

import click

from outroute.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumChoiceParam
E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        # Assume the enum exposes string-valued members (e.g., ColorMode)
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        # Case-insensitive lookup by the enum's string value
        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }

        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_OUTROUTE_COMPLETE=bash_source outroute)"`
        Zsh: `eval "$(_OUTROUTE_COMPLETE=zsh_source outroute)"`
        """
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]


# Type variable bounded to KeyedStrEnum for KeyedEnumParam
K = TypeVar("K", bound=KeyedStrEnum)


class KeyedEnumParam(ParamTypeBase, Generic[K]):
    """A Click parameter type that parses keys, names and aliases of a `KeyedStrEnum`.

    Shell completion offers the machine keys, with each member's label as help.
    """

    enum_cls: type[K]
    name: str

    def __init__(self, enum_cls: type[K]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()

    def convert(
        self,
        value: str | K | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> K | None:
        """Converts a key, member name or alias to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        member: K | None = self.enum_cls.parse(str(value))
        if member is None:
            tokens: list[str] = []
            for m in self.enum_cls:
                tokens.append(m.key)
                tokens.extend(m.aliases)
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {', '.join(tokens)}",
                param=param,
                ctx=ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click, with member labels as help text."""
        from click.shell_completion import CompletionItem

        return [
            CompletionItem(m.key, help=m.label)
            for m in self.enum_cls
            if m.key.startswith(incomplete.lower())
        ]
