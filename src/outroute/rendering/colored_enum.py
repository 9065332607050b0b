# outroute:header:start
#
#   project      : OutRoute
#   file         : colored_enum.py
#   file_relpath : src/outroute/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Color-aware enum primitives for human-facing rendering.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer (e.g., a yachalk style). The enum `.value` remains a plain
      string, while the colorizer is exposed via `.color`.

Example:
    ```python
    from yachalk import chalk

    class State(ColoredStrEnum):
        ON = ("on", chalk.green)
        OFF = ("off", chalk.dim)

    print(State.ON.value)             # 'on'
    print(State.ON.color("hello"))    # green "hello"
    print(State.ON.render(color=False))  # 'on'
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Designed to be compatible with `yachalk.ChalkBuilder.__call__`, which
    accepts a variadic list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values
                are provided. Defaults to a single space.

        Returns:
            str: The colorized and concatenated output string.
        """
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The enum member remains a `str` (so Enum internals, hashing, repr, etc.
    behave normally), and the colorizer is stored separately on the instance.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    def __str__(self) -> str:
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member.

        Returns:
            Colorizer: A callable that decorates strings for display.
        """
        return self._color

    def render(self, *, color: bool, width: int = 0) -> str:
        """Return the member's value padded to ``width``, colorized if requested.

        Padding is applied before coloring so ANSI codes do not skew alignment.

        Args:
            color (bool): Whether to apply the member's colorizer.
            width (int): Minimum width of the (uncolored) text.

        Returns:
            str: The display string.
        """
        text: str = self._value_.ljust(width)
        return self._color(text) if color else text
