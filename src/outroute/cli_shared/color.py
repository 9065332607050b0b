# outroute:header:start
#
#   project      : OutRoute
#   file         : color.py
#   file_relpath : src/outroute/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Click-independent color helpers for OutRoute.

- `ColorMode` enum.
- Color-mode resolution based on CLI flags, environment, output format and
  whether the stream being written is a terminal.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from outroute.config.logging import OutrouteLogger, get_logger

logger: OutrouteLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when the target stream is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None = None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: If `output_format` is `"json"`, return False.
        2. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        3. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        4. **Auto**: If none of the above decide, return whether the stream is a TTY.

    Args:
        color_mode_override: Parsed `ColorMode` value from `--color`;
            `None` means "not provided".
        output_format: Structured output mode; `"json"` suppresses color.
        stream_isatty: TTY status of the stream the output goes to. When `None`,
            the function calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=None, output_format="json")
        False
    """
    if output_format and output_format.lower() == "json":
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.debug("Color forced on via FORCE_COLOR=%s", force_color)
        return True
    if os.getenv("NO_COLOR") is not None:
        logger.debug("Color disabled via NO_COLOR")
        return False

    if stream_isatty is None:
        try:
            stream_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stream_isatty = False
    return bool(stream_isatty)
