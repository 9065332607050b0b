# outroute:header:start
#
#   project      : OutRoute
#   file         : formats.py
#   file_relpath : src/outroute/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Output formats shared by reporting commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: Machine-readable JSON document.
    """

    DEFAULT = "default"
    JSON = "json"
