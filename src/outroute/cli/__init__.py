# outroute:header:start
#
#   project      : OutRoute
#   file         : __init__.py
#   file_relpath : src/outroute/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""OutRoute CLI package.

This package groups all Click command definitions and supporting utilities
for the OutRoute command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        outroute = "outroute.cli.main:cli"

All subcommands live in [`outroute.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
