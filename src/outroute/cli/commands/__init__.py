# outroute:header:start
#
#   project      : OutRoute
#   file         : __init__.py
#   file_relpath : src/outroute/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""OutRoute CLI subcommands.

- ``routes``: report how output is routed for the active mode (or all modes).
- ``echo``: write text to a chosen output channel.
- ``progress``: drive a progress bar honoring the active mode.
- ``version``: print the installed version.
"""

from __future__ import annotations
