# outroute:header:start
#
#   project      : OutRoute
#   file         : __init__.py
#   file_relpath : src/outroute/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Click-independent CLI helpers (console protocol, color resolution)."""

from __future__ import annotations
