# outroute:header:start
#
#   project      : OutRoute
#   file         : __init__.py
#   file_relpath : src/outroute/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Runtime configuration for OutRoute (internal logging)."""

from __future__ import annotations
