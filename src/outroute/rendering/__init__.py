# outroute:header:start
#
#   project      : OutRoute
#   file         : __init__.py
#   file_relpath : src/outroute/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Rendering helpers for OutRoute.

This package provides CLI/UI-adjacent helpers (colors) that are kept separate
from core, UI-agnostic utilities.

Public modules:
    - outroute.rendering.colored_enum
"""

from __future__ import annotations
