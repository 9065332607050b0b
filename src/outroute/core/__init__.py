# outroute:header:start
#
#   project      : OutRoute
#   file         : __init__.py
#   file_relpath : src/outroute/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Core, UI-agnostic primitives shared across OutRoute.

Included modules:

- ``enum_mixins``
  Typing-friendly Enum utilities (keyed enums with labels and aliases,
  introspection helpers) that remain independent of CLI rendering.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.
"""

from __future__ import annotations
