# outroute:header:start
#
#   project      : OutRoute
#   file         : __main__.py
#   file_relpath : src/outroute/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Module entry point for running OutRoute via ``python -m outroute``.

It delegates directly to :func:`outroute.cli.main.cli`, so the module
interface and the ``outroute`` console script behave identically.

Examples:
    Show the routing table for quiet mode::

        python -m outroute -q routes
"""

from __future__ import annotations

from outroute.cli.main import cli

if __name__ == "__main__":
    cli()
