# outroute:header:start
#
#   project      : OutRoute
#   file         : constants.py
#   file_relpath : src/outroute/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""OutRoute Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

OUTROUTE_VERSION: str = get_version("outroute")

# Environment variables consulted by the CLI
LOG_LEVEL_ENV: str = "OUTROUTE_LOG_LEVEL"
NO_PROGRESS_ENV: str = "OUTROUTE_NO_PROGRESS"
