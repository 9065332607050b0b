# outroute:header:start
#
#   project      : OutRoute
#   file         : exit_codes.py
#   file_relpath : src/outroute/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# outroute:header:end

"""Exit codes for the OutRoute CLI.

OutRoute aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the OutRoute CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid or conflicting
            flags). Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: The underlying output stream failed. Mirrors BSD
            ``EX_IOERR (74)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR

    UNEXPECTED_ERROR = 255
