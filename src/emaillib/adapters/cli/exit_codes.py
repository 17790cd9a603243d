"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational constants only; the
application never raises ``SystemExit`` with these values because
``lib_cli_exit_tools`` translates signals itself.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0–1: generic success / failure
    * 2: ENOENT (missing attachment)
    * 22: EINVAL (bad option or configuration value)
    * 69: EX_UNAVAILABLE (relay refused or unreachable)
    * 78: EX_CONFIG (no relay host configured)
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.SMTP_FAILURE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    SMTP_FAILURE = 69
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
