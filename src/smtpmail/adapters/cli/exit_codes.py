"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` — IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0–1: generic success / failure
    * 22: EINVAL (bad recipient, bad option value)
    * 69: EX_UNAVAILABLE (SMTP connection or delivery failed)
    * 75: EX_TEMPFAIL (server asked to try again later)
    * 78: EX_CONFIG (invalid or disabled mail configuration)
    * 110: ETIMEDOUT (connect/handshake timeout)

    Example:
        >>> int(ExitCode.SMTP_FAILURE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    SMTP_FAILURE = 69
    TEMPORARY_FAILURE = 75
    CONFIG_ERROR = 78
    TIMEOUT = 110


__all__ = ["ExitCode"]
