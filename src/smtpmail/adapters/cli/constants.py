"""Constants shared by the CLI commands.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - ``-h``/``--help`` on every command.
    * :data:`TRACEBACK_SUMMARY_LIMIT` / :data:`TRACEBACK_VERBOSE_LIMIT` - traceback truncation.
    * :data:`DEVELOPMENT_MODE_ENV` - re-raise unexpected send failures instead of exiting 1.
"""

from __future__ import annotations

from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Characters of traceback printed without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Characters of traceback printed with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

#: When set to any non-empty value, unexpected errors in mail commands propagate
#: to the entry point so ``--traceback`` can show them in full.
DEVELOPMENT_MODE_ENV: Final[str] = "DEVELOPMENT_MODE"

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "DEVELOPMENT_MODE_ENV",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
