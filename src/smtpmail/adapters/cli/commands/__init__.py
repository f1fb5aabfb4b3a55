"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info commands from :mod:`.info`
    * Config commands from :mod:`.config`
    * Mail commands from :mod:`.mail` (subpackage)
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .mail import cli_send_email, cli_send_test_email, cli_smtp_config

__all__ = [
    "cli_config",
    "cli_info",
    "cli_send_email",
    "cli_send_test_email",
    "cli_smtp_config",
]
