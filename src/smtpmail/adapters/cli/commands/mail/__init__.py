"""Mail CLI commands.

Contents:
    * :func:`.smtp_config.cli_smtp_config` - Show resolved SMTP settings.
    * :func:`.send_email.cli_send_email` - Send a plain-text email.
    * :func:`.send_test_email.cli_send_test_email` - Send the SMTP test email.
"""

from __future__ import annotations

from .send_email import cli_send_email
from .send_test_email import cli_send_test_email
from .smtp_config import cli_smtp_config

__all__ = ["cli_send_email", "cli_send_test_email", "cli_smtp_config"]
