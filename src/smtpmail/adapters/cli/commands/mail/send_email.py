"""Send email CLI command."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import execute_with_mail_error_handling, resolve_smtp_config_or_exit

logger = logging.getLogger(__name__)


@click.command("send-email", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "recipient", required=True, help="Recipient email address")
@click.option("--subject", required=True, help="Email subject line")
@click.option("--body", default="", help="Plain-text email body")
@click.pass_context
def cli_send_email(ctx: click.Context, recipient: str, subject: str, body: str) -> None:
    """Send a plain-text email from the configured default sender.

    Example:
        >>> from click.testing import CliRunner
        >>> # Real invocation tested in test_cli_mail.py
    """
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "send-email", "recipient": recipient, "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-email", extra=extra):
        smtp_config = resolve_smtp_config_or_exit(cli_ctx)
        assert smtp_config is not None
        mailer = cli_ctx.build_mailer(smtp_config)
        message = mailer.compose(to=recipient, subject=subject, body=body)

        logger.info("Sending email", extra={"recipient": recipient, "has_body": bool(body)})
        execute_with_mail_error_handling(operation=lambda: mailer.send(message), recipient=recipient)


__all__ = ["cli_send_email"]
