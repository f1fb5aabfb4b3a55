"""Send test email CLI command.

Runs the same boundary the admin surface uses (:func:`trigger_test_email`),
with the operator acting as the administrator.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from smtpmail.adapters.mail.admin import trigger_test_email
from smtpmail.domain.models import CallerIdentity

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ...exit_codes import ExitCode
from ._common import resolve_smtp_config_or_exit

logger = logging.getLogger(__name__)


@click.command("send-test-email", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "recipient", required=True, help="Address that receives the test email")
@click.pass_context
def cli_send_test_email(ctx: click.Context, recipient: str) -> None:
    """Send a test email to verify the SMTP configuration end to end.

    Prints the confirmation on success. When mail is disabled the
    "not configured" message is printed and the command still succeeds;
    delivery failures exit with 69.
    """
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "send-test-email", "recipient": recipient}

    with lib_log_rich.runtime.bind(job_id="cli-send-test-email", extra=extra):
        smtp_config = resolve_smtp_config_or_exit(cli_ctx, allow_disabled=True)
        mailer = cli_ctx.build_mailer(smtp_config) if smtp_config is not None else None

        response = trigger_test_email(CallerIdentity(email=recipient, is_admin=True), mailer)
        if "message" in response:
            click.echo(f"\n{response['message']}")
            return

        logger.error("Test email failed", extra={"description": response["description"]})
        click.echo(f"\nError: {response['description']}", err=True)
        raise SystemExit(ExitCode.SMTP_FAILURE)


__all__ = ["cli_send_test_email"]
