"""Package information CLI command.

Contents:
    * :func:`cli_info` - Display package metadata and the mail status.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from smtpmail import __init__conf__
from smtpmail.domain.errors import ConfigError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context

logger = logging.getLogger(__name__)


def _describe_mail_status(cli_ctx: CLIContext) -> str:
    """One line summarising whether and how mail is configured; never raises ConfigError."""
    try:
        smtp_config = cli_ctx.resolve_smtp()
    except ConfigError as exc:
        return f"misconfigured ({exc})"
    if smtp_config is None:
        return "disabled"
    return f"smtp {smtp_config.address}:{smtp_config.port} ({smtp_config.tls_mode.value})"


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print package metadata and whether mail is enabled."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        click.echo(f"\n    mail = {_describe_mail_status(cli_ctx)}")


__all__ = ["cli_info"]
