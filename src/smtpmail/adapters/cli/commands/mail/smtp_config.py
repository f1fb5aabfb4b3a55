"""Resolved SMTP configuration CLI command."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from smtpmail.adapters.mail.config import SmtpConfig
from smtpmail.domain.enums import OutputFormat

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import resolve_smtp_config_or_exit

logger = logging.getLogger(__name__)

_REDACTED = "[REDACTED]"


def _redacted_fields(smtp_config: SmtpConfig) -> dict[str, object]:
    """Return the config as display-safe primitives.

    Example:
        >>> from smtpmail.domain.enums import TlsMode
        >>> config = SmtpConfig(
        ...     address="smtp.example.com", username="u", password="hunter2",
        ...     tls_mode=TlsMode.IMPLICIT, default_from_email="a@example.com",
        ... )
        >>> _redacted_fields(config)["password"]
        '[REDACTED]'
    """
    fields = smtp_config.model_dump(mode="json")
    fields["password"] = _REDACTED
    fields["effective_sender"] = smtp_config.effective_sender.header
    return fields


@click.command("smtp-config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_smtp_config(ctx: click.Context, output_format: str) -> None:
    """Show the SMTP settings resolved from ``.env`` and the environment.

    The password is never printed. Exits with 78 when the settings are
    invalid or mail is disabled.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-smtp-config", extra={"command": "smtp-config", "format": fmt.value}):
        smtp_config = resolve_smtp_config_or_exit(cli_ctx)
        assert smtp_config is not None
        logger.info("Displaying SMTP configuration")
        fields = _redacted_fields(smtp_config)

        if fmt == OutputFormat.JSON:
            click.echo(orjson.dumps(fields, option=orjson.OPT_INDENT_2).decode())
            return

        click.echo("\nSMTP configuration:\n")
        pad = max(len(key) for key in fields)
        for key, value in fields.items():
            click.echo(f"    {key.ljust(pad)} = {'' if value is None else value}")


__all__ = ["cli_smtp_config"]
