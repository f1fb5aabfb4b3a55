"""Shared utilities for mail CLI commands.

Contains SMTP configuration resolution and error handling shared between
``smtp-config``, ``send-email`` and ``send-test-email``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import TYPE_CHECKING

import rich_click as click

from smtpmail.adapters.mail.admin import sanitize_exception_message
from smtpmail.domain.errors import (
    ConfigError,
    ConnectTimeoutError,
    InvalidRecipientError,
    SendError,
    SmtpConnectionError,
    TransientError,
)

from ...constants import DEVELOPMENT_MODE_ENV
from ...exit_codes import ExitCode

if TYPE_CHECKING:
    from smtpmail.adapters.mail.config import SmtpConfig
    from smtpmail.domain.models import SendResult

    from ...context import CLIContext

logger = logging.getLogger(__name__)

MAIL_DISABLED_HINT = "Email is not configured. Set MAILER_TYPE=smtp and the SMTP_* variables (environment or .env)."


def resolve_smtp_config_or_exit(cli_ctx: CLIContext, *, allow_disabled: bool = False) -> SmtpConfig | None:
    """Resolve SMTP settings from ``.env`` + environment.

    Args:
        cli_ctx: Typed CLI context carrying the services container.
        allow_disabled: Return None instead of exiting when ``MAILER_TYPE``
            is not ``smtp``.

    Raises:
        SystemExit: CONFIG_ERROR (78) on invalid settings, or when mail is
            disabled and ``allow_disabled`` is False.
    """
    try:
        smtp_config = cli_ctx.resolve_smtp()
    except ConfigError as exc:
        logger.error("Invalid SMTP configuration", extra={"error": str(exc), "error_type": type(exc).__name__})
        click.echo(f"\nError: Configuration error - {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    if smtp_config is None and not allow_disabled:
        logger.error("Mail is disabled")
        click.echo(f"\nError: {MAIL_DISABLED_HINT}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR)
    return smtp_config


def execute_with_mail_error_handling(*, operation: Callable[[], SendResult], recipient: str) -> None:
    """Run a send operation and translate mail failures into exit codes.

    Exceptions are caught most specific first:

    1. InvalidRecipientError -> INVALID_ARGUMENT (22)
    2. ConnectTimeoutError -> TIMEOUT (110)
    3. SmtpConnectionError -> SMTP_FAILURE (69)
    4. TransientError -> TEMPORARY_FAILURE (75)
    5. SendError -> SMTP_FAILURE (69)
    6. Exception -> GENERAL_ERROR (1), re-raised when DEVELOPMENT_MODE is set

    Raises:
        SystemExit: On any failure.
    """
    try:
        result = operation()
    except InvalidRecipientError as exc:
        _handle_send_error(exc, "Invalid recipient", "Invalid recipient", exit_code=ExitCode.INVALID_ARGUMENT)
    except ConnectTimeoutError as exc:
        _handle_send_error(exc, "SMTP connection timed out", "Connection timed out", exit_code=ExitCode.TIMEOUT)
    except SmtpConnectionError as exc:
        _handle_send_error(exc, "SMTP connection failed", "Connection failed", exit_code=ExitCode.SMTP_FAILURE)
    except TransientError as exc:
        _handle_send_error(
            exc, "SMTP delivery deferred", "Temporary failure", exit_code=ExitCode.TEMPORARY_FAILURE
        )
    except SendError as exc:
        _handle_send_error(exc, "SMTP delivery failed", "Failed to send email", exit_code=ExitCode.SMTP_FAILURE)
    except Exception as exc:
        if os.environ.get(DEVELOPMENT_MODE_ENV):
            raise
        _handle_send_error(
            exc,
            "Unexpected error sending email",
            "Unexpected error",
            exit_code=ExitCode.GENERAL_ERROR,
            log_traceback=True,
        )
    else:
        logger.info("Email sent via CLI", extra={"recipient": recipient, "message_id": result.message_id})
        click.echo(f"\n{result.message}")


def _handle_send_error(
    exc: Exception,
    log_message: str,
    user_message: str,
    *,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    log_traceback: bool = False,
) -> None:
    """Log *exc*, print a sanitized message and exit with *exit_code*.

    Raises:
        SystemExit: Always.
    """
    logger.error(
        log_message,
        extra={"error": str(exc), "error_type": type(exc).__name__},
        exc_info=log_traceback,
    )
    click.echo(f"\nError: {user_message} - {sanitize_exception_message(exc)}", err=True)
    raise SystemExit(exit_code)


__all__ = [
    "MAIL_DISABLED_HINT",
    "execute_with_mail_error_handling",
    "resolve_smtp_config_or_exit",
]
