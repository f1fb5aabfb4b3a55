"""Boundary used by the admin surface to trigger a test email.

The admin page and its HTTP route live outside this package. They call
:func:`trigger_test_email` and render the returned payload as-is: either
``{"message": ...}`` on success or ``{"description": ...}`` on failure.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from smtpmail.domain.errors import (
    AuthRejectedError,
    ConnectTimeoutError,
    InvalidRecipientError,
    RejectedError,
    SendError,
    SmtpConnectionError,
    StartTlsRejectedError,
    TlsHandshakeFailedError,
    TransientError,
)
from smtpmail.domain.models import CallerIdentity

if TYPE_CHECKING:
    from smtpmail.application.ports import MailerPort

logger = logging.getLogger(__name__)

MAIL_DISABLED_MESSAGE: Final[str] = "Email is not configured on this server"
NOT_ADMIN_DESCRIPTION: Final[str] = "Only administrators can send test emails"
GENERIC_FAILURE_DESCRIPTION: Final[str] = "Email delivery failed. Check SMTP configuration."

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "auth",
        "secret",
        "token",
        "key",
        "login",
    }
)

_CONNECTION_DESCRIPTIONS: Final[dict[type[SmtpConnectionError], str]] = {
    AuthRejectedError: "The SMTP server rejected the configured username or password.",
    TlsHandshakeFailedError: "Could not establish a TLS connection with the SMTP server.",
    StartTlsRejectedError: "The SMTP server does not accept STARTTLS. Check SMTP_TLS_MODE and SMTP_PORT.",
    ConnectTimeoutError: "Timed out connecting to the SMTP server.",
}


def sanitize_exception_message(exc: Exception) -> str:
    """Sanitize exception message to prevent credential exposure.

    Example:
        >>> sanitize_exception_message(RuntimeError("Connection failed"))
        'Connection failed'
        >>> sanitize_exception_message(RuntimeError("Auth password rejected"))
        'Email delivery failed. Check SMTP configuration.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return GENERIC_FAILURE_DESCRIPTION
    return str(exc)


def describe_failure(exc: Exception) -> str:
    """Return a short, display-safe description of a failed test send."""
    for error_type, description in _CONNECTION_DESCRIPTIONS.items():
        if isinstance(exc, error_type):
            return description
    if isinstance(exc, RejectedError):
        return f"The SMTP server permanently rejected the message at {exc.stage or 'delivery'}."
    if isinstance(exc, TransientError):
        return "The SMTP server temporarily refused the message. Try again later."
    return sanitize_exception_message(exc)


def trigger_test_email(caller: CallerIdentity, mailer: MailerPort | None) -> dict[str, str]:
    """Send a test email to the calling administrator's own address.

    Args:
        caller: Authenticated identity from the admin surface.
        mailer: Configured mailer, or None when mail is disabled.

    Returns:
        ``{"message": ...}`` on success (or when mail is disabled),
        ``{"description": ...}`` on failure. Non-admin callers are refused
        before the mail status is revealed.
    """
    if not caller.is_admin:
        logger.warning("Test email requested by non-admin caller", extra={"caller": caller.email})
        return {"description": NOT_ADMIN_DESCRIPTION}
    if mailer is None:
        return {"message": MAIL_DISABLED_MESSAGE}

    try:
        result = mailer.send_test(caller.email)
    except (SmtpConnectionError, SendError, InvalidRecipientError) as exc:
        logger.warning("Test email failed", extra={"caller": caller.email, "error_type": type(exc).__name__})
        return {"description": describe_failure(exc)}
    except Exception:
        logger.exception("Test email failed unexpectedly", extra={"caller": caller.email})
        return {"description": GENERIC_FAILURE_DESCRIPTION}

    logger.info("Test email sent", extra={"caller": caller.email, "message_id": result.message_id})
    return {"message": result.message}


__all__ = [
    "GENERIC_FAILURE_DESCRIPTION",
    "MAIL_DISABLED_MESSAGE",
    "NOT_ADMIN_DESCRIPTION",
    "describe_failure",
    "sanitize_exception_message",
    "trigger_test_email",
]
