"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from datetime import datetime

TEST_EMAIL_SUBJECT = "Test Email - SMTP Configuration"


def build_test_email_body(*, app_name: str, app_version: str, sent_at: datetime) -> str:
    r"""Return the plain-text body of the SMTP verification email.

    Args:
        app_name: Application name shown to the recipient.
        app_version: Application version shown to the recipient.
        sent_at: Timestamp of the send, rendered in UTC.

    Example:
        >>> from datetime import datetime, timezone
        >>> body = build_test_email_body(
        ...     app_name="smtpmail", app_version="1.0.0",
        ...     sent_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        ... )
        >>> "Sent at: 2026-01-02 03:04:05 UTC" in body
        True
    """
    stamp = sent_at.strftime("%Y-%m-%d %H:%M:%S UTC")
    return (
        f"Test Email from {app_name}\n"
        "\n"
        "This is a test email to verify your SMTP configuration is working correctly.\n"
        "If you received this email, your email settings are configured properly!\n"
        "\n"
        "Configuration details:\n"
        f"  - Application: {app_name}\n"
        f"  - Version: {app_version}\n"
        f"  - Sent at: {stamp}\n"
    )


def build_test_confirmation(recipient: str) -> str:
    """Return the confirmation relayed to whoever triggered the test email.

    Example:
        >>> build_test_confirmation("admin@example.com")
        'Test email sent successfully to admin@example.com'
    """
    return f"Test email sent successfully to {recipient}"


__all__ = [
    "TEST_EMAIL_SUBJECT",
    "build_test_confirmation",
    "build_test_email_body",
]
