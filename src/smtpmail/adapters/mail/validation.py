"""Recipient validation shared between production and test adapters.

Raises the domain's InvalidRecipientError rather than library-specific
exceptions.
"""

from __future__ import annotations

from btx_lib_mail import validate_email_address

from smtpmail.domain.errors import InvalidRecipientError


def validate_recipient(recipient: str) -> None:
    """Validate a single email address.

    Args:
        recipient: Email address to validate.

    Raises:
        InvalidRecipientError: When the email address is invalid.

    Example:
        >>> validate_recipient("valid@example.com")  # no exception
        >>> validate_recipient("invalid")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidRecipientError: Invalid recipient: invalid
    """
    try:
        validate_email_address(recipient)
    except ValueError as e:
        raise InvalidRecipientError(f"Invalid recipient: {recipient}") from e


__all__ = ["validate_recipient"]
