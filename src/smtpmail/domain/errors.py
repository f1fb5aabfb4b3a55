"""Domain-specific exceptions for typed error handling at boundaries.

Three families map to the three places a mail operation can fail:

* :class:`ConfigError` - startup-time, fatal for the mail subsystem.
* :class:`SmtpConnectionError` - per-send, while connecting/negotiating/authenticating.
* :class:`SendError` - per-send, while transmitting a message.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Missing, invalid, or incomplete SMTP configuration.

    Raised by the configuration resolver. Typically caught at startup or at
    CLI boundaries to provide user-friendly error messages.

    Example:
        >>> err = ConfigError("SMTP configuration is invalid")
        >>> str(err)
        'SMTP configuration is invalid'
    """


class MissingFieldError(ConfigError):
    """A required environment key is absent or blank.

    Example:
        >>> err = MissingFieldError("SMTP_ADDRESS")
        >>> err.field
        'SMTP_ADDRESS'
        >>> str(err)
        'Missing required setting: SMTP_ADDRESS'
    """

    def __init__(self, field: str, detail: str | None = None) -> None:
        self.field = field
        message = f"Missing required setting: {field}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidLegacyFromError(ConfigError):
    """The deprecated ``SMTP_DEFAULT_FROM`` value could not be parsed.

    Example:
        >>> str(InvalidLegacyFromError("Jane Doe <jane>"))
        "Invalid SMTP_DEFAULT_FROM 'Jane Doe <jane>': expected 'Name <email>'"
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid SMTP_DEFAULT_FROM {value!r}: expected 'Name <email>'")


class InvalidTlsModeError(ConfigError):
    """``SMTP_TLS_MODE`` holds a value outside ``starttls|implicit|none``.

    Example:
        >>> err = InvalidTlsModeError("ssl")
        >>> err.value
        'ssl'
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid SMTP_TLS_MODE {value!r}. Valid values are: starttls, implicit, none")


class InvalidFieldError(ConfigError):
    """A present environment key holds a malformed value.

    Example:
        >>> err = InvalidFieldError("SMTP_PORT", "must be an integer")
        >>> str(err)
        'Invalid SMTP_PORT: must be an integer'
    """

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field}: {detail}")


class SmtpConnectionError(Exception):
    """Connecting to, negotiating with, or authenticating against the server failed.

    Named to avoid shadowing the builtin :class:`ConnectionError`. Used
    directly for plain network failures (refused, unreachable, DNS).

    Example:
        >>> err = SmtpConnectionError("Connection refused by smtp.example.com:587")
        >>> str(err)
        'Connection refused by smtp.example.com:587'
    """


class TlsHandshakeFailedError(SmtpConnectionError):
    """The TLS handshake (implicit or after STARTTLS) failed."""


class StartTlsRejectedError(SmtpConnectionError):
    """The server did not advertise or refused the STARTTLS upgrade."""


class AuthRejectedError(SmtpConnectionError):
    """The server rejected the credentials (e.g. SMTP 535) or offers no AUTH."""


class ConnectTimeoutError(SmtpConnectionError):
    """Connect, handshake, or authentication exceeded the configured timeout."""


class SendError(Exception):
    """The server refused a message transaction.

    Attributes:
        code: SMTP reply code, or None when the connection dropped.
        stage: SMTP stage that failed (``MAIL FROM``, ``RCPT TO``, ``DATA``).

    Example:
        >>> err = SendError("Recipient refused", code=550, stage="RCPT TO")
        >>> (err.code, err.stage)
        (550, 'RCPT TO')
    """

    def __init__(self, message: str, *, code: int | None = None, stage: str | None = None) -> None:
        self.code = code
        self.stage = stage
        super().__init__(message)


class RejectedError(SendError):
    """Permanent (5xx) failure. Retrying the same message will not help."""


class TransientError(SendError):
    """Temporary (4xx) failure or dropped connection. The caller may retry."""


class InvalidRecipientError(ValueError):
    """Email address validation failure.

    Inherits from ValueError so generic ``except ValueError`` handlers
    still catch it.

    Example:
        >>> err = InvalidRecipientError("Invalid recipient: not-an-email")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "AuthRejectedError",
    "ConfigError",
    "ConnectTimeoutError",
    "InvalidFieldError",
    "InvalidLegacyFromError",
    "InvalidRecipientError",
    "InvalidTlsModeError",
    "MissingFieldError",
    "RejectedError",
    "SendError",
    "SmtpConnectionError",
    "StartTlsRejectedError",
    "TlsHandshakeFailedError",
    "TransientError",
]
