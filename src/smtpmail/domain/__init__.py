"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Test email content
    * :mod:`.enums` - Domain enumerations (TlsMode, OutputFormat)
    * :mod:`.errors` - Domain exception types
    * :mod:`.models` - Value objects (EffectiveSender, OutgoingMessage, SendResult)
    * :mod:`.tls` - TLS mode resolution
"""

from __future__ import annotations

from .behaviors import TEST_EMAIL_SUBJECT, build_test_confirmation, build_test_email_body
from .enums import OutputFormat, TlsMode
from .errors import (
    AuthRejectedError,
    ConfigError,
    ConnectTimeoutError,
    InvalidFieldError,
    InvalidLegacyFromError,
    InvalidRecipientError,
    InvalidTlsModeError,
    MissingFieldError,
    RejectedError,
    SendError,
    SmtpConnectionError,
    StartTlsRejectedError,
    TlsHandshakeFailedError,
    TransientError,
)
from .models import CallerIdentity, EffectiveSender, OutgoingMessage, SendResult
from .tls import infer_tls_mode, resolve_tls_mode

__all__ = [
    # Behaviors
    "TEST_EMAIL_SUBJECT",
    "build_test_confirmation",
    "build_test_email_body",
    # Enums
    "OutputFormat",
    "TlsMode",
    # Errors
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
    # Models
    "CallerIdentity",
    "EffectiveSender",
    "OutgoingMessage",
    "SendResult",
    # TLS
    "infer_tls_mode",
    "resolve_tls_mode",
]
