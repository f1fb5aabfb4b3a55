"""Public package surface: SMTP configuration, mailer and test email trigger.

Imports are routed through the architectural layers:
- Domain exports: TLS strategy, value objects and the error taxonomy
- Adapter exports: resolver, mailer and the admin test-email boundary
- Composition exports: wired configuration loader
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.mail import (
    Mailer,
    SmtpConfig,
    SmtpSession,
    build_mailer,
    load_environment,
    open_session,
    parse_legacy_from,
    resolve_mailer_config,
    resolve_smtp_config,
    trigger_test_email,
)

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    AuthRejectedError,
    CallerIdentity,
    ConfigError,
    ConnectTimeoutError,
    EffectiveSender,
    InvalidFieldError,
    InvalidLegacyFromError,
    InvalidRecipientError,
    InvalidTlsModeError,
    MissingFieldError,
    OutgoingMessage,
    RejectedError,
    SendError,
    SendResult,
    SmtpConnectionError,
    StartTlsRejectedError,
    TlsHandshakeFailedError,
    TlsMode,
    TransientError,
    infer_tls_mode,
    resolve_tls_mode,
)

__all__ = [
    "AuthRejectedError",
    "CallerIdentity",
    "ConfigError",
    "ConnectTimeoutError",
    "EffectiveSender",
    "InvalidFieldError",
    "InvalidLegacyFromError",
    "InvalidRecipientError",
    "InvalidTlsModeError",
    "Mailer",
    "MissingFieldError",
    "OutgoingMessage",
    "RejectedError",
    "SendError",
    "SendResult",
    "SmtpConfig",
    "SmtpConnectionError",
    "SmtpSession",
    "StartTlsRejectedError",
    "TlsHandshakeFailedError",
    "TlsMode",
    "TransientError",
    "build_mailer",
    "get_config",
    "infer_tls_mode",
    "load_environment",
    "open_session",
    "parse_legacy_from",
    "print_info",
    "resolve_mailer_config",
    "resolve_smtp_config",
    "resolve_tls_mode",
    "trigger_test_email",
]
