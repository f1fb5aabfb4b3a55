"""Mail adapter - SMTP configuration, transport and sending.

Structure:
    * :mod:`.config` - SmtpConfig model and environment resolver
    * :mod:`.environment` - ``.env`` + ``os.environ`` snapshot
    * :mod:`.transport` - Connect, negotiate TLS, authenticate
    * :mod:`.mailer` - Compose and send messages, test email
    * :mod:`.admin` - Test email trigger for the admin surface
    * :mod:`.validation` - Recipient validation
"""

from __future__ import annotations

from .admin import trigger_test_email
from .config import SmtpConfig, parse_legacy_from, resolve_mailer_config, resolve_smtp_config
from .environment import load_environment
from .mailer import Mailer, build_mailer
from .transport import SmtpSession, open_session

__all__ = [
    "Mailer",
    "SmtpConfig",
    "SmtpSession",
    "build_mailer",
    "load_environment",
    "open_session",
    "parse_legacy_from",
    "resolve_mailer_config",
    "resolve_smtp_config",
    "trigger_test_email",
]
