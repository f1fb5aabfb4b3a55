"""Application ports — callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``SmtpConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat
from ..domain.models import EffectiveSender, OutgoingMessage, SendResult

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.mail.config import SmtpConfig


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadEnvironment(Protocol):
    """Snapshot the raw ``MAILER_TYPE``/``SMTP_*`` environment values."""

    def __call__(self, start_dir: str | None = ...) -> dict[str, str]: ...


class ResolveMailerConfig(Protocol):
    """Resolve raw environment values into SmtpConfig, or None when mail is disabled."""

    def __call__(self, raw_env: Mapping[str, str]) -> SmtpConfig | None: ...


class MailerPort(Protocol):
    """Compose and send messages for one resolved configuration."""

    @property
    def sender(self) -> EffectiveSender: ...

    def compose(self, *, to: str, subject: str, body: str) -> OutgoingMessage: ...

    def send(self, message: OutgoingMessage) -> SendResult: ...

    def send_test(self, recipient_email: str) -> SendResult: ...


class BuildMailer(Protocol):
    """Create a mailer bound to a resolved configuration."""

    def __call__(self, config: SmtpConfig, *, app_name: str | None = ...) -> MailerPort: ...


__all__ = [
    "BuildMailer",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadEnvironment",
    "MailerPort",
    "ResolveMailerConfig",
]
