"""Per-invocation CLI state shared by the root group and the mail commands.

Contents:
    * :class:`CLIContext` - loaded config, wired services and the mail helpers
      every mail command needs (resolve SMTP settings, build a mailer).
    * :class:`TracebackSettings` - the two ``lib_cli_exit_tools`` traceback
      flags as one value that can be captured and reapplied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from smtpmail.adapters.config.loader import MailSettings, load_mail_settings

if TYPE_CHECKING:
    from smtpmail.adapters.mail.config import SmtpConfig
    from smtpmail.application.ports import MailerPort
    from smtpmail.composition import AppServices


@dataclass(frozen=True, slots=True)
class TracebackSettings:
    """Traceback flags of ``lib_cli_exit_tools``; colour always follows ``enabled``.

    Example:
        >>> TracebackSettings(enabled=True).apply()
        >>> TracebackSettings.current().enabled
        True
        >>> TracebackSettings(enabled=False).apply()
    """

    enabled: bool
    force_color: bool | None = None

    @classmethod
    def current(cls) -> TracebackSettings:
        config = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    def apply(self) -> None:
        force_color = self.enabled if self.force_color is None else self.force_color
        lib_cli_exit_tools.config.traceback = bool(self.enabled)
        lib_cli_exit_tools.config.traceback_force_color = bool(force_color)


@dataclass(slots=True)
class CLIContext:
    """State the root group hands to every subcommand through ``ctx.obj``."""

    config: Config
    services: AppServices
    traceback: bool = False
    profile: str | None = None

    @property
    def mail_settings(self) -> MailSettings:
        """The ``[mail]`` section of the loaded configuration."""
        return load_mail_settings(self.config)

    def resolve_smtp(self) -> SmtpConfig | None:
        """Resolve SMTP settings from the ``.env`` and process environment.

        Returns:
            The validated configuration, or None when mail is disabled.

        Raises:
            ConfigError: When ``MAILER_TYPE=smtp`` but the settings are unusable.
        """
        return self.services.resolve_mailer_config(self.services.load_environment())

    def build_mailer(self, smtp_config: SmtpConfig) -> MailerPort:
        """Build a mailer whose test-email body names the configured application."""
        return self.services.build_mailer(smtp_config, app_name=self.mail_settings.app_name)


def store_cli_context(ctx: click.Context, cli_ctx: CLIContext) -> CLIContext:
    """Replace the services factory in ``ctx.obj`` with the built context."""
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the context stored by the root group.

    Raises:
        RuntimeError: If a subcommand runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


__all__ = [
    "CLIContext",
    "TracebackSettings",
    "get_cli_context",
    "store_cli_context",
]
