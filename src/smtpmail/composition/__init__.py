"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Mail services
from ..adapters.mail.config import resolve_mailer_config
from ..adapters.mail.environment import load_environment
from ..adapters.mail.mailer import build_mailer

# Static conformance assertions — pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.mail import MailerSpy
    from ..application.ports import (
        BuildMailer,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadEnvironment,
        ResolveMailerConfig,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_environment: LoadEnvironment = load_environment
    _assert_resolve_mailer_config: ResolveMailerConfig = resolve_mailer_config
    _assert_build_mailer: BuildMailer = build_mailer


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    load_environment: LoadEnvironment
    resolve_mailer_config: ResolveMailerConfig
    build_mailer: BuildMailer


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        load_environment=load_environment,
        resolve_mailer_config=resolve_mailer_config,
        build_mailer=build_mailer,
    )


def build_testing(*, spy: MailerSpy | None = None, environment: dict[str, str] | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional MailerSpy capturing sends. A fresh one is created when None.
        environment: Raw ``MAILER_TYPE``/``SMTP_*`` values to resolve. Empty
            (mail disabled) when None.

    Returns:
        AppServices container with in-memory adapters. Configuration
        resolution is the real resolver.
    """
    from ..adapters.memory import (
        MailerSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_environment_in_memory,
    )

    mailer_spy = spy if spy is not None else MailerSpy()
    env_snapshot = dict(environment) if environment is not None else None

    def _load_environment(start_dir: str | None = None) -> dict[str, str]:
        if env_snapshot is None:
            return load_environment_in_memory(start_dir)
        return dict(env_snapshot)

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_environment=_load_environment,
        resolve_mailer_config=resolve_mailer_config,
        build_mailer=mailer_spy.build,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Logging
    "init_logging",
    # Mail
    "load_environment",
    "resolve_mailer_config",
    "build_mailer",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
