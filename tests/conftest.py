"""Shared pytest fixtures for resolver, transport, mailer and CLI tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from smtpmail.adapters.mail.config import SmtpConfig
from smtpmail.domain.enums import TlsMode

if TYPE_CHECKING:
    from smtpmail.adapters.memory.mail import MailerSpy
    from smtpmail.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

SMTP_PASSWORD = "s3cr3t-pa55"


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from smtpmail.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_mail_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"mail": {"app_name": "Acme"}})
            assert config.get("mail.app_name") == "Acme"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def smtp_env() -> dict[str, str]:
    """Return a complete, valid ``MAILER_TYPE=smtp`` environment.

    Tests copy and tweak it: ``{**smtp_env, "SMTP_PORT": "587"}``.
    """
    return {
        "MAILER_TYPE": "smtp",
        "SMTP_ADDRESS": "smtp.example.com",
        "SMTP_USERNAME": "mailer",
        "SMTP_PASSWORD": SMTP_PASSWORD,
        "SMTP_DEFAULT_FROM_EMAIL": "noreply@example.com",
        "SMTP_DEFAULT_FROM_NAME": "Example App",
    }


@pytest.fixture
def smtp_config_factory() -> Callable[..., SmtpConfig]:
    """Build SmtpConfig instances with sensible defaults overridable per test.

    Example:
        def test_starttls(smtp_config_factory: Callable[..., SmtpConfig]) -> None:
            config = smtp_config_factory(port=587, tls_mode=TlsMode.STARTTLS)
    """

    def _factory(**overrides: Any) -> SmtpConfig:
        values: dict[str, Any] = {
            "address": "smtp.example.com",
            "username": "mailer",
            "password": SMTP_PASSWORD,
            "port": 465,
            "tls_mode": TlsMode.IMPLICIT,
            "default_from_email": "noreply@example.com",
            "default_from_name": "Example App",
            "timeout": 5.0,
        }
        values.update(overrides)
        return SmtpConfig(**values)

    return _factory


@dataclass
class MailCliContext:
    """Container for mail CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: MailerSpy instance for asserting on sent messages.
    """

    factory: Callable[[], Any]
    spy: MailerSpy


@pytest.fixture
def mail_cli_context(
    clear_config_cache: None,
) -> Callable[..., MailCliContext]:
    """Create mail CLI test context with an injected environment and spy.

    Returns a function taking the raw ``MAILER_TYPE``/``SMTP_*`` mapping (and
    optionally a layered config dict) and returning the services factory plus
    the spy that captures sends.

    Example:
        def test_send_email(
            cli_runner: CliRunner,
            mail_cli_context: Callable[..., MailCliContext],
            smtp_env: dict[str, str],
        ) -> None:
            ctx = mail_cli_context(smtp_env)
            result = cli_runner.invoke(cli, ["send-email", "--to", "a@b.com", "--subject", "Hi"], obj=ctx.factory)
            assert ctx.spy.sent[0].subject == "Hi"
    """
    from smtpmail.adapters.memory import MailerSpy as MailerSpyImpl
    from smtpmail.composition import AppServices, build_testing

    def _create(environment: dict[str, str], config_data: dict[str, Any] | None = None) -> MailCliContext:
        spy = MailerSpyImpl()
        base = build_testing(spy=spy, environment=environment)
        config = Config(config_data or {}, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=base.display_config,
            init_logging=base.init_logging,
            load_environment=base.load_environment,
            resolve_mailer_config=base.resolve_mailer_config,
            build_mailer=base.build_mailer,
        )
        return MailCliContext(factory=lambda: test_services, spy=spy)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create CLI test context with injected layered config and real display.

    Example:
        def test_config_display(
            cli_runner: CliRunner,
            config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
        ) -> None:
            factory = config_cli_context({"section": {"key": "value"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "key" in result.output
    """
    from smtpmail.composition import AppServices, build_production, build_testing

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()
        base = build_testing()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=base.init_logging,
            load_environment=base.load_environment,
            resolve_mailer_config=base.resolve_mailer_config,
            build_mailer=base.build_mailer,
        )
        return lambda: test_services

    return _create
