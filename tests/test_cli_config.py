"""CLI config stories: display, JSON format, sections, profile, redaction."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from smtpmail.adapters import cli as cli_mod
from smtpmail.adapters.cli.exit_codes import ExitCode
from smtpmail.composition import AppServices, build_production, build_testing


@pytest.fixture
def profile_capturing_factory(
    config_factory: Callable[[dict[str, Any]], Config],
) -> Callable[[list[str | None]], Callable[[], AppServices]]:
    """Wire services whose get_config records the profile it was asked for."""

    def _create(captured: list[str | None]) -> Callable[[], AppServices]:
        config = config_factory({"mail": {"app_name": "Acme Portal"}})
        base = build_testing()

        def _capturing_get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
            captured.append(profile)
            return config

        services = AppServices(
            get_config=_capturing_get_config,
            display_config=build_production().display_config,
            init_logging=base.init_logging,
            load_environment=base.load_environment,
            resolve_mailer_config=base.resolve_mailer_config,
            build_mailer=base.build_mailer,
        )
        return lambda: services

    return _create


# ======================== Display ========================


@pytest.mark.os_agnostic
def test_config_displays_the_mail_section(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """The merged configuration is rendered section by section."""
    factory = config_cli_context({"mail": {"app_name": "Acme Portal"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "mail" in result.output
    assert "app_name" in result.output
    assert "Acme Portal" in result.output


@pytest.mark.os_agnostic
def test_config_json_format_emits_json(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """--format json renders a JSON document."""
    factory = config_cli_context({"mail": {"app_name": "Acme Portal"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    assert orjson.loads(result.stdout)["mail"]["app_name"] == "Acme Portal"


@pytest.mark.os_agnostic
def test_config_section_limits_output_to_that_section(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """--section shows only the requested table."""
    factory = config_cli_context(
        {
            "mail": {"app_name": "Acme Portal"},
            "lib_log_rich": {"service": "acme-mailer"},
        }
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "mail"], obj=factory)

    assert result.exit_code == 0
    assert "Acme Portal" in result.output
    assert "acme-mailer" not in result.output


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", ["human", "json"])
def test_config_unknown_section_exits_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
    output_format: str,
) -> None:
    """An unknown section is reported and exits with 22."""
    factory = config_cli_context({"mail": {"app_name": "Acme Portal"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", output_format, "--section", "smtp"], obj=factory
    )

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.output


@pytest.mark.os_agnostic
def test_config_with_bundled_defaults_shows_mail_section(
    cli_runner: CliRunner,
    clear_config_cache: None,
    tmp_path: Any,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The shipped defaultconfig.toml provides the ``[mail]`` section."""
    monkeypatch.chdir(tmp_path)
    production = build_production()
    testing = build_testing()
    services = AppServices(
        get_config=production.get_config,
        display_config=production.display_config,
        init_logging=testing.init_logging,
        load_environment=testing.load_environment,
        resolve_mailer_config=testing.resolve_mailer_config,
        build_mailer=testing.build_mailer,
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "mail"], obj=lambda: services)

    assert result.exit_code == 0
    assert "app_name" in result.output


# ======================== Profile ========================


@pytest.mark.os_agnostic
def test_root_profile_option_reaches_get_config(
    cli_runner: CliRunner,
    profile_capturing_factory: Callable[[list[str | None]], Callable[[], AppServices]],
) -> None:
    """--profile on the root group selects the configuration profile."""
    captured: list[str | None] = []

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["--profile", "staging", "config"], obj=profile_capturing_factory(captured)
    )

    assert result.exit_code == 0
    assert captured == ["staging"]


@pytest.mark.os_agnostic
def test_without_profile_get_config_receives_none(
    cli_runner: CliRunner,
    profile_capturing_factory: Callable[[list[str | None]], Callable[[], AppServices]],
) -> None:
    """No --profile means the default configuration layers."""
    captured: list[str | None] = []

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=profile_capturing_factory(captured))

    assert result.exit_code == 0
    assert captured == [None]


# ======================== Redaction ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", ["human", "json"])
def test_config_redacts_password_like_keys(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
    output_format: str,
) -> None:
    """Keys named like credentials never reach the terminal."""
    factory = config_cli_context(
        {
            "mail": {
                "app_name": "Acme Portal",
                "smtp_password": "super_secret_123",
            }
        }
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", output_format], obj=factory)

    assert result.exit_code == 0
    assert "super_secret_123" not in result.output
    assert "REDACTED" in result.output
    assert "Acme Portal" in result.output
