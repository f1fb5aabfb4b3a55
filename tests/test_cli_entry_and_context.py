"""Entry point and CLIContext stories for the mail commands."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from smtpmail.adapters import cli as cli_mod
from smtpmail.adapters.cli.context import CLIContext, TracebackSettings, get_cli_context
from smtpmail.adapters.cli.exit_codes import ExitCode
from smtpmail.adapters.cli.main import main
from smtpmail.adapters.mail.config import SmtpConfig
from smtpmail.adapters.memory import MailerSpy
from smtpmail.composition import build_testing
from smtpmail.domain.errors import MissingFieldError

# ======================== main() with the mail commands ========================


@pytest.mark.os_agnostic
def test_send_email_without_recipient_is_a_usage_error(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Click reports the missing --to itself and main returns 2."""
    exit_code = main(["send-email", "--subject", "Hello"], services_factory=build_testing)

    assert exit_code == 2
    assert "--to" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_send_test_email_with_mail_disabled_returns_success(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """The not-configured message is printed and the run still succeeds."""
    exit_code = main(["send-test-email", "--to", "admin@example.com"], services_factory=build_testing)

    assert exit_code == 0
    assert "Email is not configured on this server" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_command_exit_code_survives_the_entry_point(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A command's SystemExit(78) becomes main's return value."""
    incomplete = {"MAILER_TYPE": "smtp", "SMTP_ADDRESS": "smtp.example.com"}

    exit_code = main(
        ["send-email", "--to", "jane@example.com", "--subject", "Hello"],
        services_factory=lambda: build_testing(environment=incomplete),
    )

    assert exit_code == ExitCode.CONFIG_ERROR
    assert "Configuration error" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_stops_the_logging_runtime_after_the_run(managed_traceback_state: None) -> None:
    """Commands run under a bound job context; afterwards the runtime is shut down."""
    exit_code = main(["send-test-email", "--to", "admin@example.com"], services_factory=build_testing)

    assert exit_code == 0
    assert not lib_log_rich.runtime.is_initialised()


@pytest.mark.os_agnostic
def test_main_restores_traceback_flags_after_a_failure(managed_traceback_state: None) -> None:
    """--traceback only lasts for the run, even when the command fails."""
    main(["--traceback", "smtp-config"], services_factory=build_testing)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


# ======================== TracebackSettings ========================


@pytest.mark.os_agnostic
def test_traceback_settings_colour_follows_enabled(managed_traceback_state: None) -> None:
    """Without an explicit colour choice, colour is on exactly when tracebacks are."""
    TracebackSettings(enabled=True).apply()

    assert TracebackSettings.current() == TracebackSettings(enabled=True, force_color=True)


@pytest.mark.os_agnostic
def test_traceback_settings_round_trip(managed_traceback_state: None) -> None:
    """A captured value puts both flags back as they were."""
    before = TracebackSettings.current()
    TracebackSettings(enabled=True, force_color=False).apply()

    before.apply()

    assert TracebackSettings.current() == before


# ======================== CLIContext ========================


def _context(environment: dict[str, str] | None = None, config_data: dict[str, object] | None = None) -> CLIContext:
    return CLIContext(config=Config(config_data or {}, {}), services=build_testing(environment=environment))


@pytest.mark.os_agnostic
def test_context_resolves_the_injected_smtp_environment(smtp_env: dict[str, str]) -> None:
    """resolve_smtp reads the environment through the services container."""
    smtp_config = _context(smtp_env).resolve_smtp()

    assert smtp_config is not None
    assert smtp_config.address == "smtp.example.com"
    assert smtp_config.port == 465


@pytest.mark.os_agnostic
def test_context_reports_mail_disabled_as_none() -> None:
    """Without MAILER_TYPE=smtp there is no SMTP configuration."""
    assert _context({}).resolve_smtp() is None


@pytest.mark.os_agnostic
def test_context_propagates_configuration_errors(smtp_env: dict[str, str]) -> None:
    """Commands decide how to report a broken configuration."""
    environment = {key: value for key, value in smtp_env.items() if key != "SMTP_PASSWORD"}

    with pytest.raises(MissingFieldError):
        _context(environment).resolve_smtp()


@pytest.mark.os_agnostic
def test_context_mail_settings_default_to_the_package_name() -> None:
    """A config without ``[mail]`` still names the application."""
    assert _context().mail_settings.app_name == "smtpmail"


@pytest.mark.os_agnostic
def test_context_builds_mailers_with_the_configured_app_name(smtp_config_factory: Callable[..., SmtpConfig]) -> None:
    """build_mailer passes ``[mail] app_name`` on to the services container."""
    spy = MailerSpy()
    received: list[str | None] = []

    def _recording_build(config: SmtpConfig, *, app_name: str | None = None) -> MailerSpy:
        received.append(app_name)
        return spy.build(config, app_name=app_name)

    services = dataclasses.replace(build_testing(spy=spy), build_mailer=_recording_build)
    cli_ctx = CLIContext(config=Config({"mail": {"app_name": "Acme Portal"}}, {}), services=services)

    mailer = cli_ctx.build_mailer(smtp_config_factory())

    assert mailer is spy
    assert received == ["Acme Portal"]


@pytest.mark.os_agnostic
def test_get_cli_context_requires_the_root_group() -> None:
    """Subcommands invoked without the root group fail loudly."""
    ctx = click.Context(click.Command("send-email"))
    ctx.obj = build_testing

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_root_group_rejects_a_non_callable_services_factory(cli_runner: CliRunner) -> None:
    """ctx.obj must be the services factory, not a ready-made object."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["smtp-config"], obj=build_testing())

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)
