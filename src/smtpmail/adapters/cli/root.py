"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with ``--traceback`` and ``--profile``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from smtpmail import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, TracebackSettings, store_cli_context

if TYPE_CHECKING:
    from smtpmail.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Load configuration once, start logging, and hand state to subcommands.

    Example:
        >>> from click.testing import CliRunner
        >>> from smtpmail.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["info"], obj=build_testing)
        >>> result.exit_code
        0
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    services.init_logging(config)
    store_cli_context(ctx, CLIContext(config=config, services=services, traceback=traceback, profile=profile))
    TracebackSettings(enabled=traceback).apply()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import: command modules import from package ancestors of this module.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_info,
        cli_send_email,
        cli_send_test_email,
        cli_smtp_config,
    )

    for cmd in (
        cli_info,
        cli_config,
        cli_smtp_config,
        cli_send_email,
        cli_send_test_email,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
