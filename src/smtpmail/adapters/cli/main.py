"""Console-script and ``python -m`` entry point.

Runs the root group in non-standalone mode so every outcome, including a
command's ``SystemExit(ExitCode...)``, comes back here as an integer exit
code. Global side effects of a run (traceback flags, the lib_log_rich
runtime) are undone on the way out.

Contents:
    * :func:`main` - Run the CLI and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from smtpmail import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackSettings

if TYPE_CHECKING:
    from smtpmail.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and map it to an exit code."""
    settings = TracebackSettings.current()
    TracebackSettings(enabled=settings.enabled).apply()
    limit = TRACEBACK_VERBOSE_LIMIT if settings.enabled else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=settings.enabled, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit from commands and KeyboardInterrupt included
        return _report_failure(exc)
    return 0


@contextmanager
def _run_scope(*, restore_traceback: bool) -> Iterator[None]:
    """Restore traceback flags and stop logging once the run is over."""
    previous = TracebackSettings.current()
    try:
        yield
    finally:
        if restore_traceback:
            previous.apply()
        # The runtime is process-wide; worker threads must not stop it.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were afterwards.
        services_factory: Builds the AppServices for this run, normally
            ``build_production``.

    Raises:
        ValueError: If services_factory is not provided.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    with _run_scope(restore_traceback=restore_traceback):
        return _invoke(args, services_factory)


__all__ = ["main"]
