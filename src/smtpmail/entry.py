"""Console script entry point for the ``smtpmail`` command.

Lives outside :mod:`smtpmail.adapters` because it is the one place that hands
the production container from :mod:`smtpmail.composition` to the CLI.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI against real configuration, ``.env`` and SMTP adapters."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
