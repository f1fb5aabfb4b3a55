"""Display configuration - delegates to lib_layered_config.

Flushes pending lib_log_rich output first so log lines do not interleave
with the rendered configuration.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from smtpmail.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render *config* (or one *section*) as TOML-like text or JSON.

    Args:
        config: Loaded layered configuration.
        output_format: Human-readable or JSON output.
        section: Only render this section (e.g. ``mail``).
        console: Rich console override, mainly for tests.
        profile: Profile name included in provenance comments.

    Raises:
        ValueError: If the requested section does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
