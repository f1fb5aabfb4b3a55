"""In-memory configuration adapters for testing.

``get_config_in_memory`` returns the same ``[mail]`` defaults that ship in
``defaultconfig.toml``, without reading any file or environment layer.
"""

from __future__ import annotations

from lib_layered_config import Config

from ... import __init__conf__
from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding only the bundled ``[mail]`` defaults; *profile* is ignored."""
    return Config({"mail": {"app_name": __init__conf__.name}}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Render nothing."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
