"""Collect raw ``MAILER_TYPE``/``SMTP_*`` values from the process environment.

Values from the nearest ``.env`` file are layered underneath ``os.environ``
so that real environment variables always win.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def find_dotenv_file(start_dir: Path) -> Path | None:
    """Return the first ``.env`` in *start_dir* or its parents, if any."""
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def load_environment(start_dir: str | None = None) -> dict[str, str]:
    """Return environment values for the SMTP configuration resolver.

    Args:
        start_dir: Directory that seeds ``.env`` discovery. Defaults to the
            current working directory.

    Returns:
        Snapshot of ``.env`` values overlaid with ``os.environ``.
    """
    base = Path(start_dir) if start_dir is not None else Path.cwd()
    dotenv_file = find_dotenv_file(base.resolve())

    values: dict[str, str] = {}
    if dotenv_file is not None:
        logger.debug("Loading .env values", extra={"path": str(dotenv_file)})
        values.update({key: value for key, value in dotenv_values(dotenv_file).items() if value is not None})
    values.update(os.environ)
    return values


__all__ = ["find_dotenv_file", "load_environment"]
