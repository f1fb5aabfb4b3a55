"""Logging adapter: starts lib_log_rich and bridges standard logging into it.

Contents:
    * :func:`.setup.init_logging` - called once per CLI invocation by the root group.
"""

from __future__ import annotations

from .setup import init_logging

__all__ = ["init_logging"]
