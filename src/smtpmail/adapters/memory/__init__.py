"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no SMTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.mail` - In-memory mail adapters (MailerSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .mail import MailerSpy, load_environment_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from smtpmail.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadEnvironment,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_environment: LoadEnvironment = load_environment_in_memory

__all__ = [
    "MailerSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_environment_in_memory",
]
