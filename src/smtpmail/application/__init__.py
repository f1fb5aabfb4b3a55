"""Application layer - port definitions.

Contains port protocols that define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    BuildMailer,
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadEnvironment,
    MailerPort,
    ResolveMailerConfig,
)

__all__ = [
    "BuildMailer",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadEnvironment",
    "MailerPort",
    "ResolveMailerConfig",
]
