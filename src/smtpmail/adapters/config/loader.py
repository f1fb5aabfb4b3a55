"""Layered configuration loader with caching and profile support.

SMTP credentials come from ``MAILER_TYPE``/``SMTP_*`` environment keys (see
:mod:`smtpmail.adapters.mail.config`). The layered configuration carries the
application-level settings around them: the ``[mail]`` presentation section
and the ``[lib_log_rich]`` logging section.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)
from pydantic import BaseModel, ConfigDict

from smtpmail import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


class MailSettings(BaseModel):
    """Pydantic model for the ``[mail]`` config section.

    Example:
        >>> MailSettings().app_name
        'smtpmail'
        >>> MailSettings.model_validate({"app_name": "Acme Portal"}).app_name
        'Acme Portal'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    app_name: str = __init__conf__.name


def load_mail_settings(config: Config) -> MailSettings:
    """Parse the ``[mail]`` section, falling back to defaults when absent."""
    raw: object = config.get("mail", default={})
    return MailSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Validate profile name using lib_layered_config.

    Raises:
        ValueError: If profile name is invalid (empty, too long, invalid chars,
            path traversal attempt, etc.).

    Examples:
        >>> validate_profile("production")  # valid, no exception

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    validate_profile_name(profile, max_length=length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Loaded once per (profile, start_dir) and cached for the process lifetime.
@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Cached loader. Profile validation must be done by the caller."""
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration with application defaults.

    Precedence: defaults -> app -> host -> user -> dotenv -> env

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into all
            configuration paths.
        start_dir: Optional directory that seeds .env discovery.

    Returns:
        Immutable configuration object with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("nonexistent", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Invalidate the cached configuration so the next call re-reads disk."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible to type checkers once cast to the Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "MailSettings",
    "get_config",
    "get_default_config_path",
    "load_mail_settings",
    "validate_profile",
]
