"""SMTP configuration model and environment resolver.

Provides the SmtpConfig Pydantic model for validated, immutable SMTP settings
and the resolver that builds it from raw ``MAILER_TYPE``/``SMTP_*`` values.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from btx_lib_mail import validate_email_address, validate_smtp_host
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from smtpmail.domain.enums import TlsMode
from smtpmail.domain.errors import InvalidFieldError, InvalidLegacyFromError, MissingFieldError
from smtpmail.domain.models import EffectiveSender
from smtpmail.domain.tls import resolve_tls_mode

logger = logging.getLogger(__name__)

ENV_MAILER_TYPE: Final[str] = "MAILER_TYPE"
ENV_ADDRESS: Final[str] = "SMTP_ADDRESS"
ENV_USERNAME: Final[str] = "SMTP_USERNAME"
ENV_PASSWORD: Final[str] = "SMTP_PASSWORD"
ENV_PORT: Final[str] = "SMTP_PORT"
ENV_TLS_MODE: Final[str] = "SMTP_TLS_MODE"
ENV_TIMEOUT: Final[str] = "SMTP_TIMEOUT"
ENV_FROM_EMAIL: Final[str] = "SMTP_DEFAULT_FROM_EMAIL"
ENV_FROM_NAME: Final[str] = "SMTP_DEFAULT_FROM_NAME"
ENV_FROM_LEGACY: Final[str] = "SMTP_DEFAULT_FROM"

DEFAULT_SMTP_PORT: Final[int] = 465
DEFAULT_SMTP_TIMEOUT: Final[float] = 30.0

_LEGACY_FROM_PATTERN = re.compile(r"^\s*(?P<name>[^<>]*?)\s*<\s*(?P<email>[^<>]*?)\s*>\s*$")


class SmtpConfig(BaseModel):
    """Validated, immutable SMTP configuration.

    Built once at startup by :func:`resolve_smtp_config` and injected into the
    transport and mailer. ``tls_mode`` is always concrete.

    Example:
        >>> config = SmtpConfig(
        ...     address="smtp.example.com",
        ...     username="mailer",
        ...     password="secret",
        ...     tls_mode=TlsMode.IMPLICIT,
        ...     default_from_email="noreply@example.com",
        ... )
        >>> config.port
        465
        >>> config.effective_sender.header
        'noreply@example.com'
    """

    model_config = ConfigDict(frozen=True)

    address: str
    username: str
    password: str
    port: int = Field(default=DEFAULT_SMTP_PORT, ge=1, le=65535)
    tls_mode: TlsMode
    default_from_email: str
    default_from_name: str | None = None
    default_from_legacy: str | None = None
    timeout: float = Field(default=DEFAULT_SMTP_TIMEOUT, gt=0, allow_inf_nan=False)

    @field_validator("default_from_name", "default_from_legacy", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Coerce empty or whitespace-only strings to None."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> SmtpConfig:
        """Reject a sender address that would only fail later, at send time.

        Raises:
            ValueError: When the sender address is malformed.
        """
        validate_email_address(self.default_from_email)
        return self

    @property
    def effective_sender(self) -> EffectiveSender:
        """Mailbox for the ``From`` header."""
        return EffectiveSender(email=self.default_from_email, name=self.default_from_name)

    def __repr__(self) -> str:
        """Return string representation with the password redacted.

        Example:
            >>> config = SmtpConfig(
            ...     address="smtp.example.com", username="u", password="secret123",
            ...     tls_mode=TlsMode.STARTTLS, default_from_email="a@example.com",
            ... )
            >>> "secret123" in repr(config)
            False
        """
        fields: list[str] = []
        for name, value in self:
            if name == "password":
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"SmtpConfig({', '.join(fields)})"

    __str__ = __repr__


@dataclass(frozen=True, slots=True)
class ParsedFrom:
    """Successfully parsed ``Name <email>`` value."""

    name: str | None
    email: str


@dataclass(frozen=True, slots=True)
class InvalidFrom:
    """Unparseable ``SMTP_DEFAULT_FROM`` value."""

    reason: str


def parse_legacy_from(value: str) -> ParsedFrom | InvalidFrom:
    """Parse the deprecated combined sender ``"Name <email>"``.

    The name is trimmed (and unquoted) and may be empty. A bare address
    without angle brackets is accepted as email-only.

    Example:
        >>> parse_legacy_from("Jane Doe <jane@example.com>")
        ParsedFrom(name='Jane Doe', email='jane@example.com')
        >>> parse_legacy_from("<jane@example.com>")
        ParsedFrom(name=None, email='jane@example.com')
        >>> parse_legacy_from("jane@example.com")
        ParsedFrom(name=None, email='jane@example.com')
        >>> parse_legacy_from("Jane Doe <jane>")
        InvalidFrom(reason='email portion is missing or malformed')
    """
    match = _LEGACY_FROM_PATTERN.match(value)
    if match is None:
        candidate = value.strip()
        if "<" in candidate or ">" in candidate or " " in candidate:
            return InvalidFrom(reason="expected 'Name <email>'")
        name, email = None, candidate
    else:
        name = match["name"].strip().strip('"').strip() or None
        email = match["email"]
    local, _, domain = email.partition("@")
    if not local or not domain or " " in email:
        return InvalidFrom(reason="email portion is missing or malformed")
    return ParsedFrom(name=name, email=email)


def _optional(raw_env: Mapping[str, str], key: str) -> str | None:
    """Return the stripped value of *key*, treating blank values as absent."""
    value = raw_env.get(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def _required(raw_env: Mapping[str, str], key: str) -> str:
    value = _optional(raw_env, key)
    if value is None:
        raise MissingFieldError(key)
    return value


def _split_address(address: str) -> tuple[str, str | None]:
    """Split ``host[:port]`` / ``[ipv6][:port]`` into host and optional port.

    Example:
        >>> _split_address("smtp.example.com:587")
        ('smtp.example.com', '587')
        >>> _split_address("[::1]")
        ('::1', None)
    """
    try:
        validate_smtp_host(address)
    except ValueError as exc:
        raise InvalidFieldError(ENV_ADDRESS, str(exc)) from exc
    if address.startswith("["):
        host, _, rest = address[1:].partition("]")
        return host, rest[1:] if rest.startswith(":") else None
    if address.count(":") == 1:
        host, port = address.split(":")
        return host, port
    return address, None


def _resolve_port(raw_port: str | None, embedded_port: str | None) -> int:
    """Return the port from ``SMTP_PORT``, the address suffix, or the default."""
    source = ENV_PORT if raw_port is not None else ENV_ADDRESS
    value = raw_port if raw_port is not None else embedded_port
    if value is None:
        return DEFAULT_SMTP_PORT
    try:
        port = int(value)
    except ValueError as exc:
        raise InvalidFieldError(source, f"port must be an integer, got {value!r}") from exc
    if not 1 <= port <= 65535:
        raise InvalidFieldError(source, f"port must be 1-65535, got {port}")
    return port


def _resolve_timeout(raw_timeout: str | None) -> float:
    if raw_timeout is None:
        return DEFAULT_SMTP_TIMEOUT
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise InvalidFieldError(ENV_TIMEOUT, f"must be a number of seconds, got {raw_timeout!r}") from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise InvalidFieldError(ENV_TIMEOUT, f"must be a positive, finite number of seconds, got {raw_timeout!r}")
    return timeout


def _resolve_sender(raw_env: Mapping[str, str]) -> tuple[str, str | None]:
    """Return ``(email, name)`` from the explicit keys or the legacy fallback.

    Raises:
        MissingFieldError: When neither an explicit nor a legacy sender is set.
        InvalidFieldError: When the explicit sender address is malformed.
        InvalidLegacyFromError: When the legacy fallback is needed but unparseable.
    """
    explicit_email = _optional(raw_env, ENV_FROM_EMAIL)
    explicit_name = _optional(raw_env, ENV_FROM_NAME)
    if explicit_email is not None:
        try:
            validate_email_address(explicit_email)
        except ValueError as exc:
            raise InvalidFieldError(ENV_FROM_EMAIL, str(exc)) from exc
        return explicit_email, explicit_name

    legacy = _optional(raw_env, ENV_FROM_LEGACY)
    if legacy is None:
        raise MissingFieldError(ENV_FROM_EMAIL, f"or the deprecated {ENV_FROM_LEGACY}")

    parsed = parse_legacy_from(legacy)
    if isinstance(parsed, InvalidFrom):
        raise InvalidLegacyFromError(legacy)
    try:
        validate_email_address(parsed.email)
    except ValueError as exc:
        raise InvalidLegacyFromError(legacy) from exc

    logger.warning(
        "%s is deprecated and will be removed in a future version. Please use %s and %s instead.",
        ENV_FROM_LEGACY,
        ENV_FROM_EMAIL,
        ENV_FROM_NAME,
    )
    return parsed.email, explicit_name or parsed.name


def resolve_smtp_config(raw_env: Mapping[str, str]) -> SmtpConfig:
    """Resolve raw environment values into a validated :class:`SmtpConfig`.

    Pure function of its input: no I/O and no global state. Never returns a
    partially populated configuration.

    Args:
        raw_env: Environment-like mapping (``os.environ``, dotenv values, a dict).

    Returns:
        Immutable configuration with a concrete TLS mode and sender address.

    Raises:
        MissingFieldError: Address, username, password or sender missing.
        InvalidLegacyFromError: Legacy sender needed but malformed.
        InvalidTlsModeError: ``SMTP_TLS_MODE`` not one of starttls/implicit/none.
        InvalidFieldError: Port, timeout, host or sender address malformed.

    Example:
        >>> config = resolve_smtp_config({
        ...     "SMTP_ADDRESS": "smtp.example.com",
        ...     "SMTP_USERNAME": "mailer",
        ...     "SMTP_PASSWORD": "secret",
        ...     "SMTP_PORT": "587",
        ...     "SMTP_DEFAULT_FROM_EMAIL": "noreply@example.com",
        ... })
        >>> config.tls_mode
        <TlsMode.STARTTLS: 'starttls'>
    """
    address = _required(raw_env, ENV_ADDRESS)
    username = _required(raw_env, ENV_USERNAME)
    if _optional(raw_env, ENV_PASSWORD) is None:
        raise MissingFieldError(ENV_PASSWORD)
    # Passwords may legitimately carry surrounding whitespace.
    password = raw_env[ENV_PASSWORD]
    from_email, from_name = _resolve_sender(raw_env)

    host, embedded_port = _split_address(address)
    port = _resolve_port(_optional(raw_env, ENV_PORT), embedded_port)
    tls_mode = resolve_tls_mode(raw_env.get(ENV_TLS_MODE), port)
    timeout = _resolve_timeout(_optional(raw_env, ENV_TIMEOUT))

    config = SmtpConfig(
        address=host,
        username=username,
        password=password,
        port=port,
        tls_mode=tls_mode,
        default_from_email=from_email,
        default_from_name=from_name,
        default_from_legacy=_optional(raw_env, ENV_FROM_LEGACY),
        timeout=timeout,
    )
    logger.debug("Resolved SMTP configuration", extra={"host": host, "port": port, "tls_mode": tls_mode.value})
    return config


def resolve_mailer_config(raw_env: Mapping[str, str]) -> SmtpConfig | None:
    """Resolve the SMTP configuration when ``MAILER_TYPE=smtp``, else None.

    Any other (or missing) ``MAILER_TYPE`` disables mail entirely, so the
    ``SMTP_*`` keys are not required.

    Example:
        >>> resolve_mailer_config({}) is None
        True
    """
    mailer_type = (raw_env.get(ENV_MAILER_TYPE) or "").strip().lower()
    if mailer_type != "smtp":
        logger.info("Mail delivery disabled", extra={"mailer_type": mailer_type or None})
        return None
    return resolve_smtp_config(raw_env)


__all__ = [
    "DEFAULT_SMTP_PORT",
    "DEFAULT_SMTP_TIMEOUT",
    "InvalidFrom",
    "ParsedFrom",
    "SmtpConfig",
    "parse_legacy_from",
    "resolve_mailer_config",
    "resolve_smtp_config",
]
