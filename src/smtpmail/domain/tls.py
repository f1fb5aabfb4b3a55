"""TLS strategy selection: a pure function over (explicit mode, port)."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .enums import TlsMode
from .errors import InvalidTlsModeError

#: Well-known submission ports and the TLS mode they conventionally use.
PORT_TLS_MODES: Final[Mapping[int, TlsMode]] = MappingProxyType(
    {
        587: TlsMode.STARTTLS,
        465: TlsMode.IMPLICIT,
        25: TlsMode.NONE,
    }
)

#: Mode used for ports outside :data:`PORT_TLS_MODES`.
FALLBACK_TLS_MODE: Final[TlsMode] = TlsMode.IMPLICIT


def infer_tls_mode(port: int) -> TlsMode:
    """Return the conventional TLS mode for *port*.

    Example:
        >>> infer_tls_mode(587)
        <TlsMode.STARTTLS: 'starttls'>
        >>> infer_tls_mode(2525)
        <TlsMode.IMPLICIT: 'implicit'>
    """
    return PORT_TLS_MODES.get(port, FALLBACK_TLS_MODE)


def resolve_tls_mode(explicit: str | None, port: int) -> TlsMode:
    """Resolve the effective TLS mode.

    An explicit value wins over port inference. Blank strings count as
    absent because unset environment keys often arrive as ``""``.

    Args:
        explicit: Raw ``SMTP_TLS_MODE`` value, case-insensitive.
        port: Resolved SMTP port.

    Returns:
        One of the three concrete :class:`TlsMode` members.

    Raises:
        InvalidTlsModeError: When *explicit* is not ``starttls``, ``implicit`` or ``none``.

    Example:
        >>> resolve_tls_mode("STARTTLS", 465)
        <TlsMode.STARTTLS: 'starttls'>
        >>> resolve_tls_mode(None, 25)
        <TlsMode.NONE: 'none'>
        >>> resolve_tls_mode("ssl", 465)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidTlsModeError: ...
    """
    if explicit is None or not explicit.strip():
        return infer_tls_mode(port)
    try:
        return TlsMode(explicit.strip().lower())
    except ValueError as exc:
        raise InvalidTlsModeError(explicit) from exc


__all__ = [
    "FALLBACK_TLS_MODE",
    "PORT_TLS_MODES",
    "infer_tls_mode",
    "resolve_tls_mode",
]
