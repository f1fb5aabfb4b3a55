"""Type-safe domain enums for TLS negotiation and output formats."""

from __future__ import annotations

from enum import Enum


class TlsMode(str, Enum):
    """TLS negotiation strategy for an SMTP connection.

    Inherits from str so values compare equal to their environment spelling.

    Attributes:
        STARTTLS: Plaintext greeting, then upgrade via STARTTLS (port 587).
        IMPLICIT: TLS handshake before any SMTP dialogue (port 465).
        NONE: Plaintext for the whole session (port 25, development only).

    Example:
        >>> TlsMode.STARTTLS.value
        'starttls'
        >>> TlsMode("implicit") is TlsMode.IMPLICIT
        True
    """

    STARTTLS = "starttls"
    IMPLICIT = "implicit"
    NONE = "none"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OutputFormat",
    "TlsMode",
]
