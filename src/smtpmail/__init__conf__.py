"""Static package metadata surfaced to CLI commands and documentation.

Values here mirror ``pyproject.toml`` so the CLI can print version and
identity information without querying installed distribution metadata.

Contents:
    * Metadata constants (``name``, ``title``, ``version`` ...).
    * ``LAYEREDCONF_*`` identifiers consumed by lib_layered_config.
    * :func:`print_info` - render the metadata block for ``smtpmail info``.
"""

from __future__ import annotations

name = "smtpmail"
title = "Environment-configured SMTP mailer with a test-email check"
version = "1.0.0"
homepage = "https://github.com/smtpmail/smtpmail"
author = "smtpmail maintainers"
author_email = "maintainers@smtpmail.dev"
shell_command = "smtpmail"

#: Vendor, application and slug identifiers for lib_layered_config paths.
LAYEREDCONF_VENDOR: str = "smtpmail"
LAYEREDCONF_APP: str = "smtpmail"
LAYEREDCONF_SLUG: str = "smtpmail"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for smtpmail:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
