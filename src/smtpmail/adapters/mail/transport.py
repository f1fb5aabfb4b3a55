"""SMTP transport: connect, negotiate TLS, authenticate.

Turns an :class:`~smtpmail.adapters.mail.config.SmtpConfig` into an open,
authenticated :class:`SmtpSession`. Every ``smtplib``/``ssl``/socket failure
is translated into the :class:`~smtpmail.domain.errors.SmtpConnectionError`
family before it leaves this module.
"""

from __future__ import annotations

import logging
import smtplib
import ssl
from collections.abc import Iterator
from contextlib import contextmanager
from email.message import EmailMessage
from types import TracebackType

from smtpmail.domain.enums import TlsMode
from smtpmail.domain.errors import (
    AuthRejectedError,
    ConnectTimeoutError,
    SmtpConnectionError,
    StartTlsRejectedError,
    TlsHandshakeFailedError,
)

from .config import SmtpConfig

logger = logging.getLogger(__name__)


class SmtpSession:
    """An open, authenticated SMTP connection.

    Accepts one or more messages until closed. Use as a context manager to
    guarantee the socket is released on every exit path.
    """

    def __init__(self, client: smtplib.SMTP, *, host: str, port: int) -> None:
        self._client = client
        self.host = host
        self.port = port
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, message: EmailMessage, *, sender: str, recipient: str) -> None:
        """Transmit *message* (MAIL FROM, RCPT TO, DATA).

        Raises:
            SmtpConnectionError: When the session was already closed.
            smtplib.SMTPException: Protocol failures, classified by the mailer.
        """
        if self._closed:
            raise SmtpConnectionError(f"SMTP session with {self.host}:{self.port} is closed")
        self._client.send_message(message, from_addr=sender, to_addrs=[recipient])

    def close(self) -> None:
        """Send QUIT when possible and always release the socket. Idempotent."""
        if self._closed:
            return
        self._closed = True
        try:
            self._client.quit()
        except (smtplib.SMTPException, OSError):
            logger.debug("QUIT failed, closing socket", extra={"host": self.host}, exc_info=True)
        finally:
            self._client.close()
        logger.debug("SMTP session closed", extra={"host": self.host, "port": self.port})

    def __enter__(self) -> SmtpSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _tls_context() -> ssl.SSLContext:
    return ssl.create_default_context()


def _describe(exc: Exception) -> str:
    """Short failure reason without the server's reply text."""
    if isinstance(exc, smtplib.SMTPResponseException):
        return f"server replied {exc.smtp_code}"
    return str(exc) or type(exc).__name__


@contextmanager
def _network_errors(config: SmtpConfig, stage: str, *, handshake: bool = True) -> Iterator[None]:
    """Translate timeout, TLS and socket failures raised during *stage*.

    SSL errors count as handshake failures only while *handshake* is set;
    later ones come from an already encrypted session.
    """
    target = f"{config.address}:{config.port}"
    try:
        yield
    except TimeoutError as exc:
        raise ConnectTimeoutError(f"Timed out after {config.timeout:g}s during {stage} with {target}") from exc
    except ssl.SSLError as exc:
        reason = getattr(exc, "reason", None) or exc
        if not handshake:
            raise SmtpConnectionError(f"SMTP {stage} with {target} failed: TLS error {reason}") from exc
        raise TlsHandshakeFailedError(f"TLS handshake with {target} failed: {reason}") from exc
    except (smtplib.SMTPException, OSError) as exc:
        raise SmtpConnectionError(f"SMTP {stage} with {target} failed: {_describe(exc)}") from exc


def _connect(config: SmtpConfig) -> smtplib.SMTP:
    """Open the TCP connection; implicit TLS handshakes here, before the greeting."""
    with _network_errors(config, "connect"):
        if config.tls_mode is TlsMode.IMPLICIT:
            return smtplib.SMTP_SSL(config.address, config.port, timeout=config.timeout, context=_tls_context())
        return smtplib.SMTP(config.address, config.port, timeout=config.timeout)


def _upgrade_to_tls(client: smtplib.SMTP, config: SmtpConfig) -> None:
    """EHLO, STARTTLS, EHLO again on the now encrypted connection."""
    target = f"{config.address}:{config.port}"
    with _network_errors(config, "STARTTLS"):
        client.ehlo()
        if not client.has_extn("starttls"):
            raise StartTlsRejectedError(f"{target} does not advertise STARTTLS")
        try:
            client.starttls(context=_tls_context())
        except smtplib.SMTPNotSupportedError as exc:
            raise StartTlsRejectedError(f"{target} does not support STARTTLS") from exc
        except smtplib.SMTPResponseException as exc:
            raise StartTlsRejectedError(f"{target} refused STARTTLS ({exc.smtp_code})") from exc
        client.ehlo()


def _greet_plaintext(client: smtplib.SMTP, config: SmtpConfig) -> None:
    logger.warning(
        "SMTP session is not encrypted; use SMTP_TLS_MODE=none for local development only",
        extra={"host": config.address, "port": config.port},
    )
    with _network_errors(config, "EHLO"):
        client.ehlo()


def _authenticate(client: smtplib.SMTP, config: SmtpConfig) -> None:
    target = f"{config.address}:{config.port}"
    with _network_errors(config, "authentication", handshake=False):
        try:
            client.login(config.username, config.password)
        except smtplib.SMTPAuthenticationError as exc:
            raise AuthRejectedError(f"{target} rejected the credentials ({exc.smtp_code})") from exc
        except smtplib.SMTPNotSupportedError as exc:
            raise AuthRejectedError(f"{target} does not support AUTH") from exc


def open_session(config: SmtpConfig) -> SmtpSession:
    """Connect, negotiate TLS per ``config.tls_mode`` and authenticate.

    Args:
        config: Resolved SMTP configuration.

    Returns:
        Open, authenticated session. The caller owns it and must close it.

    Raises:
        TlsHandshakeFailedError: Implicit or post-STARTTLS handshake failed.
        StartTlsRejectedError: STARTTLS mode but the server does not offer/accept it.
        AuthRejectedError: Credentials rejected or AUTH unsupported.
        ConnectTimeoutError: ``config.timeout`` exceeded.
        SmtpConnectionError: Any other network or protocol failure.
    """
    logger.info(
        "Opening SMTP session",
        extra={"host": config.address, "port": config.port, "tls_mode": config.tls_mode.value},
    )
    client = _connect(config)
    try:
        if config.tls_mode is TlsMode.STARTTLS:
            _upgrade_to_tls(client, config)
        elif config.tls_mode is TlsMode.NONE:
            _greet_plaintext(client, config)
        _authenticate(client, config)
    except Exception:
        client.close()
        raise
    return SmtpSession(client, host=config.address, port=config.port)


__all__ = [
    "SmtpSession",
    "open_session",
]
