"""Mailer: compose and transmit messages over an SMTP session.

Classifies protocol-level refusals into permanent
(:class:`~smtpmail.domain.errors.RejectedError`) and temporary
(:class:`~smtpmail.domain.errors.TransientError`) failures. Nothing here
retries; that decision belongs to the caller.
"""

from __future__ import annotations

import dataclasses
import logging
import smtplib
from collections.abc import Callable
from concurrent.futures import Executor, Future
from datetime import datetime, timezone
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

from smtpmail import __init__conf__
from smtpmail.domain.behaviors import TEST_EMAIL_SUBJECT, build_test_confirmation, build_test_email_body
from smtpmail.domain.errors import RejectedError, SendError, TransientError
from smtpmail.domain.models import EffectiveSender, OutgoingMessage, SendResult

from .config import SmtpConfig
from .transport import SmtpSession, open_session
from .validation import validate_recipient

logger = logging.getLogger(__name__)

OpenSession = Callable[[SmtpConfig], SmtpSession]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def classify_refusal(code: int | None, stage: str) -> SendError:
    """Map an SMTP reply code at *stage* to a typed send error.

    4xx codes are temporary; everything else, including a missing code, is
    treated as permanent.

    Example:
        >>> type(classify_refusal(550, "RCPT TO")).__name__
        'RejectedError'
        >>> type(classify_refusal(451, "DATA")).__name__
        'TransientError'
    """
    if code is not None and 400 <= code < 500:
        return TransientError(f"Server temporarily refused {stage} ({code})", code=code, stage=stage)
    return RejectedError(f"Server rejected {stage} ({code})", code=code, stage=stage)


def _first_refusal_code(exc: smtplib.SMTPRecipientsRefused) -> int | None:
    for code, _reply in exc.recipients.values():
        return code
    return None


def build_mime_message(message: OutgoingMessage) -> EmailMessage:
    """Render *message* as a plain-text MIME message with standard headers."""
    domain = message.sender.email.rpartition("@")[2]
    mime = EmailMessage()
    mime["From"] = message.sender.header
    mime["To"] = message.to
    mime["Subject"] = message.subject
    mime["Date"] = formatdate(usegmt=True)
    mime["Message-ID"] = make_msgid(domain=domain)
    mime.set_content(message.body)
    return mime


class Mailer:
    """Send messages using one immutable :class:`SmtpConfig`.

    Each :meth:`send` without an explicit session opens its own session and
    closes it afterwards, so concurrent sends share no mutable state.

    Args:
        config: Resolved SMTP configuration.
        open_session: Session factory, replaceable in tests.
        app_name: Application name shown in the test email.
        app_version: Application version shown in the test email.
        clock: Returns the current UTC time for the test email.
    """

    def __init__(
        self,
        config: SmtpConfig,
        *,
        open_session: OpenSession = open_session,
        app_name: str = __init__conf__.name,
        app_version: str = __init__conf__.version,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config
        self._open_session = open_session
        self._sender = config.effective_sender
        self._app_name = app_name
        self._app_version = app_version
        self._clock = clock

    @property
    def sender(self) -> EffectiveSender:
        return self._sender

    def compose(self, *, to: str, subject: str, body: str) -> OutgoingMessage:
        """Build an :class:`OutgoingMessage` from the configured sender."""
        return OutgoingMessage(to=to, subject=subject, body=body, sender=self._sender)

    def send(self, message: OutgoingMessage, *, session: SmtpSession | None = None) -> SendResult:
        """Transmit *message*.

        Args:
            message: Message to deliver.
            session: Already open session to reuse. It is left open. When
                None, a session is opened for this call and always closed.

        Returns:
            Confirmation for the accepted message.

        Raises:
            InvalidRecipientError: ``message.to`` is not a valid address.
            SmtpConnectionError: Opening the session failed.
            RejectedError: Permanent refusal at MAIL FROM, RCPT TO or DATA.
            TransientError: Temporary refusal or connection lost mid-transaction.
        """
        validate_recipient(message.to)
        mime = build_mime_message(message)
        logger.info(
            "Sending email",
            extra={"sender": message.sender.email, "recipient": message.to, "subject": message.subject},
        )

        if session is not None:
            self._transmit(session, mime, message)
        else:
            with self._open_session(self._config) as owned:
                self._transmit(owned, mime, message)

        logger.info("Email sent successfully", extra={"sender": message.sender.email, "recipient": message.to})
        return SendResult(
            recipient=message.to,
            message=f"Email sent successfully to {message.to}",
            message_id=str(mime["Message-ID"]),
        )

    def send_test(self, recipient_email: str) -> SendResult:
        """Send the canned SMTP verification email to *recipient_email*.

        Returns:
            Result whose ``message`` is a confirmation fit for display.
        """
        body = build_test_email_body(app_name=self._app_name, app_version=self._app_version, sent_at=self._clock())
        message = self.compose(to=recipient_email, subject=TEST_EMAIL_SUBJECT, body=body)
        result = self.send(message)
        return dataclasses.replace(result, message=build_test_confirmation(recipient_email))

    def submit(self, message: OutgoingMessage, executor: Executor) -> Future[SendResult]:
        """Run :meth:`send` on *executor* so the caller is not blocked on network I/O."""
        return executor.submit(self.send, message)

    def _transmit(self, session: SmtpSession, mime: EmailMessage, message: OutgoingMessage) -> None:
        try:
            session.send(mime, sender=message.sender.email, recipient=message.to)
        except smtplib.SMTPSenderRefused as exc:
            raise self._failed(classify_refusal(exc.smtp_code, "MAIL FROM"), message) from exc
        except smtplib.SMTPRecipientsRefused as exc:
            raise self._failed(classify_refusal(_first_refusal_code(exc), "RCPT TO"), message) from exc
        except smtplib.SMTPDataError as exc:
            raise self._failed(classify_refusal(exc.smtp_code, "DATA"), message) from exc
        except smtplib.SMTPResponseException as exc:
            raise self._failed(classify_refusal(exc.smtp_code, "transaction"), message) from exc
        except smtplib.SMTPServerDisconnected as exc:
            error = TransientError("Connection to the SMTP server was lost during the transaction")
            raise self._failed(error, message) from exc
        except smtplib.SMTPException as exc:
            raise self._failed(RejectedError(f"Server refused the message: {type(exc).__name__}"), message) from exc
        except OSError as exc:
            error = TransientError(f"Network failure during the transaction: {type(exc).__name__}")
            raise self._failed(error, message) from exc

    @staticmethod
    def _failed(error: SendError, message: OutgoingMessage) -> SendError:
        logger.error(
            "SMTP delivery failed",
            extra={"recipient": message.to, "stage": error.stage, "code": error.code, "error": str(error)},
        )
        return error


def build_mailer(config: SmtpConfig, *, app_name: str | None = None) -> Mailer:
    """Wire a production :class:`Mailer` for *config*."""
    return Mailer(config, app_name=app_name or __init__conf__.name)


__all__ = [
    "Mailer",
    "OpenSession",
    "build_mailer",
    "build_mime_message",
    "classify_refusal",
]
