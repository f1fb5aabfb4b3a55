"""In-memory mail adapters for testing.

Provides a mailer that satisfies the same Protocol as the production
:class:`~smtpmail.adapters.mail.mailer.Mailer` but performs no SMTP operations.

Contents:
    * :class:`MailerSpy` - Captures sends for test assertions.
    * :func:`load_environment_in_memory` - Empty environment snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.behaviors import TEST_EMAIL_SUBJECT, build_test_confirmation
from ...domain.models import EffectiveSender, OutgoingMessage, SendResult
from ..mail.config import SmtpConfig
from ..mail.validation import validate_recipient


def _empty_message_list() -> list[OutgoingMessage]:
    """Create an empty typed list for message records."""
    return []


def _empty_config_list() -> list[SmtpConfig]:
    return []


@dataclass
class MailerSpy:
    """Captures mailer operations for test assertions.

    Each test should create its own MailerSpy to avoid cross-test pollution.
    Call :meth:`build` where a ``BuildMailer`` is expected.

    Attributes:
        sent: Messages passed to :meth:`send` (including test emails).
        configs: Configurations the spy was built with.
        raise_exception: When set, send operations raise this exception.

    Example:
        >>> spy = MailerSpy()
        >>> spy.send_test("admin@example.com").message
        'Test email sent successfully to admin@example.com'
        >>> len(spy.sent)
        1
    """

    sent: list[OutgoingMessage] = field(default_factory=_empty_message_list)
    configs: list[SmtpConfig] = field(default_factory=_empty_config_list)
    raise_exception: Exception | None = None
    sender_email: str = "noreply@example.com"

    def build(self, config: SmtpConfig, *, app_name: str | None = None) -> MailerSpy:
        """Record *config* and return the spy itself as the mailer."""
        self.configs.append(config)
        self.sender_email = config.default_from_email
        return self

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent.clear()
        self.configs.clear()
        self.raise_exception = None

    @property
    def sender(self) -> EffectiveSender:
        return EffectiveSender(email=self.sender_email)

    def compose(self, *, to: str, subject: str, body: str) -> OutgoingMessage:
        return OutgoingMessage(to=to, subject=subject, body=body, sender=self.sender)

    def send(self, message: OutgoingMessage) -> SendResult:
        """Record the message and succeed, or raise ``raise_exception``.

        Raises:
            InvalidRecipientError: When the recipient has an invalid format.
        """
        validate_recipient(message.to)
        self.sent.append(message)
        if self.raise_exception is not None:
            raise self.raise_exception
        return SendResult(
            recipient=message.to,
            message=f"Email sent successfully to {message.to}",
            message_id=f"<spy-{len(self.sent)}@smtpmail.test>",
        )

    def send_test(self, recipient_email: str) -> SendResult:
        result = self.send(self.compose(to=recipient_email, subject=TEST_EMAIL_SUBJECT, body="test"))
        return SendResult(
            recipient=result.recipient,
            message=build_test_confirmation(recipient_email),
            message_id=result.message_id,
        )


def load_environment_in_memory(start_dir: str | None = None) -> dict[str, str]:
    """Return an empty environment -- no ``os.environ``, no ``.env``."""
    return {}


__all__ = [
    "MailerSpy",
    "load_environment_in_memory",
]
