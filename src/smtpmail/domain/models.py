"""Value objects passed between the resolver, the transport and the mailer."""

from __future__ import annotations

from dataclasses import dataclass
from email.utils import formataddr


@dataclass(frozen=True, slots=True)
class EffectiveSender:
    """Mailbox used for the ``From`` header of every outgoing message.

    Example:
        >>> EffectiveSender(email="jane@example.com", name="Jane Doe").header
        'Jane Doe <jane@example.com>'
        >>> EffectiveSender(email="jane@example.com").header
        'jane@example.com'
    """

    email: str
    name: str | None = None

    @property
    def header(self) -> str:
        """Return the RFC 5322 formatted mailbox."""
        return formataddr((self.name or "", self.email))


@dataclass(frozen=True, slots=True)
class OutgoingMessage:
    """A single plain-text message, created per send and discarded afterwards."""

    to: str
    subject: str
    body: str
    sender: EffectiveSender


@dataclass(frozen=True, slots=True)
class SendResult:
    """Outcome of a successful send.

    Attributes:
        recipient: Address the server accepted.
        message: Human-readable confirmation suitable for relaying to a user.
        message_id: ``Message-ID`` header of the transmitted message.
    """

    recipient: str
    message: str
    message_id: str


@dataclass(frozen=True, slots=True)
class CallerIdentity:
    """Who asked for a test email. Supplied by the (external) admin surface."""

    email: str
    is_admin: bool = False


__all__ = [
    "CallerIdentity",
    "EffectiveSender",
    "OutgoingMessage",
    "SendResult",
]
