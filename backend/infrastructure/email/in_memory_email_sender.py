"""In-memory implementation of IEmailSender for testing."""

from copy import deepcopy
from email.utils import make_msgid
from typing import Union

import structlog

from domain.contact.core.ports.email_sender import IEmailSender
from domain.contact.core.value_objects import (
    ContactMessage,
    EmailSendResult,
    NewsletterSignup,
)

logger = structlog.get_logger(__name__)

SentItem = Union[ContactMessage, NewsletterSignup]


class InMemoryEmailSender(IEmailSender):
    """
    In-memory email sender.

    Records every message instead of delivering it. Suitable for testing
    and local development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize empty outbox."""
        self._outbox: list[tuple[str, SentItem]] = []

    async def send_contact_email(self, message: ContactMessage) -> EmailSendResult:
        return self._record(message)

    async def send_newsletter_signup(self, signup: NewsletterSignup) -> EmailSendResult:
        return self._record(signup)

    def _record(self, item: SentItem) -> EmailSendResult:
        message_id = make_msgid(domain="localhost")
        self._outbox.append((message_id, item))
        logger.info(
            "Email recorded in memory",
            kind=type(item).__name__,
            message_id=message_id,
        )
        return EmailSendResult(success=True, message_id=message_id)

    @property
    def sent(self) -> list[tuple[str, SentItem]]:
        """Copy of recorded (message_id, item) pairs."""
        return deepcopy(self._outbox)

    def clear(self) -> None:
        """Clear recorded messages. Useful for testing."""
        self._outbox.clear()
