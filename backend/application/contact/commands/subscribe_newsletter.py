"""SubscribeNewsletterCommand - notify the owner about a newsletter signup."""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from domain.contact.core.exceptions import InvalidContactMessageError
from domain.contact.core.ports.email_sender import IEmailSender
from domain.contact.core.value_objects import EmailSendResult, NewsletterSignup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubscribeNewsletterCommand:
    """Command to register a newsletter signup."""

    payload: dict[str, Any] = field(default_factory=dict)


class SubscribeNewsletterHandler:
    """Handler for SubscribeNewsletterCommand."""

    def __init__(self, email_sender: IEmailSender):
        self._email_sender = email_sender

    async def handle(self, command: SubscribeNewsletterCommand) -> EmailSendResult:
        try:
            signup = NewsletterSignup.from_payload(command.payload)
        except ValidationError as e:
            raise InvalidContactMessageError(str(e)) from e

        result = await self._email_sender.send_newsletter_signup(signup)
        logger.info(
            "Newsletter signup forwarded",
            extra={"message_id": result.message_id},
        )
        return result
