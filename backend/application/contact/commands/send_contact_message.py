"""SendContactMessageCommand - forward a contact form submission by email."""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from domain.contact.core.exceptions import InvalidContactMessageError
from domain.contact.core.ports.email_sender import IEmailSender
from domain.contact.core.value_objects import ContactMessage, EmailSendResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendContactMessageCommand:
    """Command to send a contact form message.

    Attributes:
        payload: Raw JSON body as received by the route
    """

    payload: dict[str, Any] = field(default_factory=dict)


class SendContactMessageHandler:
    """Handler for SendContactMessageCommand.

    Validates the payload into a ContactMessage and hands it to the
    email sender. Errors propagate to the caller unchanged, except
    validation errors which are raised as InvalidContactMessageError.
    """

    def __init__(self, email_sender: IEmailSender):
        self._email_sender = email_sender

    async def handle(self, command: SendContactMessageCommand) -> EmailSendResult:
        """
        Handle contact message command.

        Args:
            command: Command with the raw payload

        Returns:
            EmailSendResult from the email sender

        Raises:
            InvalidContactMessageError: If payload is malformed
            EmailDeliveryError: If sending fails
        """
        try:
            message = ContactMessage.from_payload(command.payload)
        except ValidationError as e:
            raise InvalidContactMessageError(str(e)) from e

        result = await self._email_sender.send_contact_email(message)
        logger.info(
            "Contact message sent",
            extra={"message_id": result.message_id, "reply_to": message.email},
        )
        return result
