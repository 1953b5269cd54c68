"""REST API endpoint for the contact form.

Forwards the submitted message to the site owner by email. Any failure
(malformed body, validation, SMTP) is reported as a generic HTTP 500.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from application.contact.commands import (
    SendContactMessageCommand,
    SendContactMessageHandler,
)
from domain.contact.core.ports.email_sender import IEmailSender
from infrastructure.email import get_email_sender

logger = logging.getLogger(__name__)

CONTACT_ERROR_MESSAGE = "Błąd podczas wysyłania wiadomości."

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("")
@router.post("/", include_in_schema=False)
async def send_contact_message(
    request: Request,
    email_sender: IEmailSender = Depends(get_email_sender),
) -> Any:
    """Send a contact form message.

    Returns:
        JSON result from the email sender, or {"error": ...} with status 500
    """
    try:
        payload = await request.json()
        handler = SendContactMessageHandler(email_sender)
        result = await handler.handle(SendContactMessageCommand(payload=payload))
        return result.model_dump()
    except Exception:
        logger.exception("Contact message failed")
        return JSONResponse(status_code=500, content={"error": CONTACT_ERROR_MESSAGE})
