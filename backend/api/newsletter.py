"""REST API endpoint for newsletter signups."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from application.contact.commands import (
    SubscribeNewsletterCommand,
    SubscribeNewsletterHandler,
)
from domain.contact.core.ports.email_sender import IEmailSender
from infrastructure.email import get_email_sender

logger = logging.getLogger(__name__)

NEWSLETTER_ERROR_MESSAGE = "Błąd podczas zapisu do newslettera."

router = APIRouter(prefix="/api/newsletter", tags=["newsletter"])


@router.post("")
@router.post("/", include_in_schema=False)
async def subscribe_newsletter(
    request: Request,
    email_sender: IEmailSender = Depends(get_email_sender),
) -> Any:
    """Register a newsletter signup."""
    try:
        payload = await request.json()
        handler = SubscribeNewsletterHandler(email_sender)
        result = await handler.handle(SubscribeNewsletterCommand(payload=payload))
        return result.model_dump()
    except Exception:
        logger.exception("Newsletter signup failed")
        return JSONResponse(status_code=500, content={"error": NEWSLETTER_ERROR_MESSAGE})
