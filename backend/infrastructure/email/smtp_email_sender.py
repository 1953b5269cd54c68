"""
SMTP email sender.

Builds multipart (text + HTML) messages and delivers them through an
SMTP relay. smtplib is blocking, so delivery runs in a worker thread.
"""

import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from typing import Optional

import structlog

from domain.contact.core.exceptions import EmailDeliveryError, EmailNotConfiguredError
from domain.contact.core.ports.email_sender import IEmailSender
from domain.contact.core.value_objects import (
    ContactMessage,
    EmailSendResult,
    NewsletterSignup,
)
from infrastructure.config import SmtpSettings

from .templates import render_contact, render_newsletter_signup

logger = structlog.get_logger(__name__)

NEWSLETTER_SUBJECT = "Nowy zapis do newslettera"


class SmtpEmailSender(IEmailSender):
    """IEmailSender implementation backed by smtplib."""

    def __init__(self, settings: SmtpSettings) -> None:
        """Initialize sender.

        Args:
            settings: SMTP relay configuration
        """
        self._settings = settings

    def build_message(
        self,
        subject: str,
        text: str,
        html: str,
        reply_to: Optional[str] = None,
        reply_to_name: Optional[str] = None,
    ) -> MIMEMultipart:
        """Build a multipart/alternative message addressed to the owner.

        Raises:
            EmailNotConfiguredError: If sender or recipient is missing
        """
        if not self._settings.sender or not self._settings.recipient:
            raise EmailNotConfiguredError("EMAIL_FROM or CONTACT_RECIPIENT is not set")

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self._settings.sender
        msg["To"] = self._settings.recipient
        msg["Message-ID"] = make_msgid()
        if reply_to:
            msg["Reply-To"] = formataddr((reply_to_name or "", reply_to))

        msg.attach(MIMEText(text, "plain", "utf-8"))
        msg.attach(MIMEText(html, "html", "utf-8"))
        return msg

    def _deliver(self, msg: MIMEMultipart) -> None:
        settings = self._settings
        try:
            with smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout_s) as server:
                if settings.use_tls:
                    server.starttls()
                if settings.has_credentials:
                    server.login(settings.username or "", settings.password or "")
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(settings.recipient, str(e)) from e

    async def _send(self, msg: MIMEMultipart) -> EmailSendResult:
        message_id = str(msg["Message-ID"])
        logger.debug(
            "Sending email",
            host=self._settings.host,
            recipient=self._settings.recipient,
            message_id=message_id,
        )
        try:
            await asyncio.to_thread(self._deliver, msg)
        except EmailDeliveryError as e:
            logger.error(
                "Email delivery failed",
                recipient=e.recipient,
                reason=e.reason,
            )
            raise

        logger.info("Email sent", recipient=self._settings.recipient, message_id=message_id)
        return EmailSendResult(success=True, message_id=message_id)

    async def send_contact_email(self, message: ContactMessage) -> EmailSendResult:
        text, html = render_contact(message)
        msg = self.build_message(
            subject=message.display_subject(),
            text=text,
            html=html,
            reply_to=message.email,
            reply_to_name=message.name,
        )
        return await self._send(msg)

    async def send_newsletter_signup(self, signup: NewsletterSignup) -> EmailSendResult:
        text, html = render_newsletter_signup(signup)
        msg = self.build_message(
            subject=NEWSLETTER_SUBJECT,
            text=text,
            html=html,
            reply_to=signup.email,
            reply_to_name=signup.name,
        )
        return await self._send(msg)
