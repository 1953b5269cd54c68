"""Value objects for contact domain."""

from .contact_message import ContactMessage
from .email_send_result import EmailSendResult
from .newsletter_signup import NewsletterSignup

__all__ = [
    "ContactMessage",
    "NewsletterSignup",
    "EmailSendResult",
]
