"""Email delivery adapters."""

from .factory import create_email_sender, get_email_sender, reset_email_sender
from .in_memory_email_sender import InMemoryEmailSender
from .smtp_email_sender import SmtpEmailSender

__all__ = [
    "SmtpEmailSender",
    "InMemoryEmailSender",
    "create_email_sender",
    "get_email_sender",
    "reset_email_sender",
]
