"""Contact commands."""

from .send_contact_message import SendContactMessageCommand, SendContactMessageHandler
from .subscribe_newsletter import SubscribeNewsletterCommand, SubscribeNewsletterHandler

__all__ = [
    "SendContactMessageCommand",
    "SendContactMessageHandler",
    "SubscribeNewsletterCommand",
    "SubscribeNewsletterHandler",
]
