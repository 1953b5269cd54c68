"""Factory for creating email sender instances."""

from typing import Optional

from domain.contact.core.ports.email_sender import IEmailSender
from infrastructure.config import get_email_backend, get_smtp_settings

from .in_memory_email_sender import InMemoryEmailSender
from .smtp_email_sender import SmtpEmailSender

# Singleton instance
_email_sender: Optional[IEmailSender] = None


def create_email_sender() -> IEmailSender:
    """
    Create email sender based on EMAIL_BACKEND configuration.

    Environment Variables:
        EMAIL_BACKEND: 'smtp' or 'inmemory'
        SMTP_*: relay settings (see infrastructure.config)

    Returns:
        IEmailSender implementation

    Default:
        Returns InMemoryEmailSender if EMAIL_BACKEND not set or unknown
    """
    backend = get_email_backend()

    if backend == "smtp":
        return SmtpEmailSender(get_smtp_settings())

    # Unknown type - graceful fallback to inmemory
    return InMemoryEmailSender()


def get_email_sender() -> IEmailSender:
    """
    Get singleton email sender instance.

    Lazy initialization on first call.
    """
    global _email_sender
    if _email_sender is None:
        _email_sender = create_email_sender()
    return _email_sender


def reset_email_sender() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _email_sender
    _email_sender = None
