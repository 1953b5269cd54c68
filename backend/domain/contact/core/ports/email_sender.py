"""Email sender port."""

from abc import ABC, abstractmethod

from ..value_objects.contact_message import ContactMessage
from ..value_objects.email_send_result import EmailSendResult
from ..value_objects.newsletter_signup import NewsletterSignup


class IEmailSender(ABC):
    """Port for outgoing email delivery."""

    @abstractmethod
    async def send_contact_email(self, message: ContactMessage) -> EmailSendResult:
        """
        Deliver a contact form message to the site owner.

        Raises:
            EmailDeliveryError: If the transport fails
        """
        pass

    @abstractmethod
    async def send_newsletter_signup(self, signup: NewsletterSignup) -> EmailSendResult:
        """
        Notify the site owner about a new newsletter subscriber.

        Raises:
            EmailDeliveryError: If the transport fails
        """
        pass
