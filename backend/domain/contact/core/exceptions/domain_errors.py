"""Domain exceptions for contact messages."""


class ContactDomainError(Exception):
    """Base exception for contact domain errors."""

    pass


class InvalidContactMessageError(ContactDomainError):
    """Raised when a submitted payload cannot be turned into a message."""

    pass


class EmailDeliveryError(ContactDomainError):
    """Raised when the email transport rejects or fails to send a message."""

    def __init__(self, recipient: str, reason: str):
        super().__init__(f"Failed to send email to {recipient}: {reason}")
        self.recipient = recipient
        self.reason = reason


class EmailNotConfiguredError(ContactDomainError):
    """Raised when sender or recipient addresses are not configured."""

    pass
