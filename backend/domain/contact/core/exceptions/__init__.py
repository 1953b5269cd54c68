"""Contact domain exceptions."""

from .domain_errors import (
    ContactDomainError,
    EmailDeliveryError,
    EmailNotConfiguredError,
    InvalidContactMessageError,
)

__all__ = [
    "ContactDomainError",
    "InvalidContactMessageError",
    "EmailDeliveryError",
    "EmailNotConfiguredError",
]
