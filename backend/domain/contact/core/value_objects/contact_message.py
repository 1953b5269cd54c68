"""ContactMessage value object - a message submitted via the contact form."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContactMessage(BaseModel):
    """
    Contact form message.

    Example:
        >>> msg = ContactMessage(name="Anna", email="anna@example.com", message="Hi")
        >>> msg.display_subject()
        'Wiadomość od Anna'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Sender name")
    email: str = Field(..., min_length=3, description="Sender email (used as Reply-To)")
    message: str = Field(..., min_length=1, description="Message body")
    subject: Optional[str] = Field(default=None, description="Optional subject line")
    phone: Optional[str] = Field(default=None, description="Optional phone number")

    @field_validator("name", "email", "message")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject whitespace-only values."""
        if not v.strip():
            raise ValueError("Field cannot be empty or whitespace")
        return v.strip()

    @field_validator("email")
    @classmethod
    def has_at_sign(cls, v: str) -> str:
        """Minimal address sanity check."""
        if "@" not in v:
            raise ValueError(f"Invalid email address: {v}")
        return v

    def display_subject(self) -> str:
        """Subject used for the outgoing email."""
        if self.subject and self.subject.strip():
            return self.subject.strip()
        return f"Wiadomość od {self.name}"

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ContactMessage:
        """Build from a raw JSON request body."""
        return cls.model_validate(payload)
