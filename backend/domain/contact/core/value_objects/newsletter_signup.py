"""NewsletterSignup value object."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NewsletterSignup(BaseModel):
    """Request to join the newsletter."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    email: str = Field(..., min_length=3, description="Subscriber email")
    name: Optional[str] = Field(default=None, description="Optional subscriber name")

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        v = v.strip()
        if "@" not in v:
            raise ValueError(f"Invalid email address: {v}")
        return v

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> NewsletterSignup:
        """Build from a raw JSON request body."""
        return cls.model_validate(payload)
