"""EmailSendResult value object - outcome reported by an email sender."""

from pydantic import BaseModel, ConfigDict, Field


class EmailSendResult(BaseModel):
    """Result of a delivered email, returned as-is to HTTP clients."""

    model_config = ConfigDict(frozen=True)

    success: bool = True
    message_id: str = Field(..., description="Message-ID header of the sent email")
