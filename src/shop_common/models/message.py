"""Plain message response model."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Body of every message-only response, successful or not."""

    message: str = Field(..., description="Human-readable message")
