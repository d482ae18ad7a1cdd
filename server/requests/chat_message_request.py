"""ChatMessageRequest model."""

from pydantic import BaseModel, Field


class ChatMessageRequest(BaseModel):
    message: str
    sessionId: str | None = Field(
        default=None, description="Chat session; the default session when omitted"
    )
