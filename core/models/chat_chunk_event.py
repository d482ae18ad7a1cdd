"""ChatChunkEvent model."""

from pydantic import BaseModel, Field


class ChatChunkEvent(BaseModel):
    """
    Snapshot of an assistant reply as it is being generated.

    ``chunk`` holds the whole reply so far, not a delta. The latest event for a
    ``messageId`` replaces every earlier one.
    """

    sessionId: str
    messageId: str
    chunk: str
    isComplete: bool = Field(
        default=False, description="True only on the final snapshot of a reply"
    )
