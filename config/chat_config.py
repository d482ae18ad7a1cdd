"""ChatConfig model."""

from pydantic import BaseModel, Field

from .defaults import (
    DEFAULT_SESSION_ID,
    DEFAULT_THINKING_DELAY_SECONDS,
    DEFAULT_TOKEN_INTERVAL_SECONDS,
    MAX_CHAT_MESSAGE_LENGTH,
)


class ChatConfig(BaseModel):
    """Simulated assistant streaming configuration."""

    thinking_delay_seconds: float = Field(
        default=DEFAULT_THINKING_DELAY_SECONDS,
        ge=0,
        description="Delay before the first token of a reply",
    )
    token_interval_seconds: float = Field(
        default=DEFAULT_TOKEN_INTERVAL_SECONDS,
        ge=0,
        description="Spacing between streamed tokens",
    )
    max_message_length: int = Field(default=MAX_CHAT_MESSAGE_LENGTH, gt=0)
    default_session_id: str = DEFAULT_SESSION_ID
