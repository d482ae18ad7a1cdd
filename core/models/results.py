"""Result models for simulation and chat entrypoints."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .product_change_event import ChangeKind
from .utils import utc_now


class TriggerRejection(str, Enum):
    """Why a product change trigger was not scheduled."""

    ALREADY_TRIGGERED = "already_triggered"
    NO_CHANGE_TYPES = "no_change_types"


class TriggerResult(BaseModel):
    success: bool
    message: str
    changeType: ChangeKind | None = None
    reason: TriggerRejection | None = None

    @property
    def triggered(self) -> bool:
        return self.success


class ToggleResult(BaseModel):
    success: bool = True
    message: str
    isAvailable: bool


class ChatAck(BaseModel):
    """Immediate acknowledgment of an accepted chat message."""

    success: bool = True
    messageId: str
    replyMessageId: str
    timestamp: datetime = Field(default_factory=utc_now)
