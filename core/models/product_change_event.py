"""ProductChangeEvent model."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .utils import utc_now


class ChangeKind(str, Enum):
    """Kind of simulated product mutation."""

    PRICE_CHANGE = "price_change"
    AVAILABILITY_CHANGE = "availability_change"


class ProductChangePayload(BaseModel):
    productName: str
    newPrice: float | None = None
    isAvailable: bool | None = None
    timestamp: datetime = Field(default_factory=utc_now)


class ProductChangeEvent(BaseModel):
    productId: int
    type: ChangeKind
    data: ProductChangePayload
