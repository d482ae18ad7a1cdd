"""SummaryRequest model."""

from pydantic import BaseModel

from core import OrderItem


class SummaryRequest(BaseModel):
    items: list[OrderItem]
