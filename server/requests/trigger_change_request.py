"""TriggerChangeRequest model."""

from pydantic import BaseModel


class TriggerChangeRequest(BaseModel):
    priceChangeEnabled: bool = True
    availabilityChangeEnabled: bool = True
