"""CheckoutConfig model."""

from pydantic import BaseModel, Field

from .defaults import (
    DEFAULT_CHECKOUT_DELAY_SECONDS,
    DEFAULT_CHECKOUT_FAILURE_RATE,
    DEFAULT_DELIVERY_DAYS,
    DEFAULT_SHIPPING_COST,
    DEFAULT_TAX_RATE,
)


class CheckoutConfig(BaseModel):
    """Order processing configuration."""

    processing_delay_seconds: float = Field(
        default=DEFAULT_CHECKOUT_DELAY_SECONDS, ge=0
    )
    failure_rate: float = Field(
        default=DEFAULT_CHECKOUT_FAILURE_RATE,
        ge=0,
        le=1,
        description="Chance that an order submission fails on purpose",
    )
    shipping: float = Field(default=DEFAULT_SHIPPING_COST, ge=0)
    tax_rate: float = Field(default=DEFAULT_TAX_RATE, ge=0)
    delivery_days: int = Field(default=DEFAULT_DELIVERY_DAYS, ge=0)
