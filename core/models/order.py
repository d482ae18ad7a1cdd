"""Checkout models."""

from datetime import datetime

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class OrderItem(BaseModel):
    id: int
    name: str
    price: float
    quantity: int = Field(ge=0)


class CheckoutForm(BaseModel):
    name: str = Field(min_length=1, description="Full name is required")
    email: str = Field(min_length=1, pattern=EMAIL_PATTERN)
    address: str = Field(
        min_length=10, description="Please provide a complete address"
    )


class OrderSummary(BaseModel):
    subtotal: float
    shipping: float
    tax: float
    total: float


class OrderRequest(OrderSummary):
    customer: CheckoutForm
    items: list[OrderItem]


class OrderConfirmation(BaseModel):
    success: bool = True
    orderId: int
    message: str
    customer: CheckoutForm
    items: list[OrderItem]
    total: float
    estimatedDelivery: datetime
