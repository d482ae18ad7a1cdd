"""Product models."""

from datetime import datetime

from pydantic import BaseModel, Field

from .utils import utc_now


class NewProduct(BaseModel):
    """Fields accepted when creating a product."""

    name: str
    description: str
    price: float
    image: str
    category: str
    stock: int = 0


class Product(NewProduct):
    id: int
    isAvailable: bool = True
    createdAt: datetime = Field(default_factory=utc_now)
    updatedAt: datetime = Field(default_factory=utc_now)


class ProductPatch(BaseModel):
    """Partial update applied to a stored product. Unset fields are left alone."""

    price: float | None = None
    isAvailable: bool | None = None
    stock: int | None = None
