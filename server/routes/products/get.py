"""
Get product endpoint.
"""

from fastapi import APIRouter

from core import NotFoundError, Product

from ...state import get_store


router = APIRouter()


@router.get("/product/{productID}")
async def get_product_route(productID: int) -> Product:
    """Get a product by ID."""
    product = await get_store().get_product(productID)
    if product is None:
        raise NotFoundError("Product", productID)
    return product
