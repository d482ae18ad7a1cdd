"""
Create product endpoint.
"""

from fastapi import APIRouter

from core import NewProduct, Product

from ...state import get_store


router = APIRouter()


@router.post("/product")
async def create_product_route(request: NewProduct) -> Product:
    """Create a new product."""
    return await get_store().create_product(request)
