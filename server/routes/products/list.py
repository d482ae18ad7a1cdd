"""
List products endpoint.
"""

from fastapi import APIRouter

from core import Product

from ...state import get_store


router = APIRouter()


@router.get("/product")
async def list_products_route() -> list[Product]:
    """List all products."""
    return await get_store().list_products()
