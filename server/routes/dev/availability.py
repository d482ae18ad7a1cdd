"""
Immediate availability endpoints.

These bypass the simulated delay and publish their change right away.
"""

from fastapi import APIRouter

from core import ToggleResult

from ...state import get_mutator


router = APIRouter()


@router.post("/dev/product/{productID}/toggle-availability")
async def toggle_availability_route(productID: int) -> ToggleResult:
    """Flip a product's availability."""
    return await get_mutator().toggle_availability(productID)


@router.post("/dev/product/{productID}/make-available")
async def make_product_available_route(productID: int) -> ToggleResult:
    """Mark one product available."""
    return await get_mutator().make_product_available(productID)


@router.post("/dev/products/make-available")
async def make_all_products_available_route() -> dict:
    """Mark every product available."""
    count = await get_mutator().make_all_products_available()
    return {
        "success": True,
        "message": "All products are now available",
        "updated": count,
    }
