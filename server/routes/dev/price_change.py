"""
Trigger price change endpoint.
"""

from fastapi import APIRouter

from core import TriggerResult

from ...state import get_mutator


router = APIRouter()


@router.post("/dev/product/{productID}/price-change")
async def trigger_price_change_route(productID: int) -> dict:
    """Schedule a delayed price change for a product."""
    result: TriggerResult = await get_mutator().trigger_price_change(productID)
    return {"triggered": result.triggered, **result.model_dump(exclude_none=True)}
