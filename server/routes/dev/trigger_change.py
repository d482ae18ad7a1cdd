"""
Debounced random product change endpoint.
"""

from fastapi import APIRouter

from core import TriggerResult

from ...requests import TriggerChangeRequest
from ...state import get_mutator


router = APIRouter()


@router.post("/dev/product/{productID}/trigger-change", response_model_exclude_none=True)
async def trigger_product_change_route(
    productID: int, request: TriggerChangeRequest | None = None
) -> TriggerResult:
    """
    Schedule a random change unless one was triggered for this product recently.

    A cooldown hit is not an error: it returns ``success: false`` with reason
    ``already_triggered``.
    """
    request = request or TriggerChangeRequest()
    return await get_mutator().trigger_product_change(
        productID,
        price_change_enabled=request.priceChangeEnabled,
        availability_change_enabled=request.availabilityChangeEnabled,
    )
