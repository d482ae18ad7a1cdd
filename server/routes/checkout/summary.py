"""
Order summary endpoint.
"""

from fastapi import APIRouter

from core import OrderSummary, calculate_summary

from ...requests import SummaryRequest
from ...state import get_current_config


router = APIRouter()


@router.post("/checkout/summary")
async def calculate_summary_route(request: SummaryRequest) -> OrderSummary:
    """Compute subtotal, shipping, tax and total for cart items."""
    return calculate_summary(request.items, get_current_config().checkout)
