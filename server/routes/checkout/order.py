"""
Submit order endpoint.
"""

import logging

from fastapi import APIRouter

from core import OrderConfirmation, OrderRequest, submit_order

from ...logging_config import log_timing
from ...state import get_current_config, get_random

logger = logging.getLogger(__name__)


router = APIRouter()


@router.post("/checkout/order")
async def submit_order_route(request: OrderRequest) -> OrderConfirmation:
    """
    Submit an order.

    Fails with 502 on a simulated failure; clients are expected to retry.
    """
    with log_timing(logger, "Order submission", level=logging.INFO):
        return await submit_order(
            request, rng=get_random(), settings=get_current_config().checkout
        )
