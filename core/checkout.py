"""
Checkout operations.

Order submission is simulated: it waits, then fails on purpose some of the
time so clients can exercise their retry and error handling.
"""

import asyncio
import logging
from datetime import timedelta

from config.checkout_config import CheckoutConfig
from config.defaults import MAX_ORDER_ID

from .exceptions import SimulatedFailureError
from .models import OrderConfirmation, OrderItem, OrderRequest, OrderSummary, utc_now
from .random_source import RandomSource, default_random

logger = logging.getLogger(__name__)

SIMULATED_FAILURE_MESSAGE = "Connection to the server failed. Please try again."
ORDER_SUCCESS_MESSAGE = "Order processed successfully!"


def calculate_summary(
    items: list[OrderItem], settings: CheckoutConfig | None = None
) -> OrderSummary:
    """Compute subtotal, flat shipping, tax and total for a cart."""
    settings = settings or CheckoutConfig()
    subtotal = sum(item.price * item.quantity for item in items)
    tax = subtotal * settings.tax_rate
    return OrderSummary(
        subtotal=subtotal,
        shipping=settings.shipping,
        tax=tax,
        total=subtotal + settings.shipping + tax,
    )


async def submit_order(
    order: OrderRequest,
    rng: RandomSource | None = None,
    settings: CheckoutConfig | None = None,
) -> OrderConfirmation:
    """
    Process an order after a simulated delay.

    Raises:
        SimulatedFailureError: On the configured share of submissions
    """
    rng = rng or default_random
    settings = settings or CheckoutConfig()

    await asyncio.sleep(settings.processing_delay_seconds)

    if rng.random() > 1 - settings.failure_rate:
        logger.warning("Simulated checkout failure for %s", order.customer.email)
        raise SimulatedFailureError(SIMULATED_FAILURE_MESSAGE)

    order_id = rng.randrange(MAX_ORDER_ID)
    logger.info("Order %d accepted (%d items, total %.2f)", order_id, len(order.items), order.total)
    return OrderConfirmation(
        orderId=order_id,
        message=ORDER_SUCCESS_MESSAGE,
        customer=order.customer,
        items=order.items,
        total=order.total,
        estimatedDelivery=utc_now() + timedelta(days=settings.delivery_days),
    )
