"""
Product update SSE endpoint.
"""

import json
import logging
from functools import partial
from typing import AsyncGenerator, Callable

from fastapi import APIRouter, Header, Query
from sse_starlette.sse import EventSourceResponse

from core import ProductUpdatesChannel, open_product_updates

from ...event_bus import get_product_bus

logger = logging.getLogger(__name__)

PRODUCT_UPDATE_EVENT = "product.updated"

router = APIRouter()


async def product_update_events(
    open_channel: Callable[[], ProductUpdatesChannel],
) -> AsyncGenerator[dict, None]:
    """
    Render a product channel as SSE messages.

    The channel is opened on first iteration, so a response that is never
    streamed registers no listener on the bus.
    """
    channel = open_channel()
    try:
        async for tracked in channel:
            yield {
                "id": tracked.id,
                "event": PRODUCT_UPDATE_EVENT,
                "data": tracked.data.model_dump_json(),
            }
    except Exception as e:
        # Ends this stream only; the bus and other subscribers are unaffected
        logger.exception("Error in product update stream")
        yield {"event": "error", "data": json.dumps({"error": str(e)})}
    finally:
        channel.cancel()


@router.get("/product/updates")
async def product_updates_route(
    productId: int | None = Query(None),
    lastEventId: str | None = Query(None),
    last_event_id: str | None = Header(None, alias="Last-Event-ID"),
) -> EventSourceResponse:
    """Subscribe to product changes, optionally for a single product."""
    open_channel = partial(
        open_product_updates,
        get_product_bus(),
        filter_product_id=productId,
        last_event_id=last_event_id or lastEventId,
    )
    return EventSourceResponse(product_update_events(open_channel))
