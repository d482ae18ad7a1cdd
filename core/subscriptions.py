"""
Filtered, cancellable views over the product and chat buses.

Each channel registers its own listener on the shared bus and drops events
that do not match its filter. There is no backlog on the bus, so a client that
reconnects with a last event id only resumes from events published after the
reconnect; the id is kept as a cursor for client-side deduplication.
"""

import asyncio
import logging
from typing import AsyncIterator

from .events import Bus
from .models import ChatChunkEvent, ProductChangeEvent, TrackedEvent

logger = logging.getLogger(__name__)


def resumption_token(event: ProductChangeEvent) -> str:
    return str(event.productId)


class ProductUpdatesChannel:
    """
    Product change stream for one client.

    Args:
        bus: Product change bus
        filter_product_id: Only yield events for this product; None yields all
        cancel_event: External cancellation signal (client disconnect)
        last_event_id: Last event id the client saw before reconnecting
    """

    def __init__(
        self,
        bus: Bus[ProductChangeEvent],
        filter_product_id: int | None = None,
        cancel_event: asyncio.Event | None = None,
        last_event_id: str | None = None,
    ) -> None:
        self.filter_product_id = filter_product_id
        self.cursor = last_event_id
        self._subscription = bus.subscribe(cancel_event)
        if last_event_id is not None:
            logger.info(
                "Product updates resumed after event %s (no replay of missed events)",
                last_event_id,
            )

    def matches(self, event: ProductChangeEvent) -> bool:
        return self.filter_product_id is None or event.productId == self.filter_product_id

    def cancel(self) -> None:
        self._subscription.cancel()

    async def __aiter__(self) -> AsyncIterator[TrackedEvent[ProductChangeEvent]]:
        async with self._subscription as events:
            async for event in events:
                if not self.matches(event):
                    continue
                tracked = TrackedEvent[ProductChangeEvent](
                    id=resumption_token(event), data=event
                )
                self.cursor = tracked.id
                yield tracked


class ChatUpdatesChannel:
    """Chat chunk stream for one session."""

    def __init__(
        self,
        bus: Bus[ChatChunkEvent],
        session_id: str,
        cancel_event: asyncio.Event | None = None,
    ) -> None:
        self.session_id = session_id
        self._subscription = bus.subscribe(cancel_event)

    def cancel(self) -> None:
        self._subscription.cancel()

    async def __aiter__(self) -> AsyncIterator[ChatChunkEvent]:
        async with self._subscription as events:
            async for event in events:
                if event.sessionId == self.session_id:
                    yield event


def open_product_updates(
    bus: Bus[ProductChangeEvent],
    filter_product_id: int | None = None,
    cancel_event: asyncio.Event | None = None,
    last_event_id: str | None = None,
) -> ProductUpdatesChannel:
    """Open a product change stream. Iterate the result with ``async for``."""
    return ProductUpdatesChannel(bus, filter_product_id, cancel_event, last_event_id)


def open_chat_updates(
    bus: Bus[ChatChunkEvent],
    session_id: str,
    cancel_event: asyncio.Event | None = None,
) -> ChatUpdatesChannel:
    """Open a chat chunk stream for one session."""
    return ChatUpdatesChannel(bus, session_id, cancel_event)
