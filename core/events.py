"""
In-process event buses.

A Bus broadcasts every published event to all listeners registered at publish
time. It keeps no backlog: a new subscription only sees events published after
it was created. Filtering is left to subscribers.

The server layer creates one bus per topic at startup (see server/event_bus.py).
"""

import asyncio
import logging
from typing import Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class EventBus(Protocol[T_contra]):
    """Abstract interface for publishing events."""

    def publish(self, event: T_contra) -> None:
        """Publish an event to all subscribers."""
        ...


class NullEventBus:
    """No-op EventBus implementation for testing."""

    def publish(self, event: object) -> None:
        """Discard the event."""
        pass


class Subscription(Generic[T]):
    """
    One listener on a Bus, consumed as an async iterator.

    Iteration ends (without error) when the subscription is cancelled, either
    through ``cancel()``, the external ``cancel_event``, or by leaving the
    ``async with`` block. The listener is deregistered at that point and its
    queued events are dropped.
    """

    def __init__(self, bus: "Bus[T]", cancel_event: asyncio.Event | None = None) -> None:
        self._bus = bus
        self._queue: asyncio.Queue[T] = asyncio.Queue()
        self._cancel_event = cancel_event or asyncio.Event()
        self._closed = False

    @property
    def cancelled(self) -> bool:
        return self._closed or self._cancel_event.is_set()

    def deliver(self, event: T) -> None:
        """Enqueue an event. Called by the bus."""
        self._queue.put_nowait(event)

    def cancel(self) -> None:
        """Stop iteration and deregister from the bus."""
        self._cancel_event.set()
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._bus.remove(self)
        # Release anything still queued
        while not self._queue.empty():
            self._queue.get_nowait()

    async def aclose(self) -> None:
        self.close()

    async def __aenter__(self) -> "Subscription[T]":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    def __aiter__(self) -> "Subscription[T]":
        return self

    async def __anext__(self) -> T:
        if self.cancelled:
            self.close()
            raise StopAsyncIteration

        if not self._queue.empty():
            return self._queue.get_nowait()

        getter = asyncio.ensure_future(self._queue.get())
        watcher = asyncio.ensure_future(self._cancel_event.wait())
        try:
            await asyncio.wait({getter, watcher}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            # Consumer task was cancelled (client disconnect)
            self.close()
            raise
        finally:
            for task in (getter, watcher):
                if not task.done():
                    task.cancel()

        if self.cancelled:
            self.close()
            raise StopAsyncIteration
        return getter.result()


class Bus(Generic[T]):
    """
    Broadcast topic backed by one asyncio.Queue per subscriber.

    ``publish`` is synchronous and never blocks: queues are unbounded and
    events are handed to listeners in registration order.
    """

    def __init__(self, name: str = "bus") -> None:
        self.name = name
        self._subscriptions: list[Subscription[T]] = []

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    def publish(self, event: T) -> None:
        """Publish an event to all subscribers."""
        for subscription in list(self._subscriptions):
            if subscription.cancelled:
                # Cancelled through an external event nobody is awaiting yet
                self.remove(subscription)
                continue
            subscription.deliver(event)

    def subscribe(self, cancel_event: asyncio.Event | None = None) -> Subscription[T]:
        """
        Register a new listener.

        Args:
            cancel_event: Optional external signal; setting it ends iteration

        Returns:
            A Subscription that yields every event published from now on
        """
        subscription: Subscription[T] = Subscription(self, cancel_event)
        self._subscriptions.append(subscription)
        logger.debug("%s: listener added (%d total)", self.name, self.listener_count)
        return subscription

    def remove(self, subscription: Subscription[T]) -> None:
        """Deregister a listener. Safe to call more than once."""
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.debug("%s: listener removed (%d left)", self.name, self.listener_count)
