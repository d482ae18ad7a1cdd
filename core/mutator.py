"""
Simulated product mutations.

Changes are applied after a delay to mimic slow backend processing. Each
applied change is written to the product store first and then published on
the product bus; a failed write publishes nothing.
"""

import asyncio
import logging
import math
import time
from typing import Callable

from config.simulation_config import SimulationConfig

from .events import EventBus
from .exceptions import MutationFailedError, NotFoundError
from .models import (
    ChangeKind,
    Product,
    ProductChangeEvent,
    ProductChangePayload,
    ProductPatch,
    ToggleResult,
    TriggerRejection,
    TriggerResult,
)
from .random_source import RandomSource, default_random
from .store import ProductStore

logger = logging.getLogger(__name__)


class ProductMutator:
    """
    Schedules and applies product price/availability changes.

    Args:
        store: Product store to read and write
        bus: Bus that receives ProductChangeEvents
        settings: Delay, cooldown and price distribution
        rng: Source of randomness for change kind and price
        clock: Monotonic clock used for the trigger cooldown
    """

    def __init__(
        self,
        store: ProductStore,
        bus: EventBus[ProductChangeEvent],
        settings: SimulationConfig | None = None,
        rng: RandomSource | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.bus = bus
        self.settings = settings or SimulationConfig()
        self.rng = rng or default_random
        self.clock = clock
        self._pending: set[asyncio.Task[ProductChangeEvent]] = set()
        self._recent_triggers: dict[int, float] = {}

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    # =========================================================================
    # Random choices
    # =========================================================================

    def choose_kind(self) -> ChangeKind:
        if self.rng.random() < self.settings.price_change_probability:
            return ChangeKind.PRICE_CHANGE
        return ChangeKind.AVAILABILITY_CHANGE

    def next_price(self) -> float:
        """Uniform price in [price_min, price_min + price_span], two decimals."""
        raw = self.settings.price_min + self.rng.random() * self.settings.price_span
        # Halves round up
        return math.floor(raw * 100 + 0.5) / 100

    # =========================================================================
    # Store access
    # =========================================================================

    async def _require_product(self, product_id: int) -> Product:
        product = await self.store.get_product(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    async def _write(self, product_id: int, patch: ProductPatch) -> Product:
        try:
            return await self.store.update_product(product_id, patch)
        except NotFoundError:
            raise
        except Exception as e:
            logger.exception("Store write failed for product %d", product_id)
            raise MutationFailedError(product_id, str(e)) from e

    def _publish_availability(self, product: Product) -> ProductChangeEvent:
        event = ProductChangeEvent(
            productId=product.id,
            type=ChangeKind.AVAILABILITY_CHANGE,
            data=ProductChangePayload(
                productName=product.name, isAvailable=product.isAvailable
            ),
        )
        self.bus.publish(event)
        return event

    # =========================================================================
    # Delayed changes
    # =========================================================================

    async def apply_change(
        self,
        product_id: int,
        product_name: str,
        kind: ChangeKind | None = None,
        forced_availability: bool | None = None,
    ) -> ProductChangeEvent:
        """
        Apply one change immediately and publish it.

        Raises:
            NotFoundError: If the product does not exist
            MutationFailedError: If the store rejects the write
        """
        kind = kind or self.choose_kind()

        if kind is ChangeKind.PRICE_CHANGE:
            new_price = self.next_price()
            await self._write(product_id, ProductPatch(price=new_price))
            event = ProductChangeEvent(
                productId=product_id,
                type=kind,
                data=ProductChangePayload(productName=product_name, newPrice=new_price),
            )
        else:
            if forced_availability is not None:
                new_availability = forced_availability
            else:
                # Fresh read right before the write
                current = await self._require_product(product_id)
                new_availability = not current.isAvailable
            await self._write(product_id, ProductPatch(isAvailable=new_availability))
            event = ProductChangeEvent(
                productId=product_id,
                type=kind,
                data=ProductChangePayload(
                    productName=product_name, isAvailable=new_availability
                ),
            )

        self.bus.publish(event)
        logger.info("Product %d: %s applied", product_id, kind.value)
        return event

    async def _delayed_change(
        self,
        product_id: int,
        product_name: str,
        kind: ChangeKind | None,
        forced_availability: bool | None,
    ) -> ProductChangeEvent:
        await asyncio.sleep(self.settings.mutation_delay_seconds)
        return await self.apply_change(product_id, product_name, kind, forced_availability)

    def schedule_change(
        self,
        product_id: int,
        product_name: str,
        kind: ChangeKind | None = None,
        forced_availability: bool | None = None,
    ) -> asyncio.Task[ProductChangeEvent]:
        """
        Schedule a change to run after ``mutation_delay_seconds``.

        Returns:
            The task applying the change. Its result is the published event;
            awaiting it re-raises NotFoundError or MutationFailedError.
        """
        task = asyncio.create_task(
            self._delayed_change(product_id, product_name, kind, forced_availability),
            name=f"product-change-{product_id}",
        )
        self._pending.add(task)
        task.add_done_callback(self._on_change_done)
        logger.debug(
            "Scheduled %s for product %d in %.1fs",
            kind.value if kind else "random change",
            product_id,
            self.settings.mutation_delay_seconds,
        )
        return task

    def _on_change_done(self, task: asyncio.Task[ProductChangeEvent]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("Scheduled product change failed: %s", error)

    async def wait_idle(self) -> None:
        """Wait for every scheduled change to finish."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def cancel_pending(self) -> None:
        for task in list(self._pending):
            task.cancel()

    # =========================================================================
    # Entrypoints
    # =========================================================================

    async def trigger_price_change(self, product_id: int) -> TriggerResult:
        """Schedule a price change for a product."""
        product = await self._require_product(product_id)
        self.schedule_change(product.id, product.name, ChangeKind.PRICE_CHANGE)
        return TriggerResult(
            success=True,
            message="Price change triggered",
            changeType=ChangeKind.PRICE_CHANGE,
        )

    def _in_cooldown(self, product_id: int) -> bool:
        now = self.clock()
        expired = [
            pid
            for pid, at in self._recent_triggers.items()
            if now - at >= self.settings.cooldown_seconds
        ]
        for pid in expired:
            del self._recent_triggers[pid]
        return product_id in self._recent_triggers

    async def trigger_product_change(
        self,
        product_id: int,
        price_change_enabled: bool = True,
        availability_change_enabled: bool = True,
    ) -> TriggerResult:
        """
        Schedule a random change, at most once per product per cooldown window.

        Availability changes scheduled here always make the product unavailable.

        Returns:
            TriggerResult with success=False and a reason when nothing was
            scheduled (cooldown hit or no change type enabled)
        """
        product = await self._require_product(product_id)

        if self._in_cooldown(product_id):
            logger.info("Product %d change rejected: cooldown active", product_id)
            return TriggerResult(
                success=False,
                message="Product change already triggered recently",
                reason=TriggerRejection.ALREADY_TRIGGERED,
            )

        if price_change_enabled and availability_change_enabled:
            kind = self.choose_kind()
        elif price_change_enabled:
            kind = ChangeKind.PRICE_CHANGE
        elif availability_change_enabled:
            kind = ChangeKind.AVAILABILITY_CHANGE
        else:
            return TriggerResult(
                success=False,
                message="No change types enabled",
                reason=TriggerRejection.NO_CHANGE_TYPES,
            )

        self._recent_triggers[product_id] = self.clock()

        if kind is ChangeKind.AVAILABILITY_CHANGE:
            self.schedule_change(product.id, product.name, kind, forced_availability=False)
        else:
            self.schedule_change(product.id, product.name, kind)

        return TriggerResult(
            success=True, message="Product change triggered", changeType=kind
        )

    async def toggle_availability(self, product_id: int) -> ToggleResult:
        """Flip availability immediately, without the simulated delay."""
        product = await self._require_product(product_id)
        updated = await self._write(
            product_id, ProductPatch(isAvailable=not product.isAvailable)
        )
        self._publish_availability(updated)
        state = "available" if updated.isAvailable else "unavailable"
        return ToggleResult(
            message=f"Product is now {state}", isAvailable=updated.isAvailable
        )

    async def make_product_available(self, product_id: int) -> ToggleResult:
        await self._require_product(product_id)
        updated = await self._write(product_id, ProductPatch(isAvailable=True))
        self._publish_availability(updated)
        return ToggleResult(message="Product is now available", isAvailable=True)

    async def make_all_products_available(self) -> int:
        """Mark every product available. Publishes no events."""
        try:
            count = await self.store.update_all(ProductPatch(isAvailable=True))
        except Exception as e:
            logger.exception("Failed to make all products available")
            raise MutationFailedError(0, str(e)) from e
        logger.info("Marked %d products available", count)
        return count
