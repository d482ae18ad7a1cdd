"""
Tests for simulated product changes.
"""
import asyncio

import pytest

from config import SimulationConfig
from core import (
    ChangeKind,
    InMemoryProductStore,
    MutationFailedError,
    NotFoundError,
    NullEventBus,
    ProductMutator,
    ProductPatch,
    TriggerRejection,
    open_product_updates,
)
from helpers import FixedRandom, collect, make_products

FAST = SimulationConfig(mutation_delay_seconds=0.01, cooldown_seconds=10)


class BrokenStore(InMemoryProductStore):
    """Store whose writes always fail."""

    async def update_product(self, product_id, patch):
        raise OSError("disk full")


@pytest.fixture
def mutator(store, product_bus, clock):
    return ProductMutator(store, product_bus, FAST, FixedRandom(0.999), clock)


class TestRandomChoices:
    """Test price and change-kind selection."""

    def test_price_with_high_draw(self, store):
        mutator = ProductMutator(store, NullEventBus(), FAST, FixedRandom(0.999))
        assert mutator.next_price() == 149.9

    def test_price_bounds(self, store):
        assert ProductMutator(store, NullEventBus(), FAST, FixedRandom(0.0)).next_price() == 50.0
        assert ProductMutator(store, NullEventBus(), FAST, FixedRandom(0.25)).next_price() == 75.0

    def test_price_rounds_halves_up(self, store):
        mutator = ProductMutator(store, NullEventBus(), FAST, FixedRandom(0.00125))
        assert mutator.next_price() == 50.13

    def test_kind_split(self, store):
        mutator = ProductMutator(store, NullEventBus(), FAST, FixedRandom(0.59, 0.6))
        assert mutator.choose_kind() is ChangeKind.PRICE_CHANGE
        assert mutator.choose_kind() is ChangeKind.AVAILABILITY_CHANGE


class TestScheduleChange:
    """Test delayed product changes."""

    @pytest.mark.asyncio
    async def test_price_change_persists_then_publishes(self, mutator, store, product_bus):
        channel = open_product_updates(product_bus, 1)
        stream = channel.__aiter__()

        event = await mutator.schedule_change(1, "Product 1", ChangeKind.PRICE_CHANGE)

        assert event.type is ChangeKind.PRICE_CHANGE
        assert event.data.newPrice == 149.9
        assert (await store.get_product(1)).price == 149.9
        (tracked,) = await collect(stream, 1)
        assert tracked.data == event
        channel.cancel()

    @pytest.mark.asyncio
    async def test_change_is_delayed(self, store, product_bus):
        settings = SimulationConfig(mutation_delay_seconds=0.2)
        mutator = ProductMutator(store, product_bus, settings, FixedRandom(0.999))

        task = mutator.schedule_change(1, "Product 1", ChangeKind.PRICE_CHANGE)
        await asyncio.sleep(0.05)

        assert not task.done()
        assert (await store.get_product(1)).price == 10.0
        await task

    @pytest.mark.asyncio
    async def test_availability_toggle_scenario(self, mutator, store, product_bus):
        channel = open_product_updates(product_bus, filter_product_id=7)
        stream = channel.__aiter__()
        assert (await store.get_product(7)).isAvailable is True

        mutator.schedule_change(7, "Product 7", ChangeKind.AVAILABILITY_CHANGE)

        (tracked,) = await collect(stream, 1)
        assert tracked.data.type is ChangeKind.AVAILABILITY_CHANGE
        assert tracked.data.data.isAvailable is False
        assert (await store.get_product(7)).isAvailable is False

        with pytest.raises(asyncio.TimeoutError):
            await collect(stream, 1, timeout=0.05)

    @pytest.mark.asyncio
    async def test_forced_availability(self, mutator, store):
        event = await mutator.schedule_change(
            2, "Product 2", ChangeKind.AVAILABILITY_CHANGE, forced_availability=True
        )
        assert event.data.isAvailable is True
        assert (await store.get_product(2)).isAvailable is True

    @pytest.mark.asyncio
    async def test_random_kind_when_omitted(self, store, product_bus):
        mutator = ProductMutator(store, product_bus, FAST, FixedRandom(0.7))

        event = await mutator.schedule_change(3, "Product 3")

        assert event.type is ChangeKind.AVAILABILITY_CHANGE
        assert event.data.isAvailable is False

    @pytest.mark.asyncio
    async def test_missing_product_toggle_fails(self, mutator, product_bus):
        channel = open_product_updates(product_bus)
        stream = channel.__aiter__()

        with pytest.raises(NotFoundError):
            await mutator.schedule_change(99, "Ghost", ChangeKind.AVAILABILITY_CHANGE)

        with pytest.raises(asyncio.TimeoutError):
            await collect(stream, 1, timeout=0.05)

    @pytest.mark.asyncio
    async def test_store_failure_publishes_nothing(self, product_bus):
        store = BrokenStore(make_products(1))
        mutator = ProductMutator(store, product_bus, FAST, FixedRandom(0.5))
        channel = open_product_updates(product_bus)
        stream = channel.__aiter__()

        with pytest.raises(MutationFailedError):
            await mutator.schedule_change(1, "Product 1", ChangeKind.PRICE_CHANGE)

        with pytest.raises(asyncio.TimeoutError):
            await collect(stream, 1, timeout=0.05)

    @pytest.mark.asyncio
    async def test_wait_idle_and_pending_count(self, mutator):
        mutator.schedule_change(1, "Product 1", ChangeKind.PRICE_CHANGE)
        mutator.schedule_change(99, "Ghost", ChangeKind.AVAILABILITY_CHANGE)
        assert mutator.pending_count == 2

        await mutator.wait_idle()

        assert mutator.pending_count == 0


class TestTriggers:
    """Test the entrypoints that schedule or apply changes."""

    @pytest.mark.asyncio
    async def test_trigger_price_change(self, mutator, store):
        result = await mutator.trigger_price_change(4)

        assert result.triggered is True
        assert result.changeType is ChangeKind.PRICE_CHANGE
        await mutator.wait_idle()
        assert (await store.get_product(4)).price == 149.9

    @pytest.mark.asyncio
    async def test_trigger_price_change_unknown_product(self, mutator):
        with pytest.raises(NotFoundError):
            await mutator.trigger_price_change(99)

    @pytest.mark.asyncio
    async def test_cooldown(self, mutator, clock):
        first = await mutator.trigger_product_change(1)
        second = await mutator.trigger_product_change(1)

        assert first.success is True
        assert second.success is False
        assert second.reason is TriggerRejection.ALREADY_TRIGGERED

        # Other products are unaffected
        assert (await mutator.trigger_product_change(2)).success is True

        clock.advance(5)
        assert (await mutator.trigger_product_change(1)).success is False
        clock.advance(5)
        assert (await mutator.trigger_product_change(1)).success is True
        await mutator.wait_idle()

    @pytest.mark.asyncio
    async def test_trigger_availability_always_unavailable(self, store, product_bus, clock):
        mutator = ProductMutator(store, product_bus, FAST, FixedRandom(0.9), clock)
        await store.update_product(5, ProductPatch(isAvailable=False))

        result = await mutator.trigger_product_change(5)
        await mutator.wait_idle()

        assert result.changeType is ChangeKind.AVAILABILITY_CHANGE
        assert (await store.get_product(5)).isAvailable is False

    @pytest.mark.asyncio
    async def test_trigger_respects_enabled_kinds(self, mutator):
        price_only = await mutator.trigger_product_change(
            1, price_change_enabled=True, availability_change_enabled=False
        )
        availability_only = await mutator.trigger_product_change(
            2, price_change_enabled=False, availability_change_enabled=True
        )
        neither = await mutator.trigger_product_change(
            3, price_change_enabled=False, availability_change_enabled=False
        )
        await mutator.wait_idle()

        assert price_only.changeType is ChangeKind.PRICE_CHANGE
        assert availability_only.changeType is ChangeKind.AVAILABILITY_CHANGE
        assert neither.success is False
        assert neither.reason is TriggerRejection.NO_CHANGE_TYPES

    @pytest.mark.asyncio
    async def test_trigger_unknown_product(self, mutator):
        with pytest.raises(NotFoundError):
            await mutator.trigger_product_change(99)

    @pytest.mark.asyncio
    async def test_toggle_availability_is_immediate(self, mutator, store, product_bus):
        channel = open_product_updates(product_bus, 6)
        stream = channel.__aiter__()

        result = await mutator.toggle_availability(6)

        assert result.isAvailable is False
        assert result.message == "Product is now unavailable"
        assert (await store.get_product(6)).isAvailable is False
        (tracked,) = await collect(stream, 1)
        assert tracked.data.data.isAvailable is False

        again = await mutator.toggle_availability(6)
        assert again.isAvailable is True
        channel.cancel()

    @pytest.mark.asyncio
    async def test_toggle_store_failure(self, product_bus):
        mutator = ProductMutator(BrokenStore(make_products(1)), product_bus, FAST)
        with pytest.raises(MutationFailedError):
            await mutator.toggle_availability(1)

    @pytest.mark.asyncio
    async def test_make_available(self, mutator, store, product_bus):
        await mutator.toggle_availability(1)
        await mutator.toggle_availability(2)
        channel = open_product_updates(product_bus, 1)
        stream = channel.__aiter__()

        result = await mutator.make_product_available(1)

        assert result.isAvailable is True
        (tracked,) = await collect(stream, 1)
        assert tracked.data.data.isAvailable is True

        count = await mutator.make_all_products_available()
        assert count == 7
        assert all(product.isAvailable for product in await store.list_products())
        channel.cancel()
