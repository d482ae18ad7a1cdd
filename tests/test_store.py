"""
Tests for the in-memory product store.
"""
import pytest

from core import InMemoryProductStore, NewProduct, NotFoundError, ProductPatch
from core.seed import SAMPLE_PRODUCTS


@pytest.mark.asyncio
async def test_seeded_ids_are_sequential():
    store = InMemoryProductStore(SAMPLE_PRODUCTS)
    products = await store.list_products()

    assert [product.id for product in products] == [1, 2, 3, 4, 5, 6]
    assert products[0].name == "Premium Headphones"
    assert all(product.isAvailable for product in products)


@pytest.mark.asyncio
async def test_get_missing_returns_none(store):
    assert await store.get_product(99) is None


@pytest.mark.asyncio
async def test_create_assigns_next_id(store):
    product = await store.create_product(
        NewProduct(name="Desk Lamp", description="LED lamp", price=39.9, image="lamp.png", category="Home")
    )
    assert product.id == 8
    assert product.stock == 0
    assert (await store.get_product(8)).name == "Desk Lamp"


@pytest.mark.asyncio
async def test_update_applies_only_set_fields(store):
    before = await store.get_product(1)

    updated = await store.update_product(1, ProductPatch(price=12.5))

    assert updated.price == 12.5
    assert updated.isAvailable is before.isAvailable
    assert updated.stock == before.stock
    assert updated.updatedAt >= before.updatedAt


@pytest.mark.asyncio
async def test_update_missing_raises(store):
    with pytest.raises(NotFoundError):
        await store.update_product(99, ProductPatch(price=1.0))


@pytest.mark.asyncio
async def test_update_all(store):
    count = await store.update_all(ProductPatch(isAvailable=False))
    assert count == 7
    assert not any(product.isAvailable for product in await store.list_products())
