"""
Product storage.

The store is the only shared mutable state in the system. Reads are plain
snapshots; there are no transactions or locks.
"""

import logging
from typing import Iterable, Protocol

from .exceptions import NotFoundError
from .models import NewProduct, Product, ProductPatch, utc_now

logger = logging.getLogger(__name__)


class ProductStore(Protocol):
    """Interface the mutators and routes use to read and write products."""

    async def list_products(self) -> list[Product]: ...

    async def get_product(self, product_id: int) -> Product | None: ...

    async def create_product(self, data: NewProduct) -> Product: ...

    async def update_product(self, product_id: int, patch: ProductPatch) -> Product: ...

    async def update_all(self, patch: ProductPatch) -> int: ...


class InMemoryProductStore:
    """Dict-backed ProductStore with auto-incrementing ids."""

    def __init__(self, products: Iterable[NewProduct] = ()) -> None:
        self.products: dict[int, Product] = {}
        self._next_id = 1
        for data in products:
            self._insert(data)

    def _insert(self, data: NewProduct) -> Product:
        product = Product(id=self._next_id, **data.model_dump())
        self.products[product.id] = product
        self._next_id += 1
        return product

    async def list_products(self) -> list[Product]:
        return list(self.products.values())

    async def get_product(self, product_id: int) -> Product | None:
        return self.products.get(product_id)

    async def create_product(self, data: NewProduct) -> Product:
        product = self._insert(data)
        logger.info("Product created: %d (%s)", product.id, product.name)
        return product

    async def update_product(self, product_id: int, patch: ProductPatch) -> Product:
        """
        Apply a partial update.

        Raises:
            NotFoundError: If the product does not exist
        """
        product = self.products.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        changes = patch.model_dump(exclude_none=True)
        updated = product.model_copy(update={**changes, "updatedAt": utc_now()})
        self.products[product_id] = updated
        return updated

    async def update_all(self, patch: ProductPatch) -> int:
        """Apply a partial update to every product. Returns the number updated."""
        for product_id in list(self.products):
            await self.update_product(product_id, patch)
        return len(self.products)
