"""
Test doubles and async helpers shared across test modules.
"""
import asyncio
from typing import AsyncIterator, TypeVar

from core import NewProduct

T = TypeVar("T")


class FixedRandom:
    """RandomSource that returns the given values in order, repeating the last one."""

    def __init__(self, *values: float, order_id: int = 4242):
        self.values = list(values) or [0.5]
        self.order_id = order_id
        self.calls = 0

    def random(self) -> float:
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]

    def randrange(self, stop: int) -> int:
        return self.order_id % stop


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


async def collect(stream: AsyncIterator[T], count: int, timeout: float = 1.0) -> list[T]:
    """Read ``count`` items from an async iterator, failing after ``timeout`` seconds."""
    items: list[T] = []

    async def _read() -> None:
        async for item in stream:
            items.append(item)
            if len(items) == count:
                return

    await asyncio.wait_for(_read(), timeout)
    return items


def make_products(count: int) -> list[NewProduct]:
    return [
        NewProduct(
            name=f"Product {index}",
            description=f"Description {index}",
            price=10.0 * index,
            image=f"https://example.com/{index}.png",
            category="Test",
            stock=index,
        )
        for index in range(1, count + 1)
    ]


