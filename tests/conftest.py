"""
Shared pytest fixtures for all tests.
"""
import pytest

from config import ChatConfig, CheckoutConfig, Config, SimulationConfig
from core import Bus, ChatChunkEvent, InMemoryProductStore, ProductChangeEvent
from helpers import FakeClock, make_products


@pytest.fixture
def fast_config() -> Config:
    """Config with the simulated delays shrunk to milliseconds."""
    return Config(
        simulation=SimulationConfig(mutation_delay_seconds=0.01, cooldown_seconds=10),
        chat=ChatConfig(thinking_delay_seconds=0.01, token_interval_seconds=0.001),
        checkout=CheckoutConfig(processing_delay_seconds=0),
    )


@pytest.fixture
def store() -> InMemoryProductStore:
    """Store holding products 1..7, all available."""
    return InMemoryProductStore(make_products(7))


@pytest.fixture
def product_bus() -> Bus[ProductChangeEvent]:
    return Bus("test-products")


@pytest.fixture
def chat_bus() -> Bus[ChatChunkEvent]:
    return Bus("test-chat")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
