"""
Server-side service registry.

Services are created lazily from the loaded configuration and the shared
buses. ``main.lifespan`` builds them at startup; tests replace them with the
setters or drop them all with ``reset_state``.
"""

from config import Config, get_config
from core import (
    ChatResponder,
    InMemoryProductStore,
    ProductMutator,
    ProductStore,
    RandomSource,
    default_random,
)
from core.seed import SAMPLE_PRODUCTS

from .event_bus import get_chat_bus, get_product_bus, set_chat_bus, set_product_bus


# =============================================================================
# Configuration
# =============================================================================

_config: Config | None = None


def set_config(config: Config | None) -> None:
    global _config
    _config = config


def get_current_config() -> Config:
    """Get the active configuration, falling back to the loaded config files."""
    return _config or get_config()


# =============================================================================
# Randomness
# =============================================================================

_rng: RandomSource = default_random


def set_random(rng: RandomSource | None) -> None:
    global _rng
    _rng = rng or default_random


def get_random() -> RandomSource:
    return _rng


# =============================================================================
# Product Store
# =============================================================================

_store: ProductStore | None = None


def set_store(store: ProductStore | None) -> None:
    global _store
    _store = store


def get_store() -> ProductStore:
    """Get the product store, seeding a fresh in-memory one if necessary."""
    global _store
    if _store is None:
        seed = SAMPLE_PRODUCTS if get_current_config().seed_products else ()
        _store = InMemoryProductStore(seed)
    return _store


# =============================================================================
# Simulation Services
# =============================================================================

_mutator: ProductMutator | None = None
_responder: ChatResponder | None = None


def set_mutator(mutator: ProductMutator | None) -> None:
    global _mutator
    _mutator = mutator


def get_mutator() -> ProductMutator:
    global _mutator
    if _mutator is None:
        _mutator = ProductMutator(
            get_store(),
            get_product_bus(),
            settings=get_current_config().simulation,
            rng=get_random(),
        )
    return _mutator


def set_responder(responder: ChatResponder | None) -> None:
    global _responder
    _responder = responder


def get_responder() -> ChatResponder:
    global _responder
    if _responder is None:
        _responder = ChatResponder(get_chat_bus(), settings=get_current_config().chat)
    return _responder


def reset_state() -> None:
    """Drop every service so the next access rebuilds it."""
    set_config(None)
    set_random(None)
    set_store(None)
    set_mutator(None)
    set_responder(None)
    set_product_bus(None)
    set_chat_bus(None)
