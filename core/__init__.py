"""
Core business logic package.

This package contains the transport-agnostic storefront logic: event buses,
filtered subscriptions, simulated product changes, chat streaming and
checkout. The server package provides HTTP and SSE bindings around it.
"""

from .chat import ChatResponder, latest_chunks, select_response
from .checkout import calculate_summary, submit_order
from .events import Bus, EventBus, NullEventBus, Subscription
from .exceptions import (
    CoreError,
    MutationFailedError,
    NotFoundError,
    SimulatedFailureError,
    ValidationFailedError,
)
from .models import (
    ChangeKind,
    ChatAck,
    ChatChunkEvent,
    CheckoutForm,
    NewProduct,
    OrderConfirmation,
    OrderItem,
    OrderRequest,
    OrderSummary,
    Product,
    ProductChangeEvent,
    ProductChangePayload,
    ProductPatch,
    ToggleResult,
    TrackedEvent,
    TriggerRejection,
    TriggerResult,
    gen_id,
)
from .mutator import ProductMutator
from .random_source import RandomSource, default_random
from .store import InMemoryProductStore, ProductStore
from .subscriptions import (
    ChatUpdatesChannel,
    ProductUpdatesChannel,
    open_chat_updates,
    open_product_updates,
)

__all__ = [
    # Exceptions
    "CoreError",
    "NotFoundError",
    "ValidationFailedError",
    "MutationFailedError",
    "SimulatedFailureError",
    # Events
    "Bus",
    "EventBus",
    "NullEventBus",
    "Subscription",
    # Models
    "Product",
    "NewProduct",
    "ProductPatch",
    "ChangeKind",
    "ProductChangeEvent",
    "ProductChangePayload",
    "ChatChunkEvent",
    "TrackedEvent",
    "TriggerRejection",
    "TriggerResult",
    "ToggleResult",
    "ChatAck",
    "OrderItem",
    "CheckoutForm",
    "OrderSummary",
    "OrderRequest",
    "OrderConfirmation",
    "gen_id",
    # Store
    "ProductStore",
    "InMemoryProductStore",
    # Randomness
    "RandomSource",
    "default_random",
    # Subscriptions
    "ProductUpdatesChannel",
    "ChatUpdatesChannel",
    "open_product_updates",
    "open_chat_updates",
    # Operations
    "ProductMutator",
    "ChatResponder",
    "select_response",
    "latest_chunks",
    "calculate_summary",
    "submit_order",
]
