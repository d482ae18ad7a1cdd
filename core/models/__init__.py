"""
Domain models for the storefront.

These are the core data structures used throughout the application.
"""

from .chat_chunk_event import ChatChunkEvent
from .order import CheckoutForm, OrderConfirmation, OrderItem, OrderRequest, OrderSummary
from .product import NewProduct, Product, ProductPatch
from .product_change_event import ChangeKind, ProductChangeEvent, ProductChangePayload
from .results import ChatAck, ToggleResult, TriggerRejection, TriggerResult
from .tracked_event import TrackedEvent
from .utils import gen_id, utc_now

__all__ = [
    # Utils
    "gen_id",
    "utc_now",
    # Product models
    "NewProduct",
    "Product",
    "ProductPatch",
    # Event models
    "ChangeKind",
    "ProductChangePayload",
    "ProductChangeEvent",
    "ChatChunkEvent",
    "TrackedEvent",
    # Results
    "TriggerRejection",
    "TriggerResult",
    "ToggleResult",
    "ChatAck",
    # Checkout models
    "OrderItem",
    "CheckoutForm",
    "OrderSummary",
    "OrderRequest",
    "OrderConfirmation",
]
