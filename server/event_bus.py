"""
Process-wide bus instances.

One bus per topic is created on first use (normally at startup) and lives
until the process exits. Tests swap them out with ``set_product_bus`` and
``set_chat_bus``.
"""

from core import Bus, ChatChunkEvent, ProductChangeEvent

_product_bus: Bus[ProductChangeEvent] | None = None
_chat_bus: Bus[ChatChunkEvent] | None = None


def get_product_bus() -> Bus[ProductChangeEvent]:
    """Get the product change bus, creating it if necessary."""
    global _product_bus
    if _product_bus is None:
        _product_bus = Bus("product-updates")
    return _product_bus


def set_product_bus(bus: Bus[ProductChangeEvent] | None) -> None:
    global _product_bus
    _product_bus = bus


def get_chat_bus() -> Bus[ChatChunkEvent]:
    """Get the chat chunk bus, creating it if necessary."""
    global _chat_bus
    if _chat_bus is None:
        _chat_bus = Bus("chat-chunks")
    return _chat_bus


def set_chat_bus(bus: Bus[ChatChunkEvent] | None) -> None:
    global _chat_bus
    _chat_bus = bus
