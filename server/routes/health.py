"""
Health check endpoint.
"""

from fastapi import APIRouter

from ..event_bus import get_chat_bus, get_product_bus


router = APIRouter()


@router.get("/health")
async def health() -> dict:
    """Health check endpoint with live stream counts."""
    return {
        "status": "ok",
        "product_listeners": get_product_bus().listener_count,
        "chat_listeners": get_chat_bus().listener_count,
    }
