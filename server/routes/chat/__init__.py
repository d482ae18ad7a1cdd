"""
Chat route registration.
"""

from fastapi import FastAPI

from . import send, updates


def register_routes(app: FastAPI) -> None:
    """Register all chat routes."""
    app.include_router(send.router)
    app.include_router(updates.router)
