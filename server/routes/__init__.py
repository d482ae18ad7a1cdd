"""
Route registration for the storefront API.
"""

from fastapi import FastAPI

from . import chat, checkout, dev, health, products


def register_routes(app: FastAPI) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(health.router)
    products.register_routes(app)
    dev.register_routes(app)
    checkout.register_routes(app)
    chat.register_routes(app)
