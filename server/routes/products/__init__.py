"""
Product route registration.
"""

from fastapi import FastAPI

from . import create, get, list, updates


def register_routes(app: FastAPI) -> None:
    """Register all product routes."""
    # Before get: "/product/updates" would otherwise match "/product/{productID}"
    app.include_router(updates.router)
    app.include_router(list.router)
    app.include_router(create.router)
    app.include_router(get.router)
