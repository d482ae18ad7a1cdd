"""
Checkout route registration.
"""

from fastapi import FastAPI

from . import order, summary


def register_routes(app: FastAPI) -> None:
    """Register all checkout routes."""
    app.include_router(summary.router)
    app.include_router(order.router)
