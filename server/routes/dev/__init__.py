"""
Developer simulation routes.

These endpoints drive the simulated product changes used to demo the
realtime product stream.
"""

from fastapi import FastAPI

from . import availability, price_change, trigger_change


def register_routes(app: FastAPI) -> None:
    """Register all dev simulation routes."""
    app.include_router(price_change.router)
    app.include_router(trigger_change.router)
    app.include_router(availability.router)
