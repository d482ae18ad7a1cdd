"""
Storefront HTTP API server.

Exposes the catalogue, simulation, checkout and chat operations over HTTP,
and the product and chat streams over Server-Sent Events.
"""

from .app import app
from .routes import register_routes
from .state import (
    get_mutator,
    get_responder,
    get_store,
    reset_state,
    set_config,
    set_mutator,
    set_random,
    set_responder,
    set_store,
)

# Register all routes with the app
register_routes(app)

__all__ = [
    "app",
    "get_store",
    "set_store",
    "get_mutator",
    "set_mutator",
    "get_responder",
    "set_responder",
    "set_config",
    "set_random",
    "reset_state",
]
