"""
Storefront server entry point.
"""
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from server import app, get_mutator, get_responder, get_store, set_config
from server.event_bus import get_chat_bus, get_product_bus
from server.logging_config import setup_logging
from server.state import get_current_config

# Initialize logging before anything else
setup_logging()
logger = logging.getLogger(__name__)

# Constants
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the buses and services at startup and stop pending work at shutdown."""
    config = get_current_config()
    set_config(config)

    logger.info("Starting storefront server")
    logger.info(
        "Mutation delay: %.1fs, cooldown: %.1fs",
        config.simulation.mutation_delay_seconds,
        config.simulation.cooldown_seconds,
    )

    get_product_bus()
    get_chat_bus()
    products = await get_store().list_products()
    logger.info("Product store ready (%d products)", len(products))
    mutator = get_mutator()
    responder = get_responder()

    yield

    logger.info("Shutting down: cancelling %d pending changes and %d replies",
                mutator.pending_count, responder.pending_count)
    mutator.cancel_pending()
    responder.cancel_pending()


app.router.lifespan_context = lifespan


def main() -> None:
    """Start the storefront server."""
    host = os.environ.get("HOST", DEFAULT_HOST)
    port = int(os.environ.get("PORT", str(DEFAULT_PORT)))

    logger.info("Server listening on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
