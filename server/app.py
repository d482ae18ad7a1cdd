"""
FastAPI application setup and configuration.
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import (
    CoreError,
    MutationFailedError,
    NotFoundError,
    SimulatedFailureError,
    ValidationFailedError,
)
from server.middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEFAULT_CORS_ORIGINS = "*"
API_TITLE = "Storefront API"
API_VERSION = "1.0.0"

# Checked in order, so subclasses must come before their bases
ERROR_STATUS_CODES: list[tuple[type[CoreError], int]] = [
    (NotFoundError, 404),
    (ValidationFailedError, 422),
    (SimulatedFailureError, 502),
    (MutationFailedError, 500),
]


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(title=API_TITLE, version=API_VERSION)


# =============================================================================
# Error Handling
# =============================================================================


def status_for(error: CoreError) -> int:
    for error_type, status in ERROR_STATUS_CODES:
        if isinstance(error, error_type):
            return status
    return 500


@app.exception_handler(CoreError)
async def core_error_handler(request: Request, exc: CoreError) -> JSONResponse:
    """Translate core exceptions into JSON error responses."""
    status = status_for(exc)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


# =============================================================================
# CORS Configuration
# =============================================================================

# For production, set CORS_ORIGINS to specific allowed origins:
# Example: CORS_ORIGINS="https://shop.example.com,https://admin.example.com"

cors_origins_env = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
cors_origins = (
    [origin.strip() for origin in cors_origins_env.split(",")]
    if cors_origins_env != DEFAULT_CORS_ORIGINS
    else [DEFAULT_CORS_ORIGINS]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging middleware (added after CORS so it runs first)
app.add_middleware(RequestLoggingMiddleware)
