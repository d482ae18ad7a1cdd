"""Centralized logging configuration for the storefront server."""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Generator, Optional

# Log format constants
SIMPLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
)

# Environment variable names
LOG_LEVEL_ENV = "LOG_LEVEL"

# Default values
DEFAULT_LOG_LEVEL = "INFO"

NOISY_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "sse_starlette": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.INFO,
}


def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging for the entire application.

    Args:
        level: Log level override. If not provided, uses LOG_LEVEL env var or INFO.
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    # Use simple format for INFO+, detailed format with line numbers for DEBUG
    fmt = DETAILED_FORMAT if log_level == logging.DEBUG else SIMPLE_FORMAT

    logging.basicConfig(
        level=log_level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name, noisy_level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(noisy_level)


@contextmanager
def log_timing(
    logger: logging.Logger, operation: str, level: int = logging.DEBUG
) -> Generator[None, None, None]:
    """Context manager for timing operations.

    Example:
        with log_timing(logger, "Order submission"):
            confirmation = await submit_order(order)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.log(level, "%s completed in %.1fms", operation, duration_ms)
