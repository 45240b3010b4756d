"""
Centralized logging configuration.
"""

import logging
import sys


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure application-wide logging."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
        stream=sys.stdout,
    )
    # httpx logs every request at INFO, once per poll
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
