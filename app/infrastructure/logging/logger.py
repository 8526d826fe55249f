"""Structured logger for observability."""

import logging
from typing import Any

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("voiture_listings")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_listing_event(
    session_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a listing session.

    Args:
        session_id: Listing session identifier
        component: Component name (e.g., 'http', 'controller', 'catalog')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "session_id": session_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


# Export logger instance
logger = _logger
