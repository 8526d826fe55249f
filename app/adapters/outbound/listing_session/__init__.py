"""Listing session repository adapters."""

from app.adapters.outbound.listing_session.in_memory_listing_session_repository import (
    InMemoryListingSessionRepository,
)
from app.adapters.outbound.listing_session.redis_listing_session_repository import (
    RedisListingSessionRepository,
)

__all__ = [
    "InMemoryListingSessionRepository",
    "RedisListingSessionRepository",
]
