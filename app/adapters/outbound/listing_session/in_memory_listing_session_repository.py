"""In-memory listing session repository adapter."""

import time
from copy import deepcopy
from typing import Callable, Optional

from app.application.ports.listing_session_repository import ListingSessionRepository
from app.domain.entities.listing_session import ListingSession


class InMemoryListingSessionRepository(ListingSessionRepository):
    """In-memory implementation of listing session repository with per-session TTL."""

    def __init__(
        self,
        ttl_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize in-memory repository.

        Args:
            ttl_seconds: Seconds a session lives after its last save (None keeps sessions forever)
            clock: Monotonic time source in seconds
        """
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        # session_id -> (expires_at, session)
        self._storage: dict[str, tuple[Optional[float], ListingSession]] = {}

    def _evict_expired(self) -> None:
        now = self._clock()
        expired = [
            session_id
            for session_id, (expires_at, _) in self._storage.items()
            if expires_at is not None and expires_at <= now
        ]
        for session_id in expired:
            del self._storage[session_id]

    async def get(self, session_id: str) -> Optional[ListingSession]:
        """
        Get listing session.

        Args:
            session_id: Session identifier

        Returns:
            Copy of the stored session, or None if not found or expired
        """
        self._evict_expired()
        entry = self._storage.get(session_id)
        return deepcopy(entry[1]) if entry is not None else None

    async def save(self, session: ListingSession) -> None:
        """
        Save listing session, restarting its TTL.

        Args:
            session: Listing session entity to save
        """
        self._evict_expired()
        expires_at = None
        if self._ttl_seconds is not None:
            expires_at = self._clock() + self._ttl_seconds
        self._storage[session.session_id] = (expires_at, deepcopy(session))

    async def delete(self, session_id: str) -> None:
        """
        Delete listing session.

        Args:
            session_id: Session identifier
        """
        self._storage.pop(session_id, None)
