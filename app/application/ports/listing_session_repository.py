"""Listing session repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.listing_session import ListingSession


class ListingSessionRepository(ABC):
    """Port interface for listing session storage."""

    @abstractmethod
    async def get(self, session_id: str) -> Optional[ListingSession]:
        """
        Get listing session.

        Args:
            session_id: Session identifier

        Returns:
            Listing session entity, or None if not found
        """
        pass

    @abstractmethod
    async def save(self, session: ListingSession) -> None:
        """
        Save listing session.

        Args:
            session: Listing session entity to save
        """
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """
        Delete listing session.

        Args:
            session_id: Session identifier
        """
        pass
