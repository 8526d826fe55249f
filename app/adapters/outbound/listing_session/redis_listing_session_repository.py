"""Redis-backed listing session repository adapter."""

import json
from datetime import datetime, timezone
from typing import Any, Optional

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from app.application.dtos.vehicle import Vehicle
from app.application.ports.listing_session_repository import ListingSessionRepository
from app.domain.entities.listing_session import LOADING, ListingSession
from app.domain.value_objects.filter_state import FilterState
from app.domain.value_objects.sort_key import SortKey
from app.infrastructure.logging.logger import logger


class RedisListingSessionRepository(ListingSessionRepository):
    """Redis implementation of listing session repository with per-session TTL."""

    KEY_PREFIX = "listing:session:"

    def __init__(self, redis_url: str, ttl_seconds: int) -> None:
        """
        Initialize Redis listing session repository.

        Args:
            redis_url: Redis connection URL
            ttl_seconds: Time-to-live in seconds for stored sessions
        """
        self._redis_url = redis_url
        self._ttl_seconds = ttl_seconds
        self._client: Optional[aioredis.Redis] = None

    async def _get_client(self) -> aioredis.Redis:
        """
        Get or create Redis client.

        Returns:
            Redis client instance
        """
        if self._client is None:
            self._client = await aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _make_key(self, session_id: str) -> str:
        return f"{self.KEY_PREFIX}{session_id}"

    def _serialize_session(self, session: ListingSession) -> dict[str, Any]:
        """
        Serialize ListingSession to dictionary.

        Args:
            session: Listing session entity

        Returns:
            JSON-compatible dictionary
        """
        return {
            "session_id": session.session_id,
            "status": session.status,
            "filters": session.filters.to_dict(),
            "sort_key": SortKey(session.sort_key).value,
            "vehicles": [vehicle.model_dump(mode="json") for vehicle in session.vehicles],
            "initial_query": session.initial_query,
            "error": session.error,
            "created_at": session.created_at.isoformat() if session.created_at else None,
            "updated_at": session.updated_at.isoformat() if session.updated_at else None,
        }

    def _deserialize_session(self, data: dict[str, Any]) -> ListingSession:
        """
        Deserialize dictionary to ListingSession.

        Args:
            data: Dictionary representation of the session

        Returns:
            ListingSession entity
        """
        created_at = None
        updated_at = None
        if data.get("created_at"):
            created_at = datetime.fromisoformat(data["created_at"].replace("Z", "+00:00"))
        if data.get("updated_at"):
            updated_at = datetime.fromisoformat(data["updated_at"].replace("Z", "+00:00"))

        return ListingSession(
            session_id=data["session_id"],
            status=data.get("status", LOADING),
            filters=FilterState.from_dict(data.get("filters") or {}),
            sort_key=SortKey.parse(data.get("sort_key")),
            vehicles=[Vehicle.model_validate(item) for item in data.get("vehicles") or []],
            initial_query=data.get("initial_query") or {},
            error=data.get("error"),
            created_at=created_at or datetime.now(timezone.utc),
            updated_at=updated_at or datetime.now(timezone.utc),
        )

    async def get(self, session_id: str) -> Optional[ListingSession]:
        """
        Get listing session.

        Args:
            session_id: Session identifier

        Returns:
            Listing session entity, or None if missing, expired or unreadable
        """
        try:
            client = await self._get_client()
            stored = await client.get(self._make_key(session_id))
            if stored is None:
                return None
            return self._deserialize_session(json.loads(stored))
        except (RedisError, ValueError, KeyError) as e:
            logger.warning(f"Error reading listing session {session_id}: {str(e)}")
            return None

    async def save(self, session: ListingSession) -> None:
        """
        Save listing session with TTL.

        Args:
            session: Listing session entity to save
        """
        try:
            client = await self._get_client()
            payload = json.dumps(self._serialize_session(session), sort_keys=True)
            await client.setex(self._make_key(session.session_id), self._ttl_seconds, payload)
        except RedisError as e:
            logger.warning(f"Error writing listing session {session.session_id}: {str(e)}")

    async def delete(self, session_id: str) -> None:
        """
        Delete listing session.

        Args:
            session_id: Session identifier
        """
        try:
            client = await self._get_client()
            await client.delete(self._make_key(session_id))
        except RedisError as e:
            logger.warning(f"Error deleting listing session {session_id}: {str(e)}")

    async def close(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.close()
            self._client = None
