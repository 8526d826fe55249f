"""Dependency injection factory functions."""

from typing import Optional

from app.adapters.outbound.catalog import (
    CSVVehicleRepository,
    InMemoryVehicleRepository,
    PostgresVehicleRepository,
)
from app.adapters.outbound.listing_session import (
    InMemoryListingSessionRepository,
    RedisListingSessionRepository,
)
from app.application.ports.listing_session_repository import ListingSessionRepository
from app.application.ports.vehicle_repository import VehicleRepository
from app.application.use_cases.listing_service import ListingService
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_listing_event


def create_vehicle_repository() -> VehicleRepository:
    """
    Factory function to create the vehicle repository.

    Returns:
        VehicleRepository instance
    """
    if settings.vehicle_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when VEHICLE_REPOSITORY=postgres")
        return PostgresVehicleRepository()
    if settings.vehicle_repository == "in_memory":
        return InMemoryVehicleRepository()
    return CSVVehicleRepository(csv_path=settings.catalog_csv_path or None)


def create_listing_session_repository() -> ListingSessionRepository:
    """
    Factory function to create the listing session repository.

    Returns:
        ListingSessionRepository instance (Redis or in-memory), both expiring
        sessions after LISTING_SESSION_TTL_SECONDS
    """
    if settings.listing_session_repository == "redis":
        if not settings.redis_url:
            raise ValueError("REDIS_URL is required when LISTING_SESSION_REPOSITORY=redis")
        return RedisListingSessionRepository(
            settings.redis_url,
            ttl_seconds=settings.listing_session_ttl_seconds,
        )
    return InMemoryListingSessionRepository(ttl_seconds=settings.listing_session_ttl_seconds)


def create_listing_service(
    vehicle_repository: Optional[VehicleRepository] = None,
    session_repository: Optional[ListingSessionRepository] = None,
) -> ListingService:
    """
    Factory function to create ListingService with dependencies.

    Args:
        vehicle_repository: Vehicle repository (created from settings if omitted)
        session_repository: Session repository (created from settings if omitted)

    Returns:
        ListingService instance
    """
    if vehicle_repository is None:
        vehicle_repository = create_vehicle_repository()
    if session_repository is None:
        session_repository = create_listing_session_repository()

    return ListingService(
        vehicle_repository,
        session_repository,
        base_path=settings.listing_base_path,
        site_name=settings.site_name,
        logger=log_listing_event,
    )
