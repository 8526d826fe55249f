"""Postgres-backed vehicle repository adapter."""

from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.dtos.vehicle import Vehicle
from app.application.ports.vehicle_repository import VehicleRepository
from app.domain.exceptions import VehicleSourceError
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import VehicleListingModel

ACTIVE_STATUS = "active"


class PostgresVehicleRepository(VehicleRepository):
    """Postgres implementation of vehicle repository over the vehicle_listings table."""

    def _model_to_dto(self, model: VehicleListingModel) -> Optional[Vehicle]:
        """
        Convert VehicleListingModel to Vehicle DTO.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Vehicle DTO, or None if the row is invalid
        """
        try:
            return Vehicle(
                id=model.id,
                title=model.title,
                make=model.make,
                model=model.model,
                year=model.year,
                price=model.price,
                mileage=model.mileage,
                location=model.location,
                images=model.images,
                fuel_type=model.fuel_type,
                transmission=model.transmission,
                vehicle_type=model.vehicle_type,
                created_at=model.created_at,
            )
        except ValidationError as e:
            logger.warning(f"Skipping invalid vehicle listing {model.id}: {e.error_count()} errors")
            return None

    async def list_active(self) -> list[Vehicle]:
        """
        List all active vehicles.

        Returns:
            Vehicles ordered by creation time, newest first

        Raises:
            VehicleSourceError: If the query fails
        """
        db: Session = get_db_session()
        try:
            models = (
                db.query(VehicleListingModel)
                .filter(VehicleListingModel.status == ACTIVE_STATUS)
                .order_by(VehicleListingModel.created_at.desc())
                .all()
            )
            vehicles = (self._model_to_dto(model) for model in models)
            return [vehicle for vehicle in vehicles if vehicle is not None]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing vehicles: {str(e)}")
            raise VehicleSourceError("Failed to list vehicles") from e
        finally:
            db.close()

    async def get(self, vehicle_id: str) -> Optional[Vehicle]:
        """
        Get an active vehicle by id.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Vehicle DTO, or None if not found or invalid

        Raises:
            VehicleSourceError: If the query fails
        """
        db: Session = get_db_session()
        try:
            model = (
                db.query(VehicleListingModel)
                .filter(
                    VehicleListingModel.id == vehicle_id,
                    VehicleListingModel.status == ACTIVE_STATUS,
                )
                .first()
            )
            if model is None:
                return None
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting vehicle {vehicle_id}: {str(e)}")
            raise VehicleSourceError(f"Failed to get vehicle {vehicle_id}") from e
        finally:
            db.close()
