"""In-memory vehicle repository adapter."""

from collections.abc import Iterable
from typing import Optional

from app.application.dtos.vehicle import Vehicle
from app.application.ports.vehicle_repository import VehicleRepository


class InMemoryVehicleRepository(VehicleRepository):
    """In-memory implementation of vehicle repository for testing/development."""

    def __init__(self, vehicles: Optional[Iterable[Vehicle]] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            vehicles: Active vehicles to serve (empty by default)
        """
        self._vehicles: list[Vehicle] = list(vehicles or [])

    async def list_active(self) -> list[Vehicle]:
        """
        List all active vehicles.

        Returns:
            Vehicles ordered by creation time, newest first
        """
        return sorted(self._vehicles, key=lambda vehicle: vehicle.created_at, reverse=True)

    async def get(self, vehicle_id: str) -> Optional[Vehicle]:
        """
        Get a vehicle by id.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Vehicle DTO, or None if not found
        """
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None
