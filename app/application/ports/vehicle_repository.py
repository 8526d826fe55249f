"""Vehicle repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.application.dtos.vehicle import Vehicle


class VehicleRepository(ABC):
    """Port interface for the vehicle data source."""

    @abstractmethod
    async def list_active(self) -> list[Vehicle]:
        """
        List all active vehicles.

        Returns:
            Active vehicles ordered by creation time, newest first

        Raises:
            VehicleSourceError: If the data source cannot be read
        """
        pass

    @abstractmethod
    async def get(self, vehicle_id: str) -> Optional[Vehicle]:
        """
        Get an active vehicle by id.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Vehicle DTO, or None if not found
        """
        pass
