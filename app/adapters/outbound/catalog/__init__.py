"""Vehicle catalog adapters."""

from app.adapters.outbound.catalog.csv_vehicle_repository import CSVVehicleRepository
from app.adapters.outbound.catalog.in_memory_vehicle_repository import InMemoryVehicleRepository
from app.adapters.outbound.catalog.postgres_vehicle_repository import PostgresVehicleRepository

__all__ = [
    "CSVVehicleRepository",
    "InMemoryVehicleRepository",
    "PostgresVehicleRepository",
]
