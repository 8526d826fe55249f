"""CSV-backed vehicle repository adapter."""

import csv
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from app.application.dtos.vehicle import Vehicle
from app.application.ports.vehicle_repository import VehicleRepository
from app.infrastructure.logging.logger import logger

IMAGE_SEPARATOR = "|"


class CSVVehicleRepository(VehicleRepository):
    """CSV implementation of vehicle repository."""

    def __init__(self, csv_path: Optional[str] = None) -> None:
        """
        Initialize CSV vehicle repository.

        Args:
            csv_path: Path to CSV file. Defaults to data/vehicles.csv relative to project root.

        Raises:
            FileNotFoundError: If the CSV file does not exist
        """
        if csv_path is None:
            project_root = Path(__file__).resolve().parents[4]
            csv_path = str(project_root / "data" / "vehicles.csv")
        self._csv_path = csv_path
        self._vehicles: list[Vehicle] = []
        self._load_catalog()

    def _load_catalog(self) -> None:
        """Load active listings from the CSV file, newest first."""
        if not os.path.exists(self._csv_path):
            raise FileNotFoundError(f"Vehicle CSV file not found: {self._csv_path}")

        vehicles = []
        with open(self._csv_path, "r", encoding="utf-8") as file:
            reader = csv.DictReader(file)
            for line_number, row in enumerate(reader, start=2):
                if (row.get("status") or "active").strip() != "active":
                    continue
                vehicle = self._map_row_to_vehicle(row)
                if vehicle is None:
                    logger.warning(
                        f"Skipping invalid vehicle row {line_number} in {self._csv_path}"
                    )
                    continue
                vehicles.append(vehicle)

        self._vehicles = sorted(vehicles, key=lambda vehicle: vehicle.created_at, reverse=True)

    @staticmethod
    def _optional(value: Optional[str]) -> Optional[str]:
        value = (value or "").strip()
        return value or None

    def _map_row_to_vehicle(self, row: dict[str, str]) -> Optional[Vehicle]:
        """
        Map CSV row to Vehicle DTO.

        Args:
            row: CSV row as dictionary

        Returns:
            Vehicle DTO or None if row is invalid
        """
        try:
            mileage = self._optional(row.get("mileage"))
            images = self._optional(row.get("images"))
            vehicle = Vehicle(
                id=row["id"].strip(),
                title=row["title"].strip(),
                make=row["make"].strip(),
                model=row["model"].strip(),
                year=int(row["year"]),
                price=int(row["price"]),
                mileage=int(mileage) if mileage else None,
                location=self._optional(row.get("location")),
                images=images.split(IMAGE_SEPARATOR) if images else [],
                fuel_type=self._optional(row.get("fuel_type")),
                transmission=self._optional(row.get("transmission")),
                vehicle_type=row["vehicle_type"].strip(),
                created_at=datetime.fromisoformat(row["created_at"].strip().replace("Z", "+00:00")),
            )
        except (ValueError, KeyError, AttributeError, ValidationError):
            return None

        if not vehicle.id or not vehicle.make or not vehicle.model or vehicle.price < 0:
            return None
        return vehicle

    async def list_active(self) -> list[Vehicle]:
        """
        List all active vehicles.

        Returns:
            Vehicles ordered by creation time, newest first
        """
        return self._vehicles.copy()

    async def get(self, vehicle_id: str) -> Optional[Vehicle]:
        """
        Get a vehicle by id.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Vehicle DTO, or None if not found
        """
        return next((vehicle for vehicle in self._vehicles if vehicle.id == vehicle_id), None)
