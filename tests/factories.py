"""Test data builders."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from app.application.dtos.vehicle import Vehicle
from app.application.ports.vehicle_repository import VehicleRepository
from app.domain.exceptions import VehicleSourceError

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_vehicle(vehicle_id: str, days_old: int = 0, **overrides: Any) -> Vehicle:
    """Build a vehicle; days_old shifts created_at back from BASE_TIME."""
    data: dict[str, Any] = {
        "id": vehicle_id,
        "title": f"Listing {vehicle_id}",
        "make": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "price": 1_000_000,
        "mileage": 20_000,
        "location": "Mumbai",
        "images": [],
        "fuel_type": "petrol",
        "transmission": "manual",
        "vehicle_type": "car",
        "created_at": BASE_TIME - timedelta(days=days_old),
    }
    data.update(overrides)
    return Vehicle(**data)


def sample_vehicles() -> list[Vehicle]:
    """Small mixed collection, newest first."""
    return [
        make_vehicle(
            "bmw-1",
            days_old=0,
            title="2020 BMW 3 Series 330i",
            make="BMW",
            model="3 Series",
            year=2020,
            price=2_000_000,
            location="Mumbai",
            fuel_type="Petrol",
            transmission="Automatic",
        ),
        make_vehicle(
            "audi-1",
            days_old=1,
            title="2018 Audi A4 Premium",
            make="Audi",
            model="A4",
            year=2018,
            price=3_000_000,
            location="Delhi",
            fuel_type="diesel",
            transmission="automatic",
        ),
        make_vehicle(
            "swift-1",
            days_old=2,
            title="2021 Maruti Suzuki Swift VXI",
            make="Maruti Suzuki",
            model="Swift",
            year=2021,
            price=620_000,
            location=None,
            fuel_type=None,
            transmission=None,
        ),
        make_vehicle(
            "ktm-1",
            days_old=3,
            title="2021 KTM Duke 390",
            make="KTM",
            model="Duke 390",
            year=2021,
            price=245_000,
            location="Chennai",
            fuel_type="petrol",
            transmission="manual",
            vehicle_type="bike",
        ),
    ]


class FlakyVehicleRepository(VehicleRepository):
    """Vehicle repository failing a configurable number of times."""

    def __init__(self, vehicles: list[Vehicle], failures: int = 1) -> None:
        self._vehicles = vehicles
        self.failures = failures
        self.calls = 0

    async def list_active(self) -> list[Vehicle]:
        self.calls += 1
        if self.calls <= self.failures:
            raise VehicleSourceError("connection refused")
        return list(self._vehicles)

    async def get(self, vehicle_id: str) -> Optional[Vehicle]:
        return None
