"""Vehicle DTOs."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import ConfigDict, computed_field, field_validator

from app.application.dtos.base import DTO
from app.application.use_cases.listing_metadata import format_price_short


class Vehicle(DTO):
    """Active vehicle listing as read from the data source."""

    id: str
    title: str
    make: str
    model: str
    year: int
    price: int  # whole rupees
    mileage: Optional[int] = None
    location: Optional[str] = None
    images: list[str] = []
    fuel_type: Optional[str] = None
    transmission: Optional[str] = None
    vehicle_type: Literal["car", "bike"]
    created_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "c1f4c5a2-2d0b-4a43-9d7e-2f1f0f6c1a01",
                "title": "2020 BMW 3 Series 330i M Sport",
                "make": "BMW",
                "model": "3 Series",
                "year": 2020,
                "price": 4200000,
                "mileage": 32000,
                "location": "Mumbai",
                "images": ["https://cdn.voiture.in/listings/c1f4/front.jpg"],
                "fuel_type": "petrol",
                "transmission": "automatic",
                "vehicle_type": "car",
                "created_at": "2024-03-01T10:15:00Z",
            }
        }
    )

    @field_validator("images", mode="before")
    @classmethod
    def _images_default(cls, value: Optional[list[str]]) -> list[str]:
        """Treat a null image list as empty."""
        return value or []

    @field_validator("created_at")
    @classmethod
    def _created_at_aware(cls, value: datetime) -> datetime:
        """Assume UTC for naive timestamps (SQLite and CSV sources return naive values)."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @computed_field
    @property
    def price_label(self) -> str:
        """Short rupee price shown on listing cards, e.g. "₹4.5 L"."""
        return format_price_short(self.price)
