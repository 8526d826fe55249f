"""HTTP adapter schemas for the listing API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from app.application.dtos.vehicle import Vehicle
from app.domain.value_objects.sort_key import SortKey


class OpenListingRequest(BaseModel):
    """Start a listing session from the page URL."""

    query: str = ""  # raw query string of the listing page URL
    sort: SortKey = SortKey.NEWEST

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "query": "vehicleType=car&make=BMW&priceRange=2000000-5000000",
                "sort": "newest",
            }
        }
    )


class FilterUpdateRequest(BaseModel):
    """User edits to the listing filters. Omitted fields stay unchanged."""

    search: Optional[str] = None
    vehicle_type: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    price_min: Optional[int] = None
    price_max: Optional[int] = None
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    location: Optional[str] = None
    fuel_type: Optional[str] = None
    transmission: Optional[str] = None

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "make": "Audi",
                "price_min": 2500000,
                "price_max": 5000000,
            }
        },
    )

    def to_changes(self) -> dict[str, Any]:
        """
        Translate the request into FilterState changes.

        A range bound left as None keeps its current value.

        Returns:
            Changes keyed by FilterState field name
        """
        changes = self.model_dump(
            exclude_none=True,
            exclude={"price_min", "price_max", "year_from", "year_to"},
        )
        if self.price_min is not None or self.price_max is not None:
            changes["price_range"] = (self.price_min, self.price_max)
        if self.year_from is not None or self.year_to is not None:
            changes["year_range"] = (self.year_from, self.year_to)
        return changes


class SortUpdateRequest(BaseModel):
    """Change of display ordering."""

    sort: SortKey


class MakesResponse(BaseModel):
    """Makes offered for a vehicle category."""

    vehicle_type: str
    makes: list[str]


class VehicleListResponse(BaseModel):
    """Plain list of vehicles."""

    vehicles: list[Vehicle]
    count: int
