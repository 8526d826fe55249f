"""Listing page DTOs."""

from typing import Optional

from app.application.dtos.base import DTO
from app.application.dtos.vehicle import Vehicle
from app.domain.value_objects.filter_state import FilterState
from app.domain.value_objects.sort_key import SortKey


class FilterValues(DTO):
    """Serializable view of the active filter state."""

    search: str
    vehicle_type: str
    make: str
    model: str
    price_min: int
    price_max: int
    year_from: int
    year_to: int
    location: str
    fuel_type: str
    transmission: str

    @classmethod
    def from_state(cls, state: FilterState) -> "FilterValues":
        """
        Build DTO from a FilterState value object.

        Args:
            state: Filter state

        Returns:
            FilterValues DTO
        """
        return cls(
            search=state.search,
            vehicle_type=state.vehicle_type,
            make=state.make,
            model=state.model,
            price_min=state.price_range[0],
            price_max=state.price_range[1],
            year_from=state.year_range[0],
            year_to=state.year_range[1],
            location=state.location,
            fuel_type=state.fuel_type,
            transmission=state.transmission,
        )


class ListingPage(DTO):
    """Filtered and sorted listing page."""

    session_id: Optional[str] = None
    status: str
    filters: FilterValues
    sort: SortKey
    vehicles: list[Vehicle]
    total_count: int
    empty: bool
    url: str
    title: str
    heading: str
    description: str
    results_label: str
    error: Optional[str] = None
