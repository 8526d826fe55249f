"""Filter vehicles use case."""

from collections.abc import Iterable
from typing import Optional

from app.application.dtos.vehicle import Vehicle
from app.domain.value_objects.filter_state import FilterState, is_active


def _contains(field_value: Optional[str], term: str) -> bool:
    return field_value is not None and term in field_value.lower()


def _equals_ignore_case(field_value: Optional[str], expected: str) -> bool:
    # Unknown values never match a specific filter
    return field_value is not None and field_value.lower() == expected.lower()


def matches(vehicle: Vehicle, filters: FilterState) -> bool:
    """
    Check if a vehicle satisfies every active criterion.

    Args:
        vehicle: Vehicle to check
        filters: Filter state

    Returns:
        True if the vehicle matches all active criteria
    """
    term = filters.search.strip().lower()
    if term and not any(
        _contains(value, term)
        for value in (vehicle.title, vehicle.make, vehicle.model, vehicle.location)
    ):
        return False

    if is_active(filters.vehicle_type) and vehicle.vehicle_type != filters.vehicle_type:
        return False

    if is_active(filters.make) and vehicle.make != filters.make:
        return False

    if is_active(filters.model) and vehicle.model != filters.model:
        return False

    price_min, price_max = filters.price_range
    if not price_min <= vehicle.price <= price_max:
        return False

    year_min, year_max = filters.year_range
    if not year_min <= vehicle.year <= year_max:
        return False

    if is_active(filters.location) and not _equals_ignore_case(vehicle.location, filters.location):
        return False

    if is_active(filters.fuel_type) and not _equals_ignore_case(
        vehicle.fuel_type, filters.fuel_type
    ):
        return False

    if is_active(filters.transmission) and not _equals_ignore_case(
        vehicle.transmission, filters.transmission
    ):
        return False

    return True


def filter_vehicles(vehicles: Iterable[Vehicle], filters: FilterState) -> list[Vehicle]:
    """
    Select the vehicles matching all active criteria, preserving input order.

    Args:
        vehicles: Full vehicle collection
        filters: Filter state

    Returns:
        Matching vehicles in their original order
    """
    return [vehicle for vehicle in vehicles if matches(vehicle, filters)]
