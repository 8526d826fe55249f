"""Related listings: similar and featured vehicles."""

from collections.abc import Iterable

from app.application.dtos.vehicle import Vehicle
from app.application.use_cases.sort_vehicles import sort_vehicles
from app.domain.value_objects.sort_key import SortKey

SIMILAR_LIMIT = 4
FEATURED_LIMIT = 6


def similar_vehicles(
    vehicles: Iterable[Vehicle],
    current: Vehicle,
    limit: int = SIMILAR_LIMIT,
) -> list[Vehicle]:
    """
    Find listings similar to the one being viewed.

    Similar means same category and same make, excluding the current listing.

    Args:
        vehicles: Active vehicles
        current: Vehicle being viewed
        limit: Maximum number of results

    Returns:
        Newest similar vehicles first
    """
    candidates = [
        vehicle
        for vehicle in vehicles
        if vehicle.id != current.id
        and vehicle.vehicle_type == current.vehicle_type
        and (not current.make or vehicle.make == current.make)
    ]
    return sort_vehicles(candidates, SortKey.NEWEST)[:limit]


def featured_vehicles(vehicles: Iterable[Vehicle], limit: int = FEATURED_LIMIT) -> list[Vehicle]:
    """
    Select the newest listings for the home page.

    Args:
        vehicles: Active vehicles
        limit: Maximum number of results

    Returns:
        Newest vehicles first
    """
    return sort_vehicles(vehicles, SortKey.NEWEST)[:limit]
