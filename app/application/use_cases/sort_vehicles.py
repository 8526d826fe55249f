"""Sort vehicles use case."""

from collections.abc import Iterable

from app.application.dtos.vehicle import Vehicle
from app.domain.value_objects.sort_key import SortKey

# key function and descending flag per sort key
_ORDERINGS = {
    SortKey.NEWEST: (lambda vehicle: vehicle.created_at, True),
    SortKey.PRICE_LOW: (lambda vehicle: vehicle.price, False),
    SortKey.PRICE_HIGH: (lambda vehicle: vehicle.price, True),
    SortKey.YEAR_NEW: (lambda vehicle: vehicle.year, True),
    SortKey.YEAR_OLD: (lambda vehicle: vehicle.year, False),
}


def sort_vehicles(vehicles: Iterable[Vehicle], sort_key: SortKey) -> list[Vehicle]:
    """
    Order vehicles for display.

    Ties keep their relative input order. The input is never mutated.

    Args:
        vehicles: Vehicles to order
        sort_key: Display ordering

    Returns:
        New ordered list
    """
    key, descending = _ORDERINGS[SortKey(sort_key)]
    return sorted(vehicles, key=key, reverse=descending)
