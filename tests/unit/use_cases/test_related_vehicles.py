"""Unit tests for related listings."""

from app.application.use_cases.related_vehicles import featured_vehicles, similar_vehicles
from tests.factories import make_vehicle


def _ids(vehicles):
    return [vehicle.id for vehicle in vehicles]


def test_similar_vehicles_same_make_and_type():
    """Test similar listings share make and category, excluding the current one."""
    current = make_vehicle("a", make="Honda", model="City")
    vehicles = [
        current,
        make_vehicle("b", days_old=2, make="Honda", model="Amaze"),
        make_vehicle("c", days_old=1, make="Honda", model="Jazz"),
        make_vehicle("d", make="Honda", model="Activa", vehicle_type="bike"),
        make_vehicle("e", make="Hyundai", model="i20"),
    ]

    assert _ids(similar_vehicles(vehicles, current)) == ["c", "b"]


def test_similar_vehicles_limit():
    """Test the result count is capped."""
    current = make_vehicle("current")
    vehicles = [current] + [make_vehicle(f"v{i}", days_old=i + 1) for i in range(6)]

    assert _ids(similar_vehicles(vehicles, current)) == ["v0", "v1", "v2", "v3"]
    assert _ids(similar_vehicles(vehicles, current, limit=2)) == ["v0", "v1"]


def test_featured_vehicles_newest_first():
    """Test featured listings are the newest ones."""
    vehicles = [make_vehicle(f"v{i}", days_old=10 - i) for i in range(8)]

    assert _ids(featured_vehicles(vehicles)) == ["v7", "v6", "v5", "v4", "v3", "v2"]
    assert featured_vehicles([]) == []
