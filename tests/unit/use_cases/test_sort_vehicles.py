"""Unit tests for the vehicle sort stage."""

from app.application.use_cases.sort_vehicles import sort_vehicles
from app.domain.value_objects.sort_key import SortKey
from tests.factories import make_vehicle, sample_vehicles


def _ids(vehicles):
    return [vehicle.id for vehicle in vehicles]


def test_newest_orders_by_created_at_descending():
    """Test newest puts the most recent listing first."""
    vehicles = list(reversed(sample_vehicles()))

    result = sort_vehicles(vehicles, SortKey.NEWEST)

    assert _ids(result) == ["bmw-1", "audi-1", "swift-1", "ktm-1"]


def test_price_orderings():
    """Test price-low and price-high."""
    vehicles = sample_vehicles()

    assert _ids(sort_vehicles(vehicles, SortKey.PRICE_LOW)) == [
        "ktm-1",
        "swift-1",
        "bmw-1",
        "audi-1",
    ]
    assert _ids(sort_vehicles(vehicles, SortKey.PRICE_HIGH)) == [
        "audi-1",
        "bmw-1",
        "swift-1",
        "ktm-1",
    ]


def test_price_high_is_reverse_of_price_low_without_ties():
    """Test both price orderings are exact reverses when prices are distinct."""
    vehicles = sample_vehicles()

    low = sort_vehicles(vehicles, SortKey.PRICE_LOW)
    high = sort_vehicles(vehicles, SortKey.PRICE_HIGH)

    assert high == list(reversed(low))


def test_year_orderings_keep_ties_in_input_order():
    """Test year sorts are stable for vehicles of the same year."""
    vehicles = sample_vehicles()  # swift-1 and ktm-1 are both 2021

    assert _ids(sort_vehicles(vehicles, SortKey.YEAR_NEW)) == [
        "swift-1",
        "ktm-1",
        "bmw-1",
        "audi-1",
    ]
    assert _ids(sort_vehicles(vehicles, SortKey.YEAR_OLD)) == [
        "audi-1",
        "bmw-1",
        "swift-1",
        "ktm-1",
    ]


def test_price_ties_keep_input_order_in_both_directions():
    """Test stability applies to descending orderings too."""
    first = make_vehicle("first", price=500_000)
    second = make_vehicle("second", price=500_000)

    assert _ids(sort_vehicles([first, second], SortKey.PRICE_LOW)) == ["first", "second"]
    assert _ids(sort_vehicles([first, second], SortKey.PRICE_HIGH)) == ["first", "second"]


def test_sort_does_not_mutate_input():
    """Test the input list is left untouched."""
    vehicles = sample_vehicles()
    original = list(vehicles)

    sort_vehicles(vehicles, SortKey.PRICE_LOW)

    assert vehicles == original


def test_sort_accepts_raw_key_value():
    """Test a plain string key is accepted."""
    result = sort_vehicles(sample_vehicles(), "price-low")

    assert _ids(result)[0] == "ktm-1"
