"""Unit tests for the vehicle filter."""

import pytest

from app.application.use_cases.filter_vehicles import filter_vehicles
from app.domain.value_objects.filter_state import FilterState, update_filters
from tests.factories import make_vehicle, sample_vehicles


@pytest.fixture
def vehicles():
    """Sample vehicle collection."""
    return sample_vehicles()


def _ids(vehicles):
    return [vehicle.id for vehicle in vehicles]


def test_no_active_criteria_returns_collection_in_order(vehicles):
    """Test the default filter state is the identity."""
    result = filter_vehicles(vehicles, FilterState.default())

    assert result == vehicles
    assert result is not vehicles


def test_filter_preserves_input_order(vehicles):
    """Test filtering does not re-sort."""
    reordered = list(reversed(vehicles))

    result = filter_vehicles(reordered, FilterState(vehicle_type="car"))

    assert _ids(result) == ["swift-1", "audi-1", "bmw-1"]


def test_make_and_price_scenario():
    """Test make, price and their combination on a two-vehicle collection."""
    bmw = make_vehicle("bmw", make="BMW", price=2_000_000, year=2020)
    audi = make_vehicle("audi", make="Audi", price=3_000_000, year=2018)
    collection = [bmw, audi]

    by_make = FilterState(make="BMW")
    by_price = FilterState(price_range=(2_500_000, 5_000_000))
    combined = update_filters(by_make, price_range=(2_500_000, 5_000_000))

    assert filter_vehicles(collection, by_make) == [bmw]
    assert filter_vehicles(collection, by_price) == [audi]
    assert filter_vehicles(collection, combined) == []


def test_search_matches_any_text_field_case_insensitively(vehicles):
    """Test search looks at title, make, model and location."""
    assert _ids(filter_vehicles(vehicles, FilterState(search="premium"))) == ["audi-1"]
    assert _ids(filter_vehicles(vehicles, FilterState(search="bmw"))) == ["bmw-1"]
    assert _ids(filter_vehicles(vehicles, FilterState(search="duke"))) == ["ktm-1"]
    assert _ids(filter_vehicles(vehicles, FilterState(search="CHENNAI"))) == ["ktm-1"]


def test_search_skips_null_location():
    """Test a null location does not break the search."""
    vehicle = make_vehicle("v1", title="Swift", make="Maruti Suzuki", model="Swift", location=None)

    assert filter_vehicles([vehicle], FilterState(search="pune")) == []
    assert filter_vehicles([vehicle], FilterState(search="swift")) == [vehicle]


def test_vehicle_type_filter(vehicles):
    """Test category is an exact match."""
    assert _ids(filter_vehicles(vehicles, FilterState(vehicle_type="bike"))) == ["ktm-1"]


def test_make_filter_is_case_sensitive(vehicles):
    """Test make must match exactly."""
    assert _ids(filter_vehicles(vehicles, FilterState(make="BMW"))) == ["bmw-1"]
    assert filter_vehicles(vehicles, FilterState(make="bmw")) == []


def test_model_filter_is_independent_of_make(vehicles):
    """Test model constrains results without a make."""
    assert _ids(filter_vehicles(vehicles, FilterState(model="A4"))) == ["audi-1"]
    assert filter_vehicles(vehicles, FilterState(make="BMW", model="A4")) == []


def test_price_range_is_inclusive(vehicles):
    """Test vehicles priced exactly at either bound are kept."""
    result = filter_vehicles(vehicles, FilterState(price_range=(2_000_000, 3_000_000)))

    assert _ids(result) == ["bmw-1", "audi-1"]


def test_year_range_is_inclusive(vehicles):
    """Test vehicles built exactly in either bound year are kept."""
    result = filter_vehicles(vehicles, FilterState(year_range=(2018, 2020)))

    assert _ids(result) == ["bmw-1", "audi-1"]


def test_location_is_case_insensitive_exact_match(vehicles):
    """Test location is matched exactly, ignoring case."""
    assert _ids(filter_vehicles(vehicles, FilterState(location="mumbai"))) == ["bmw-1"]
    assert filter_vehicles(vehicles, FilterState(location="Mum")) == []


def test_null_location_never_matches_specific_location(vehicles):
    """Test unknown location never matches."""
    result = filter_vehicles(vehicles, FilterState(location="Pune"))

    assert "swift-1" not in _ids(result)


def test_location_all_sentinel_is_inactive(vehicles):
    """Test the "all" sentinel does not constrain location."""
    assert filter_vehicles(vehicles, FilterState(location="all")) == vehicles


def test_fuel_type_and_transmission_case_insensitive(vehicles):
    """Test fuel type and transmission ignore case."""
    assert _ids(filter_vehicles(vehicles, FilterState(fuel_type="petrol"))) == ["bmw-1", "ktm-1"]
    assert _ids(filter_vehicles(vehicles, FilterState(transmission="AUTOMATIC"))) == [
        "bmw-1",
        "audi-1",
    ]


def test_null_fuel_type_and_transmission_never_match(vehicles):
    """Test unknown fuel type and transmission never match a specific value."""
    assert "swift-1" not in _ids(filter_vehicles(vehicles, FilterState(fuel_type="petrol")))
    assert "swift-1" not in _ids(filter_vehicles(vehicles, FilterState(transmission="manual")))


@pytest.mark.parametrize(
    "criterion, value",
    [
        ("search", "swift"),
        ("vehicle_type", "car"),
        ("make", "Audi"),
        ("model", "Duke 390"),
        ("price_range", (500_000, 2_500_000)),
        ("year_range", (2020, 2021)),
        ("location", "delhi"),
        ("fuel_type", "diesel"),
        ("transmission", "manual"),
    ],
)
def test_each_criterion_is_conjunctive(vehicles, criterion, value):
    """Test adding one criterion keeps exactly the vehicles satisfying it and the others."""
    base = FilterState(year_range=(2017, 2022))
    single = update_filters(FilterState.default(), **{criterion: value})
    combined = update_filters(base, **{criterion: value})

    matching_single = set(_ids(filter_vehicles(vehicles, single)))
    matching_base = set(_ids(filter_vehicles(vehicles, base)))

    assert set(_ids(filter_vehicles(vehicles, combined))) == matching_single & matching_base


def test_default_year_range_hides_out_of_range_years():
    """Test the default filters only show years from 1990 to the current year."""
    vintage = make_vehicle("vintage", year=1985)
    modern = make_vehicle("modern", year=2015)

    assert _ids(filter_vehicles([vintage, modern], FilterState.default())) == ["modern"]
