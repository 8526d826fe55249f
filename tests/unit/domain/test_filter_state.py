"""Unit tests for FilterState value object."""

from dataclasses import FrozenInstanceError

import pytest

from app.domain.value_objects.filter_state import (
    DEFAULT_PRICE_MAX,
    FilterState,
    current_year,
    is_active,
    update_filters,
)


def test_default_filter_state():
    """Test defaults leave every criterion unset."""
    state = FilterState.default()

    assert state.search == ""
    assert state.vehicle_type == "all"
    assert state.make == "all"
    assert state.model == ""
    assert state.price_range == (0, DEFAULT_PRICE_MAX)
    assert state.year_range == (1990, current_year())
    assert state.location == ""
    assert state.fuel_type == "all"
    assert state.transmission == "all"
    assert state.active_criteria() == {}


def test_filter_state_is_immutable():
    """Test FilterState cannot be mutated in place."""
    state = FilterState.default()

    with pytest.raises(FrozenInstanceError):
        state.make = "BMW"


def test_inverted_ranges_are_swapped():
    """Test ranges are normalized so min <= max."""
    state = FilterState(price_range=(5_000_000, 1_000_000), year_range=(2022, 2015))

    assert state.price_range == (1_000_000, 5_000_000)
    assert state.year_range == (2015, 2022)


def test_update_filters_returns_new_state():
    """Test update_filters leaves the original state untouched."""
    state = FilterState.default()

    updated = update_filters(state, search="swift", fuel_type="petrol")

    assert updated.search == "swift"
    assert updated.fuel_type == "petrol"
    assert state.search == ""
    assert state.fuel_type == "all"


def test_update_filters_normalizes_ranges():
    """Test update_filters swaps inverted ranges."""
    updated = update_filters(FilterState.default(), price_range=(900_000, 100_000))

    assert updated.price_range == (100_000, 900_000)


def test_update_filters_partial_range_keeps_other_bound():
    """Test a None bound keeps its current value."""
    state = FilterState(price_range=(100_000, 900_000))

    updated = update_filters(state, price_range=(None, 500_000))

    assert updated.price_range == (100_000, 500_000)


def test_changing_make_clears_model():
    """Test changing make resets model."""
    state = update_filters(FilterState.default(), make="Honda")
    state = update_filters(state, model="City")

    updated = update_filters(state, make="Hyundai")

    assert updated.make == "Hyundai"
    assert updated.model == ""


def test_changing_make_clears_model_even_when_same_model_name_given():
    """Test a stale model passed along with a new make is discarded."""
    state = FilterState(make="Honda", model="Activa 6G")

    updated = update_filters(state, make="TVS", model="Activa 6G")

    assert updated.make == "TVS"
    assert updated.model == ""


def test_same_make_keeps_model():
    """Test re-sending the current make does not clear model."""
    state = FilterState(make="BMW", model="3 Series")

    updated = update_filters(state, make="BMW", search="m sport")

    assert updated.model == "3 Series"


def test_update_filters_rejects_unknown_criteria():
    """Test unknown criteria raise ValueError."""
    with pytest.raises(ValueError):
        update_filters(FilterState.default(), colour="red")


def test_to_dict_from_dict_round_trip():
    """Test dictionary conversion keeps every criterion."""
    state = FilterState(
        search="duke",
        vehicle_type="bike",
        make="KTM",
        model="Duke 390",
        price_range=(100_000, 300_000),
        year_range=(2019, 2023),
        location="Chennai",
        fuel_type="petrol",
        transmission="manual",
    )

    assert FilterState.from_dict(state.to_dict()) == state


def test_from_dict_ignores_unknown_keys():
    """Test unknown keys are ignored."""
    state = FilterState.from_dict({"make": "Audi", "colour": "red"})

    assert state.make == "Audi"


def test_is_active():
    """Test sentinel, empty and missing values are inactive."""
    assert is_active("BMW") is True
    assert is_active("all") is False
    assert is_active("") is False
    assert is_active(None) is False
