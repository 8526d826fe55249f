"""Translation between filter state and the listing page query string."""

import re
from collections.abc import Mapping
from typing import Optional
from urllib.parse import parse_qsl, urlencode

from app.domain.value_objects.filter_state import (
    ALL,
    DEFAULT_PRICE_MAX,
    VEHICLE_TYPES,
    FilterState,
    default_price_range,
    is_active,
    ordered_range,
)

LISTING_PATH = "/vehicles"

PRICE_RANGE_PARAM = "priceRange"

# Query parameter -> FilterState field, in the order they are written to links
SHAREABLE_PARAMS = {
    "search": "search",
    "vehicleType": "vehicle_type",
    "make": "make",
    "model": "model",
    "fuelType": "fuel_type",
    "transmission": "transmission",
}

RECOGNIZED_PARAMS = (*SHAREABLE_PARAMS, PRICE_RANGE_PARAM)

_BOUNDED_PRICE = re.compile(r"^(\d+)-(\d+)$")
# A literal "+" arrives as a space once the query string has been form-decoded
_OPEN_ENDED_PRICE = re.compile(r"^(\d+)[+ ]$")


def decode_price_range(value: Optional[str]) -> tuple[int, int]:
    """
    Decode a priceRange parameter.

    Accepts "<min>-<max>" and "<min>+". Anything else decodes to the full
    default range.

    Args:
        value: Raw parameter value

    Returns:
        Normalized (min, max) tuple
    """
    if not value:
        return default_price_range()

    bounded = _BOUNDED_PRICE.match(value.strip())
    if bounded:
        return ordered_range(bounded.groups())

    open_ended = _OPEN_ENDED_PRICE.match(value.lstrip())
    if open_ended:
        return ordered_range((open_ended.group(1), DEFAULT_PRICE_MAX))

    return default_price_range()


def encode_price_range(price_range: tuple[int, int]) -> str:
    """
    Encode a price range as a priceRange parameter value.

    Shared links never carry priceRange; the encoder exists so a decoded
    value can be written back for round-tripping.

    Args:
        price_range: (min, max) tuple

    Returns:
        "<min>+" when max is the default ceiling, "<min>-<max>" otherwise
    """
    low, high = ordered_range(price_range)
    if high == DEFAULT_PRICE_MAX:
        return f"{low}+"
    return f"{low}-{high}"


def parse_query_string(query: str) -> dict[str, str]:
    """
    Parse a raw query string, keeping the first value of repeated keys.

    Args:
        query: Query string, with or without the leading "?"

    Returns:
        Dictionary of parameter values
    """
    params: dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


def filters_from_query(params: Mapping[str, str]) -> FilterState:
    """
    Build the initial filter state from query parameters.

    Unrecognized keys are ignored and malformed values fall back to
    "no constraint".

    Args:
        params: Query parameters

    Returns:
        FilterState
    """
    vehicle_type = params.get("vehicleType") or ALL
    if vehicle_type not in VEHICLE_TYPES:
        vehicle_type = ALL

    return FilterState(
        search=params.get("search") or "",
        vehicle_type=vehicle_type,
        make=params.get("make") or ALL,
        model=params.get("model") or "",
        price_range=decode_price_range(params.get(PRICE_RANGE_PARAM)),
        fuel_type=params.get("fuelType") or ALL,
        transmission=params.get("transmission") or ALL,
    )


def filters_to_query(filters: FilterState, include_price_range: bool = False) -> dict[str, str]:
    """
    Select the shareable criteria of a filter state as query parameters.

    Links built by build_listing_url leave priceRange out; include_price_range
    is only for round-tripping a decoded price range.

    Args:
        filters: Filter state
        include_price_range: Also write priceRange when it is not the full range

    Returns:
        Ordered dictionary of active parameters
    """
    params = {}
    for param, field_name in SHAREABLE_PARAMS.items():
        value = getattr(filters, field_name)
        if is_active(value):
            params[param] = value

    if include_price_range and filters.price_range != default_price_range():
        params[PRICE_RANGE_PARAM] = encode_price_range(filters.price_range)

    return params


def build_query_string(filters: FilterState, include_price_range: bool = False) -> str:
    """
    Encode a filter state as a query string (without the leading "?").

    Args:
        filters: Filter state
        include_price_range: Also write priceRange when it is not the full range

    Returns:
        Query string, empty when no shareable criterion is active
    """
    return urlencode(filters_to_query(filters, include_price_range=include_price_range))


def build_listing_url(filters: FilterState, base_path: str = LISTING_PATH) -> str:
    """
    Build the shareable listing URL for a filter state.

    Args:
        filters: Filter state
        base_path: Listing page path

    Returns:
        Path with query string, or the bare path when no criterion is shareable
    """
    query = build_query_string(filters)
    return f"{base_path}?{query}" if query else base_path
