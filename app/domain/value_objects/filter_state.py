"""Filter state value object."""

from dataclasses import dataclass, field, fields, replace
from datetime import date
from typing import Any

ALL = "all"

DEFAULT_PRICE_MIN = 0
DEFAULT_PRICE_MAX = 150_000_000
DEFAULT_YEAR_MIN = 1990

VEHICLE_TYPES = ("car", "bike")


def current_year() -> int:
    """Return the current calendar year."""
    return date.today().year


def default_price_range() -> tuple[int, int]:
    """Return the full price range used when no price constraint is set."""
    return (DEFAULT_PRICE_MIN, DEFAULT_PRICE_MAX)


def default_year_range() -> tuple[int, int]:
    """Return the full year range used when no year constraint is set."""
    return (DEFAULT_YEAR_MIN, current_year())


def ordered_range(value: Any) -> tuple[int, int]:
    """
    Normalize a range pair so the first element is not greater than the second.

    Args:
        value: Two-element sequence of integers

    Returns:
        Tuple (low, high)
    """
    low, high = (int(bound) for bound in value)
    if low > high:
        low, high = high, low
    return (low, high)


def is_active(value: Any) -> bool:
    """
    Check if a criterion value constrains results.

    Empty strings, None and the "all" sentinel mean no constraint.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value != "" and value != ALL
    return True


@dataclass(frozen=True)
class FilterState:
    """Normalized, immutable set of search criteria for the vehicle listing."""

    search: str = ""
    vehicle_type: str = ALL
    make: str = ALL
    model: str = ""
    price_range: tuple[int, int] = field(default_factory=default_price_range)
    year_range: tuple[int, int] = field(default_factory=default_year_range)
    location: str = ""
    fuel_type: str = ALL
    transmission: str = ALL

    def __post_init__(self) -> None:
        """Normalize range ordering."""
        object.__setattr__(self, "price_range", ordered_range(self.price_range))
        object.__setattr__(self, "year_range", ordered_range(self.year_range))

    @classmethod
    def default(cls) -> "FilterState":
        """Create filter state with every criterion unset."""
        return cls()

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the names of all criteria."""
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> dict[str, Any]:
        """Return criteria as a plain dictionary (ranges as lists)."""
        data: dict[str, Any] = {}
        for name in self.field_names():
            value = getattr(self, name)
            data[name] = list(value) if isinstance(value, tuple) else value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FilterState":
        """
        Build filter state from a dictionary, ignoring unknown keys.

        Args:
            data: Dictionary as produced by to_dict()

        Returns:
            FilterState instance
        """
        known = {name: data[name] for name in cls.field_names() if data.get(name) is not None}
        return cls(**known)

    def active_criteria(self) -> dict[str, Any]:
        """Return only the criteria that constrain results."""
        active = {}
        for name, value in self.to_dict().items():
            if name == "price_range" and tuple(value) == default_price_range():
                continue
            if name == "year_range" and tuple(value) == default_year_range():
                continue
            if is_active(value):
                active[name] = value
        return active


def update_filters(state: FilterState, **changes: Any) -> FilterState:
    """
    Return a new filter state with the given criteria replaced.

    Changing make always clears model, since a model is meaningless without
    its parent make. A range bound given as None keeps its current value.

    Args:
        state: Current filter state
        **changes: Criteria to replace, keyed by FilterState field name

    Returns:
        New FilterState

    Raises:
        ValueError: If an unknown criterion is given
    """
    unknown = set(changes) - set(FilterState.field_names())
    if unknown:
        raise ValueError(f"Unknown filter criteria: {', '.join(sorted(unknown))}")

    for name in ("price_range", "year_range"):
        if name in changes:
            low, high = changes[name]
            current_low, current_high = getattr(state, name)
            changes[name] = (
                current_low if low is None else low,
                current_high if high is None else high,
            )

    if "make" in changes and changes["make"] != state.make:
        changes["model"] = ""

    return replace(state, **changes)
