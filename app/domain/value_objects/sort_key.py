"""Sort key value object."""

from enum import Enum
from typing import Optional


class SortKey(str, Enum):
    """Display orderings for vehicle listings."""

    NEWEST = "newest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    YEAR_NEW = "year-new"
    YEAR_OLD = "year-old"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortKey":
        """
        Parse a sort key, falling back to newest for unknown values.

        Args:
            value: Raw sort key (e.g., from a query parameter)

        Returns:
            Matching SortKey, or SortKey.NEWEST
        """
        try:
            return cls(value)
        except ValueError:
            return cls.NEWEST
