"""Listing session entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from app.domain.value_objects.filter_state import FilterState
from app.domain.value_objects.sort_key import SortKey

LOADING = "loading"
FILTERS_PENDING = "filters_pending"
FILTERS_APPLIED = "filters_applied"
ERROR = "error"

LOADED_STATUSES = (FILTERS_PENDING, FILTERS_APPLIED)


@dataclass
class ListingSession:
    """State of a single visit to the vehicle listing page."""

    session_id: str
    status: str = LOADING  # loading -> filters_pending -> filters_applied, or error
    filters: FilterState = field(default_factory=FilterState.default)
    sort_key: SortKey = SortKey.NEWEST
    # Vehicle DTOs, loaded once per visit
    vehicles: list[Any] = field(default_factory=list)
    # Query parameters of the page URL, applied once after the first successful load
    initial_query: dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def is_loaded(self) -> bool:
        """
        Check if the vehicle collection is available.

        Returns:
            True if the session is in a loaded status
        """
        return self.status in LOADED_STATUSES
