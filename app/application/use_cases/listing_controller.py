"""Listing controller: lifecycle of one visit to the vehicle listing page."""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from app.application.dtos.vehicle import Vehicle
from app.application.ports.vehicle_repository import VehicleRepository
from app.application.use_cases.filter_vehicles import filter_vehicles
from app.application.use_cases.sort_vehicles import sort_vehicles
from app.application.use_cases.url_filter_sync import (
    LISTING_PATH,
    build_listing_url,
    filters_from_query,
)
from app.domain.entities.listing_session import (
    ERROR,
    FILTERS_APPLIED,
    FILTERS_PENDING,
    LOADING,
    ListingSession,
)
from app.domain.exceptions import InvalidListingStateError, VehicleSourceError
from app.domain.value_objects.filter_state import FilterState, update_filters
from app.domain.value_objects.sort_key import SortKey


class ListingController:
    """
    State machine for a listing session.

    loading -> filters_pending -> filters_applied, or loading -> error.
    URL parameters are applied once; afterwards only user edits change the
    filter state.
    """

    LOAD_ERROR_MESSAGE = "Failed to load vehicles"

    def __init__(
        self,
        session: ListingSession,
        vehicle_repository: VehicleRepository,
        base_path: str = LISTING_PATH,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize listing controller.

        Args:
            session: Listing session entity to drive
            vehicle_repository: Source of active vehicles
            base_path: Listing page path used for shareable URLs
            logger: Optional logger function (session_id, component, **kwargs)
        """
        self._session = session
        self._vehicle_repository = vehicle_repository
        self._base_path = base_path
        self._logger = logger

    @property
    def session(self) -> ListingSession:
        """Get the driven listing session."""
        return self._session

    def _log(self, component: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(self._session.session_id, component, **kwargs)

    def _require_loaded(self, operation: str) -> None:
        if not self._session.is_loaded():
            raise InvalidListingStateError(self._session.status, operation)

    async def load(self) -> None:
        """
        Fetch the vehicle collection.

        Failures move the session to the error status; they are never retried
        automatically.
        """
        session = self._session
        session.status = LOADING
        session.error = None
        session.vehicles = []
        session.touch()

        try:
            vehicles = await self._vehicle_repository.list_active()
        except VehicleSourceError as e:
            session.status = ERROR
            session.error = self.LOAD_ERROR_MESSAGE
            session.touch()
            self._log("controller", level=logging.ERROR, status=session.status, error=str(e))
            return

        session.vehicles = list(vehicles)
        session.status = FILTERS_PENDING
        session.touch()
        self._log("controller", status=session.status, vehicles_count=len(session.vehicles))

    async def retry(self) -> None:
        """
        Re-enter loading after a failed fetch.

        Raises:
            InvalidListingStateError: If the session is not in the error status
        """
        if self._session.status != ERROR:
            raise InvalidListingStateError(self._session.status, "retry")
        await self.load()

    def apply_url_filters(self, params: Optional[Mapping[str, str]] = None) -> bool:
        """
        Apply query parameters as the initial filter state, once.

        Args:
            params: Query parameters of the page URL (defaults to the ones
                recorded on the session when it was opened)

        Returns:
            True if the parameters were applied, False if they had already been
        """
        self._require_loaded("apply URL filters")
        if self._session.status != FILTERS_PENDING:
            return False

        if params is None:
            params = self._session.initial_query
        self._session.filters = filters_from_query(params)
        self._session.status = FILTERS_APPLIED
        self._session.touch()
        self._log("url_sync", filters=self._session.filters.active_criteria())
        return True

    def update_filters(self, **changes: Any) -> list[Vehicle]:
        """
        Apply user filter edits.

        An edit made before the URL parameters were applied consumes that
        step, so the URL can no longer override the user's choice.

        Args:
            **changes: Criteria to replace, keyed by FilterState field name

        Returns:
            Filtered and sorted vehicles
        """
        self._require_loaded("update filters")
        self._session.filters = update_filters(self._session.filters, **changes)
        self._session.status = FILTERS_APPLIED
        self._session.touch()
        return self.results()

    def set_sort(self, sort_key: SortKey) -> list[Vehicle]:
        """
        Change the display ordering.

        Args:
            sort_key: New ordering

        Returns:
            Filtered and sorted vehicles
        """
        self._session.sort_key = SortKey(sort_key)
        self._session.touch()
        return self.results()

    def reset(self) -> str:
        """
        Clear all filters.

        Returns:
            Canonical listing URL without query string
        """
        self._require_loaded("reset filters")
        self._session.filters = FilterState.default()
        self._session.status = FILTERS_APPLIED
        self._session.touch()
        self._log("controller", action="reset")
        return self._base_path

    def results(self) -> list[Vehicle]:
        """
        Derive the visible vehicles.

        Returns:
            Filtered then sorted vehicles; empty while loading or after an error
        """
        if not self._session.is_loaded():
            return []
        filtered = filter_vehicles(self._session.vehicles, self._session.filters)
        return sort_vehicles(filtered, self._session.sort_key)

    def current_url(self) -> str:
        """
        Get the shareable URL of the current filter state.

        Returns:
            Listing path plus query string
        """
        return build_listing_url(self._session.filters, base_path=self._base_path)
