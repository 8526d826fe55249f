"""Listing service: listing sessions and related listing queries."""

from collections.abc import Mapping
from typing import Any, Callable, Optional
from uuid import uuid4

from app.application.dtos.listing import FilterValues, ListingPage
from app.application.dtos.vehicle import Vehicle
from app.application.ports.listing_session_repository import ListingSessionRepository
from app.application.ports.vehicle_repository import VehicleRepository
from app.application.use_cases.listing_controller import ListingController
from app.application.use_cases.listing_metadata import (
    SITE_NAME,
    page_description,
    page_heading,
    page_title,
    results_label,
)
from app.application.use_cases.related_vehicles import featured_vehicles, similar_vehicles
from app.application.use_cases.url_filter_sync import LISTING_PATH
from app.domain.entities.listing_session import FILTERS_PENDING, ListingSession
from app.domain.exceptions import ListingSessionNotFoundError
from app.domain.value_objects.sort_key import SortKey


class ListingService:
    """Use case for browsing the vehicle listing page."""

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        session_repository: ListingSessionRepository,
        base_path: str = LISTING_PATH,
        site_name: str = SITE_NAME,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize listing service.

        Args:
            vehicle_repository: Source of active vehicles
            session_repository: Storage for listing sessions
            base_path: Listing page path used for shareable URLs
            site_name: Site name used in page titles
            logger: Optional logger function (session_id, component, **kwargs)
        """
        self._vehicle_repository = vehicle_repository
        self._session_repository = session_repository
        self._base_path = base_path
        self._site_name = site_name
        self._logger = logger

    def _log(self, session_id: str, component: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(session_id, component, **kwargs)

    def _controller(self, session: ListingSession) -> ListingController:
        return ListingController(
            session,
            self._vehicle_repository,
            base_path=self._base_path,
            logger=self._logger,
        )

    async def _load_session(self, session_id: str) -> ListingSession:
        session = await self._session_repository.get(session_id)
        if session is None:
            raise ListingSessionNotFoundError(session_id)
        return session

    async def _load_and_apply(self, controller: ListingController) -> None:
        await controller.load()
        if controller.session.status == FILTERS_PENDING:
            controller.apply_url_filters()

    def _build_page(self, controller: ListingController, stateless: bool = False) -> ListingPage:
        session = controller.session
        vehicles = controller.results()
        filters = session.filters

        self._log(
            session.session_id,
            "filters",
            listing_filters=filters.active_criteria(),
            listing_results_count=len(vehicles),
            status=session.status,
        )

        return ListingPage(
            session_id=None if stateless else session.session_id,
            status=session.status,
            filters=FilterValues.from_state(filters),
            sort=session.sort_key,
            vehicles=vehicles,
            total_count=len(vehicles),
            empty=session.is_loaded() and not vehicles,
            url=controller.current_url(),
            title=page_title(filters, site_name=self._site_name),
            heading=page_heading(filters),
            description=page_description(filters),
            results_label=results_label(filters, len(vehicles)),
            error=session.error,
        )

    async def open_session(
        self,
        query_params: Mapping[str, str],
        sort_key: SortKey = SortKey.NEWEST,
    ) -> ListingPage:
        """
        Start a visit to the listing page.

        Loads the vehicle collection and applies the page's query parameters
        as the initial filters.

        Args:
            query_params: Query parameters of the page URL
            sort_key: Initial display ordering

        Returns:
            Listing page (status error if the collection could not be loaded)
        """
        session = ListingSession(
            session_id=str(uuid4()),
            sort_key=SortKey(sort_key),
            initial_query=dict(query_params),
        )
        controller = self._controller(session)
        await self._load_and_apply(controller)
        await self._session_repository.save(session)
        return self._build_page(controller)

    async def get_page(self, session_id: str) -> ListingPage:
        """
        Get the current page of a listing session.

        Raises:
            ListingSessionNotFoundError: If the session does not exist
        """
        session = await self._load_session(session_id)
        return self._build_page(self._controller(session))

    async def update_filters(self, session_id: str, **changes: Any) -> ListingPage:
        """
        Apply user filter edits to a listing session.

        Args:
            session_id: Listing session identifier
            **changes: Criteria to replace, keyed by FilterState field name

        Returns:
            Updated listing page

        Raises:
            ListingSessionNotFoundError: If the session does not exist
            InvalidListingStateError: If the vehicles are not loaded
        """
        session = await self._load_session(session_id)
        controller = self._controller(session)
        controller.update_filters(**changes)
        await self._session_repository.save(session)
        return self._build_page(controller)

    async def set_sort(self, session_id: str, sort_key: SortKey) -> ListingPage:
        """
        Change the display ordering of a listing session.

        Raises:
            ListingSessionNotFoundError: If the session does not exist
        """
        session = await self._load_session(session_id)
        controller = self._controller(session)
        controller.set_sort(sort_key)
        await self._session_repository.save(session)
        return self._build_page(controller)

    async def reset(self, session_id: str) -> ListingPage:
        """
        Clear all filters of a listing session.

        Raises:
            ListingSessionNotFoundError: If the session does not exist
            InvalidListingStateError: If the vehicles are not loaded
        """
        session = await self._load_session(session_id)
        controller = self._controller(session)
        controller.reset()
        await self._session_repository.save(session)
        return self._build_page(controller)

    async def retry(self, session_id: str) -> ListingPage:
        """
        Retry loading the vehicle collection after a failure.

        Raises:
            ListingSessionNotFoundError: If the session does not exist
            InvalidListingStateError: If the session is not in the error status
        """
        session = await self._load_session(session_id)
        controller = self._controller(session)
        await controller.retry()
        if session.status == FILTERS_PENDING:
            controller.apply_url_filters()
        await self._session_repository.save(session)
        return self._build_page(controller)

    async def close(self, session_id: str) -> None:
        """Discard a listing session."""
        await self._session_repository.delete(session_id)

    async def browse(
        self,
        query_params: Mapping[str, str],
        sort_key: SortKey = SortKey.NEWEST,
    ) -> ListingPage:
        """
        Build a listing page from query parameters without keeping a session.

        Args:
            query_params: Query parameters of the page URL
            sort_key: Display ordering

        Returns:
            Listing page
        """
        session = ListingSession(
            session_id="stateless",
            sort_key=SortKey(sort_key),
            initial_query=dict(query_params),
        )
        controller = self._controller(session)
        await self._load_and_apply(controller)
        return self._build_page(controller, stateless=True)

    async def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        """Get an active vehicle by id."""
        return await self._vehicle_repository.get(vehicle_id)

    async def similar(self, vehicle_id: str) -> Optional[list[Vehicle]]:
        """
        Find listings similar to a vehicle.

        Returns:
            Similar vehicles, or None if the vehicle does not exist

        Raises:
            VehicleSourceError: If the data source cannot be read
        """
        current = await self._vehicle_repository.get(vehicle_id)
        if current is None:
            return None
        vehicles = await self._vehicle_repository.list_active()
        return similar_vehicles(vehicles, current)

    async def featured(self) -> list[Vehicle]:
        """
        Get the newest listings.

        Raises:
            VehicleSourceError: If the data source cannot be read
        """
        vehicles = await self._vehicle_repository.list_active()
        return featured_vehicles(vehicles)
