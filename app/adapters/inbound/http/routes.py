"""HTTP routes."""

from fastapi import APIRouter, HTTPException, Request, status

from app.adapters.inbound.http.schemas import (
    FilterUpdateRequest,
    MakesResponse,
    OpenListingRequest,
    SortUpdateRequest,
    VehicleListResponse,
)
from app.application.dtos.listing import ListingPage
from app.application.dtos.vehicle import Vehicle
from app.application.use_cases.listing_metadata import makes_for_vehicle_type
from app.application.use_cases.url_filter_sync import RECOGNIZED_PARAMS, parse_query_string
from app.domain.exceptions import (
    InvalidListingStateError,
    ListingSessionNotFoundError,
    VehicleSourceError,
)
from app.domain.value_objects.sort_key import SortKey
from app.infrastructure.logging.logger import log_listing_event
from app.infrastructure.wiring.dependencies import create_listing_service

router = APIRouter()

# Create service instance (wired with dependencies)
_listing_service = create_listing_service()

SOURCE_UNAVAILABLE_DETAIL = "Failed to load vehicles"


def _session_not_found(err: ListingSessionNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))


def _invalid_state(err: InvalidListingStateError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err))


def _source_unavailable(err: VehicleSourceError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=SOURCE_UNAVAILABLE_DETAIL,
    )


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/vehicles", status_code=status.HTTP_200_OK, response_model=ListingPage)
async def browse_vehicles(request: Request, sort: str = SortKey.NEWEST.value) -> ListingPage:
    """
    Filter and sort the listing from URL query parameters, without a session.

    Recognized parameters are search, vehicleType, make, model, priceRange,
    fuelType and transmission; anything else is ignored.

    Args:
        request: FastAPI request (query parameters)
        sort: Display ordering; unknown values fall back to newest

    Returns:
        Listing page

    Raises:
        HTTPException: 503 if the vehicle source is unavailable
    """
    params = {
        key: request.query_params[key] for key in RECOGNIZED_PARAMS if key in request.query_params
    }
    page = await _listing_service.browse(params, sort_key=SortKey.parse(sort))
    if page.error:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=SOURCE_UNAVAILABLE_DETAIL,
        )
    return page


@router.get("/vehicles/makes", status_code=status.HTTP_200_OK, response_model=MakesResponse)
async def list_makes(vehicle_type: str = "all") -> MakesResponse:
    """
    List the makes offered for a vehicle category.

    Args:
        vehicle_type: car, bike or all

    Returns:
        Makes for the category
    """
    return MakesResponse(vehicle_type=vehicle_type, makes=makes_for_vehicle_type(vehicle_type))


@router.get(
    "/vehicles/featured",
    status_code=status.HTTP_200_OK,
    response_model=VehicleListResponse,
)
async def list_featured_vehicles() -> VehicleListResponse:
    """
    Get the newest listings for the home page.

    Raises:
        HTTPException: 503 if the vehicle source is unavailable
    """
    try:
        vehicles = await _listing_service.featured()
    except VehicleSourceError as err:
        raise _source_unavailable(err) from err
    return VehicleListResponse(vehicles=vehicles, count=len(vehicles))


@router.get("/vehicles/{vehicle_id}", status_code=status.HTTP_200_OK, response_model=Vehicle)
async def get_vehicle(vehicle_id: str) -> Vehicle:
    """
    Get an active vehicle.

    Raises:
        HTTPException: 404 if the vehicle does not exist, 503 if the source is unavailable
    """
    try:
        vehicle = await _listing_service.get_vehicle(vehicle_id)
    except VehicleSourceError as err:
        raise _source_unavailable(err) from err
    if vehicle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vehicle not found")
    return vehicle


@router.get(
    "/vehicles/{vehicle_id}/similar",
    status_code=status.HTTP_200_OK,
    response_model=VehicleListResponse,
)
async def list_similar_vehicles(vehicle_id: str) -> VehicleListResponse:
    """
    Get listings similar to a vehicle.

    Raises:
        HTTPException: 404 if the vehicle does not exist, 503 if the source is unavailable
    """
    try:
        vehicles = await _listing_service.similar(vehicle_id)
    except VehicleSourceError as err:
        raise _source_unavailable(err) from err
    if vehicles is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vehicle not found")
    return VehicleListResponse(vehicles=vehicles, count=len(vehicles))


@router.post("/listings", status_code=status.HTTP_201_CREATED, response_model=ListingPage)
async def open_listing(request: OpenListingRequest) -> ListingPage:
    """
    Start a listing session.

    A failed vehicle load is not an HTTP error: the page comes back with
    status "error" and can be retried.

    Args:
        request: Page query string and initial ordering

    Returns:
        Listing page with session_id
    """
    page = await _listing_service.open_session(
        parse_query_string(request.query),
        sort_key=request.sort,
    )
    log_listing_event(
        session_id=page.session_id,
        component="http",
        action="open",
        status=page.status,
        total_count=page.total_count,
    )
    return page


@router.get("/listings/{session_id}", status_code=status.HTTP_200_OK, response_model=ListingPage)
async def get_listing(session_id: str) -> ListingPage:
    """
    Get the current page of a listing session.

    Raises:
        HTTPException: 404 if the session does not exist
    """
    try:
        return await _listing_service.get_page(session_id)
    except ListingSessionNotFoundError as err:
        raise _session_not_found(err) from err


@router.patch(
    "/listings/{session_id}/filters",
    status_code=status.HTTP_200_OK,
    response_model=ListingPage,
)
async def update_listing_filters(session_id: str, request: FilterUpdateRequest) -> ListingPage:
    """
    Apply user filter edits.

    Changing make clears model.

    Raises:
        HTTPException: 404 if the session does not exist, 409 if vehicles are not loaded
    """
    try:
        return await _listing_service.update_filters(session_id, **request.to_changes())
    except ListingSessionNotFoundError as err:
        raise _session_not_found(err) from err
    except InvalidListingStateError as err:
        raise _invalid_state(err) from err


@router.put(
    "/listings/{session_id}/sort",
    status_code=status.HTTP_200_OK,
    response_model=ListingPage,
)
async def update_listing_sort(session_id: str, request: SortUpdateRequest) -> ListingPage:
    """
    Change the display ordering.

    Raises:
        HTTPException: 404 if the session does not exist
    """
    try:
        return await _listing_service.set_sort(session_id, request.sort)
    except ListingSessionNotFoundError as err:
        raise _session_not_found(err) from err


@router.post(
    "/listings/{session_id}/reset",
    status_code=status.HTTP_200_OK,
    response_model=ListingPage,
)
async def reset_listing(session_id: str) -> ListingPage:
    """
    Clear all filters. The returned url carries no query string.

    Raises:
        HTTPException: 404 if the session does not exist, 409 if vehicles are not loaded
    """
    try:
        return await _listing_service.reset(session_id)
    except ListingSessionNotFoundError as err:
        raise _session_not_found(err) from err
    except InvalidListingStateError as err:
        raise _invalid_state(err) from err


@router.post(
    "/listings/{session_id}/retry",
    status_code=status.HTTP_200_OK,
    response_model=ListingPage,
)
async def retry_listing(session_id: str) -> ListingPage:
    """
    Retry loading vehicles after a failure.

    Raises:
        HTTPException: 404 if the session does not exist, 409 if the session is not in error
    """
    try:
        return await _listing_service.retry(session_id)
    except ListingSessionNotFoundError as err:
        raise _session_not_found(err) from err
    except InvalidListingStateError as err:
        raise _invalid_state(err) from err


@router.delete("/listings/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_listing(session_id: str) -> None:
    """Discard a listing session."""
    await _listing_service.close(session_id)
