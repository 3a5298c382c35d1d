"""City table and address resolution endpoints."""

from fastapi import APIRouter

from swiftwash.api.v1.order_ids.schemas import (
    CityListResponse,
    CityResponse,
    ResolveLocationRequest,
    ResolvedLocationResponse,
)
from swiftwash.services.geo.cities import CITY_TABLE
from swiftwash.services.geo.resolver import resolve_location

router = APIRouter(tags=["geo"])


@router.get("/cities", response_model=CityListResponse, operation_id="listCities")
async def list_cities() -> CityListResponse:
    """List service cities in postal matching priority order."""
    return CityListResponse(cities=[CityResponse.from_record(city) for city in CITY_TABLE])


@router.post("/geo/resolve", response_model=ResolvedLocationResponse, operation_id="resolveLocation")
async def resolve(request: ResolveLocationRequest) -> ResolvedLocationResponse:
    """Resolve address fields to a service city and compass direction."""
    return ResolvedLocationResponse.from_location(resolve_location(request.to_address()))
