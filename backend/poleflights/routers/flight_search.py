from fastapi import APIRouter, Depends, Query
from typing import Optional

from poleflights.config import Settings
from poleflights.dependencies import get_amadeus_service, get_settings
from poleflights.schemas.flight_offer_schema import ErrorResponse, SearchResponse
from poleflights.services.amadeus_service import AmadeusService
from poleflights.services.flight_search_service import search_flights
from poleflights.services.request_validator import validate_search_params

router = APIRouter(
    prefix="/api/flights",
    tags=["flights"]
)


@router.get(
    "",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def search(
    origin: Optional[str] = Query(None, description="IATA Airport Code, 3 letters."),
    destination: Optional[str] = Query(None, description="IATA Airport Code, 3 letters."),
    depart_date: Optional[str] = Query(None, alias="departDate", description="YYYY-MM-DD format"),
    return_date: Optional[str] = Query(None, alias="returnDate", description="YYYY-MM-DD format"),
    adults: Optional[str] = Query(None),
    children: Optional[str] = Query(None),
    infants: Optional[str] = Query(None),
    config: Settings = Depends(get_settings),
    amadeus: AmadeusService = Depends(get_amadeus_service),
):
    """
    Search flights on approved airlines only, cheapest first.
    Falls back to mock offers when Amadeus credentials are not configured.
    """
    # Parameters stay raw strings so validation errors use our own messages
    search_request = validate_search_params(
        origin=origin,
        destination=destination,
        depart_date=depart_date,
        return_date=return_date,
        adults=adults,
        children=children,
        infants=infants,
    )
    return await search_flights(search_request, config, amadeus)
