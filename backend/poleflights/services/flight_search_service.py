"""
Search orchestration: mock fallback or Amadeus query, then normalization.
"""
import logging

from poleflights.config import Settings
from poleflights.reference.airlines import approved_airline_codes
from poleflights.schemas.flight_offer_schema import (
    FlightOffersSearchParams,
    SearchRequest,
    SearchResponse,
)
from poleflights.services.amadeus_service import AmadeusService
from poleflights.services.mock_offers import MOCK_MESSAGE, build_mock_offers
from poleflights.services.offer_normalizer import normalize_offers

logger = logging.getLogger(__name__)


async def search_flights(
    request: SearchRequest,
    config: Settings,
    amadeus: AmadeusService,
) -> SearchResponse:
    """
    Run one validated search. Provider failures propagate as ProviderError
    for the caller to turn into a single error response.
    """
    depart_date = request.depart_date.isoformat()

    if not config.has_amadeus_credentials:
        logger.info("Amadeus credentials not configured. Serving mock offers.")
        return SearchResponse(
            source="mock",
            message=MOCK_MESSAGE,
            data=build_mock_offers(depart_date),
        )

    allowed_codes = approved_airline_codes()
    params = FlightOffersSearchParams(
        origin=request.origin,
        destination=request.destination,
        depart_date=depart_date,
        return_date=request.return_date.isoformat() if request.return_date else None,
        adults=request.adults,
        children=request.children,
        infants=request.infants,
        max_results=config.amadeus_max_results,
        currency_code=config.amadeus_currency_code,
        included_airline_codes=allowed_codes,
    )

    response = await amadeus.fetch_flight_offers(
        params, config.amadeus_client_id, config.amadeus_client_secret
    )
    carriers = response.get("dictionaries", {})
    carriers = carriers.get("carriers") if isinstance(carriers, dict) else None

    offers = normalize_offers(response.get("data"), carriers, allowed_codes)
    logger.info(
        f"Search {request.origin}-{request.destination} on {depart_date}: "
        f"{len(offers)} eligible offers"
    )
    return SearchResponse(source="provider", data=offers)
