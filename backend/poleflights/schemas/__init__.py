from poleflights.schemas.flight_offer_schema import (
    AirlineResponse,
    AirportResponse,
    ErrorResponse,
    FlightOffersSearchParams,
    NormalizedOffer,
    Price,
    SearchRequest,
    SearchResponse,
)

__all__ = [
    "AirlineResponse",
    "AirportResponse",
    "ErrorResponse",
    "FlightOffersSearchParams",
    "NormalizedOffer",
    "Price",
    "SearchRequest",
    "SearchResponse",
]
