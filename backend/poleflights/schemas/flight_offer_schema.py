from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Price(CamelModel):
    total: str
    currency: str


class NormalizedOffer(CamelModel):
    id: str
    carrier_code: str
    airline_name: str
    price: Price
    depart_at: str
    arrive_at: str
    stops: int = Field(..., ge=0)
    route_summary: str
    duration_minutes: Optional[int] = Field(None, gt=0)


class SearchRequest(BaseModel):
    """A validated search. Built by the request validator only."""

    origin: str = Field(..., min_length=3, max_length=3, description="IATA Airport Code, 3 chars uppercase.")
    destination: str = Field(..., min_length=3, max_length=3, description="IATA Airport Code, 3 chars uppercase.")
    depart_date: date
    return_date: Optional[date] = None
    adults: int = Field(1, ge=1)
    children: int = Field(0, ge=0)
    infants: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)


class FlightOffersSearchParams(BaseModel):
    """Query sent to the Amadeus Flight Offers Search API."""

    origin: str
    destination: str
    depart_date: str
    return_date: Optional[str] = None
    adults: int = 1
    children: int = 0
    infants: int = 0
    max_results: int = 10
    currency_code: str = "USD"
    included_airline_codes: List[str] = Field(default_factory=list)


class SearchResponse(CamelModel):
    source: Literal["mock", "provider"]
    message: Optional[str] = None
    data: List[NormalizedOffer]


class ErrorResponse(BaseModel):
    error: str


class AirlineResponse(CamelModel):
    iata_code: str
    name: str
    status: str
    notes: str


class AirportResponse(BaseModel):
    iata: str
    name: str
    city: str
    country: str
    label: str
