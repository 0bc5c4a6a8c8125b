"""Static reference data: approved airlines and major airports."""

from poleflights.reference.airlines import (
    APPROVED_AIRLINES,
    AllowListedCarrier,
    approved_airline_codes,
    get_approved_airline,
)
from poleflights.reference.airports import (
    AirportInfo,
    format_airport_label,
    get_airport,
    list_airports,
    search_airports,
)

__all__ = [
    "APPROVED_AIRLINES",
    "AirportInfo",
    "AllowListedCarrier",
    "approved_airline_codes",
    "format_airport_label",
    "get_airport",
    "get_approved_airline",
    "list_airports",
    "search_airports",
]
