"""
Validation of raw search query parameters.

Checks run in a fixed order and the first failure wins, so an out-of-range
adult count is reported before an infant count that exceeds it.
"""
import re
from datetime import date, datetime
from typing import Optional

from poleflights.exceptions import (
    InvalidDepartDate,
    InvalidPassengerCount,
    InvalidReturnDate,
    InvalidRoute,
    TooManyInfants,
)
from poleflights.schemas.flight_offer_schema import SearchRequest

IATA_PATTERN = re.compile(r"^[A-Z]{3}$")
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
COUNT_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a strict YYYY-MM-DD calendar date. Returns None when invalid."""
    if not value or not DATE_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_count(value: Optional[str], fallback: int) -> Optional[int]:
    """
    Absent or blank means `fallback`; anything else must be an integer.
    Returns None for non-numeric input, non-ASCII digits included.
    """
    if value is None or value.strip() == "":
        return fallback
    if not COUNT_PATTERN.match(value.strip()):
        return None
    try:
        return int(value.strip())
    except ValueError:
        # Over the interpreter's integer string length limit
        return None


def validate_search_params(
    origin: Optional[str],
    destination: Optional[str],
    depart_date: Optional[str],
    return_date: Optional[str] = None,
    adults: Optional[str] = None,
    children: Optional[str] = None,
    infants: Optional[str] = None,
) -> SearchRequest:
    origin = (origin or "").strip().upper()
    destination = (destination or "").strip().upper()

    if not IATA_PATTERN.match(origin) or not IATA_PATTERN.match(destination):
        raise InvalidRoute("Invalid origin or destination IATA code.")

    if origin == destination:
        raise InvalidRoute("Origin and destination must be different.")

    departure = parse_date(depart_date)
    if departure is None:
        raise InvalidDepartDate("Invalid departure date. Use YYYY-MM-DD.")

    returning = None
    if return_date:
        returning = parse_date(return_date)
        if returning is None:
            raise InvalidReturnDate("Invalid return date. Use YYYY-MM-DD.")
        if returning < departure:
            raise InvalidReturnDate("Return date cannot be before departure date.")

    adult_count = parse_count(adults, 1)
    child_count = parse_count(children, 0)
    infant_count = parse_count(infants, 0)

    if adult_count is None or child_count is None or infant_count is None:
        raise InvalidPassengerCount("Invalid passenger counts. Use integers only.")

    if adult_count < 1 or child_count < 0 or infant_count < 0:
        raise InvalidPassengerCount("Passenger counts must be non-negative, with at least 1 adult.")

    if infant_count > adult_count:
        raise TooManyInfants("Infants cannot exceed the number of adults.")

    return SearchRequest(
        origin=origin,
        destination=destination,
        depart_date=departure,
        return_date=returning,
        adults=adult_count,
        children=child_count,
        infants=infant_count,
    )
