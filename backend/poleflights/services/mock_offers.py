"""
Deterministic example offers served when Amadeus credentials are not configured.
"""
from typing import List

from poleflights.reference.airlines import approved_airline_codes, get_approved_airline
from poleflights.schemas.flight_offer_schema import NormalizedOffer, Price

MOCK_MESSAGE = "Mock data (missing API keys)"
FALLBACK_DATE = "2026-02-10"


def build_mock_offers(depart_date: str) -> List[NormalizedOffer]:
    """Two fixed offers on the first approved carrier, dated on `depart_date`."""
    codes = approved_airline_codes()
    carrier_code = codes[0] if codes else "PR"
    approved = get_approved_airline(carrier_code)
    airline_name = approved.name if approved else "Philippine Airlines"
    base_date = depart_date or FALLBACK_DATE

    return [
        NormalizedOffer(
            id="mock-1",
            carrier_code=carrier_code,
            airline_name=airline_name,
            price=Price(total="682.40", currency="USD"),
            depart_at=f"{base_date}T08:10:00",
            arrive_at=f"{base_date}T22:05:00",
            stops=0,
            route_summary=f"{carrier_code} 103",
            duration_minutes=835,
        ),
        NormalizedOffer(
            id="mock-2",
            carrier_code=carrier_code,
            airline_name=airline_name,
            price=Price(total="745.10", currency="USD"),
            depart_at=f"{base_date}T11:30:00",
            arrive_at=f"{base_date}T23:45:00",
            stops=1,
            route_summary=f"{carrier_code} 205 -> {carrier_code} 412",
            duration_minutes=855,
        ),
    ]
