"""Internal allow-list of airlines confirmed to accept pole vault poles."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AllowListedCarrier:
    """Carrier from the internal approval list."""

    iata_code: str
    name: str
    status: str = "confirmed"
    notes: str = ""


APPROVED_AIRLINES: tuple[AllowListedCarrier, ...] = (
    AllowListedCarrier(
        iata_code="PR",
        name="Philippine Airlines",
        notes="MVP: only airline in the approved list",
    ),
)

_airlines_by_code: dict[str, AllowListedCarrier] = {
    airline.iata_code.upper(): airline for airline in APPROVED_AIRLINES
}


def approved_airline_codes() -> list[str]:
    """Upper-cased IATA codes of approved airlines, in list order."""
    return [airline.iata_code.upper() for airline in APPROVED_AIRLINES]


def get_approved_airline(iata_code: str) -> Optional[AllowListedCarrier]:
    """Look up an approved airline by IATA code. Returns None if not approved."""
    if not iata_code:
        return None
    return _airlines_by_code.get(iata_code.upper().strip())
