"""Airport lookup by IATA code."""

from dataclasses import dataclass
from importlib import resources
from typing import Optional

import json


@dataclass(frozen=True)
class AirportInfo:
    """Airport details from reference data."""

    iata: str
    name: str
    city: str
    country: str


_airports_cache: Optional[dict[str, AirportInfo]] = None


def _load_airports() -> dict[str, AirportInfo]:
    global _airports_cache
    if _airports_cache is None:
        data_path = resources.files("poleflights.reference").joinpath("data").joinpath("airports.json")
        with data_path.open(encoding="utf-8") as f:
            rows = json.load(f)
        _airports_cache = {
            row["iata"].upper(): AirportInfo(
                iata=row["iata"].upper(),
                name=row.get("name", ""),
                city=row.get("city", ""),
                country=row.get("country", ""),
            )
            for row in rows
        }
    return _airports_cache


def get_airport(iata: str) -> Optional[AirportInfo]:
    """Look up airport by IATA code. Returns None if not found."""
    if not iata:
        return None
    return _load_airports().get(iata.upper().strip())


def list_airports() -> list[AirportInfo]:
    """All reference airports, in data file order."""
    return list(_load_airports().values())


def search_airports(query: Optional[str] = None) -> list[AirportInfo]:
    """
    Case-insensitive substring match over code, name, city and country.
    An empty query returns every airport.
    """
    airports = list_airports()
    if not query or not query.strip():
        return airports
    needle = query.strip().lower()
    return [
        a for a in airports
        if needle in a.iata.lower()
        or needle in a.name.lower()
        or needle in a.city.lower()
        or needle in a.country.lower()
    ]


def format_airport_label(airport: AirportInfo) -> str:
    return f"{airport.iata} - {airport.name} ({airport.city}, {airport.country})"
