from fastapi import APIRouter, Query
from typing import Optional

from poleflights.reference import APPROVED_AIRLINES, format_airport_label, search_airports
from poleflights.schemas.flight_offer_schema import AirlineResponse, AirportResponse

router = APIRouter(prefix="/api", tags=["reference"])


@router.get("/airlines")
def list_approved_airlines():
    """Airlines confirmed (internal research) to accept pole vault poles."""
    return {
        "data": [
            AirlineResponse(
                iata_code=a.iata_code,
                name=a.name,
                status=a.status,
                notes=a.notes,
            ).model_dump(by_alias=True)
            for a in APPROVED_AIRLINES
        ]
    }


@router.get("/airports")
def list_airports(q: Optional[str] = Query(None, description="Filter on code, name, city or country")):
    return {
        "data": [
            AirportResponse(
                iata=a.iata,
                name=a.name,
                city=a.city,
                country=a.country,
                label=format_airport_label(a),
            ).model_dump()
            for a in search_airports(q)
        ]
    }
