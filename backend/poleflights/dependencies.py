from fastapi import Request

from poleflights.config import Settings
from poleflights.services.amadeus_service import AmadeusService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_amadeus_service(request: Request) -> AmadeusService:
    # One service per app so the token cache is shared across requests
    return request.app.state.amadeus
