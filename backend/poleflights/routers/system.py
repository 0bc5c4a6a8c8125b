from fastapi import APIRouter, Depends
from poleflights.config import Settings
from poleflights.dependencies import get_amadeus_service, get_settings
from poleflights.reference import APPROVED_AIRLINES, list_airports
from poleflights.services.amadeus_service import AmadeusService

router = APIRouter(prefix="/system-health", tags=["System"])

@router.get("")
def get_system_health(
    config: Settings = Depends(get_settings),
    amadeus: AmadeusService = Depends(get_amadeus_service),
):
    return {
        "provider_configured": config.has_amadeus_credentials,
        "token_cached": amadeus.token_cache.get() is not None,
        "approved_airlines": len(APPROVED_AIRLINES),
        "airports": len(list_airports()),
    }
