from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from poleflights.config import Settings, settings
from poleflights.exceptions import ProviderError, SearchValidationError
from poleflights.services.amadeus_service import AmadeusService
from poleflights.services.token_cache import TokenCache
import logging

# Configure basic logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

CREDENTIALS_HINT = "(Hint: verify AMADEUS_CLIENT_ID and AMADEUS_CLIENT_SECRET)"


def _cors_origins(config: Settings) -> list:
    origins = ["*"]

    if config.env == "production":
        origins = []
        for o in config.cors_origins.split(","):
            o = o.strip()
            if o and o not in origins:
                origins.append(o)

    return origins


async def validation_error_handler(request: Request, exc: SearchValidationError):
    logger.info(f"Rejected search ({exc.field}): {exc.message}")
    return JSONResponse(status_code=400, content={"error": exc.message})


async def provider_error_handler(request: Request, exc: ProviderError):
    logger.error(f"Amadeus request failed with status {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=502,
        content={"error": f"{exc.message} {CREDENTIALS_HINT}"},
    )


def create_app(
    config: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the API. `transport` replaces the outbound HTTP transport, which
    tests use to stand in for Amadeus.
    """
    config = config or settings

    app = FastAPI(
        title=config.app_name,
        description="Flight search restricted to pole-vault-friendly airlines",
        version="1.0.0"
    )

    # Shared across requests: holds the cached Amadeus token
    app.state.settings = config
    app.state.amadeus = AmadeusService(config, token_cache=TokenCache(), transport=transport)

    origins = _cors_origins(config)
    logger.info(f"CORS origins: {origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SearchValidationError, validation_error_handler)
    app.add_exception_handler(ProviderError, provider_error_handler)

    from poleflights.routers import flight_search, reference, system
    app.include_router(flight_search.router)
    app.include_router(reference.router)
    app.include_router(system.router)

    @app.get("/health")
    def health_check():
        """
        Basic health check endpoint to verify service is running.
        """
        return {"status": "ok", "environment": config.env}

    return app


app = create_app()
