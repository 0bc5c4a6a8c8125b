import httpx
from typing import Any, Dict, Optional, Tuple
import logging

from poleflights.config import Settings, settings
from poleflights.exceptions import ProviderAuthError, ProviderQueryError
from poleflights.schemas.flight_offer_schema import FlightOffersSearchParams
from poleflights.services.token_cache import TokenCache

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = 1799


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _auth_error_message(body: Any) -> str:
    if isinstance(body, dict) and isinstance(body.get("error_description"), str):
        return body["error_description"]
    return "Failed to fetch Amadeus access token."


def _query_error_message(body: Any) -> str:
    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            detail = errors[0].get("detail")
            if isinstance(detail, str) and detail:
                return detail
    return "Amadeus Flight Offers request failed."


class AmadeusService:
    def __init__(
        self,
        config: Optional[Settings] = None,
        token_cache: Optional[TokenCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        config = config or settings
        self.base_url = config.amadeus_host.rstrip("/")
        self.timeout = config.amadeus_timeout_seconds
        self.token_cache = token_cache or TokenCache()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def get_access_token(self, client_id: str, client_secret: str) -> str:
        """
        Returns the cached OAuth 2.0 access token, or exchanges the client
        credentials for a new one. Tokens are refreshed 60 seconds before expiry.
        """
        return await self.token_cache.refresh(
            lambda: self._request_token(client_id, client_secret)
        )

    async def _request_token(self, client_id: str, client_secret: str) -> Tuple[str, float]:
        auth_url = f"{self.base_url}/v1/security/oauth2/token"
        data = {
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret
        }

        try:
            async with self._client() as client:
                response = await client.post(auth_url, data=data)
        except httpx.RequestError as e:
            logger.error(f"Failed to reach Amadeus token endpoint: {e}")
            raise ProviderAuthError(f"Could not connect to Amadeus: {e}") from e

        body = _json_or_none(response)
        if not response.is_success:
            logger.error(f"Amadeus Authentication failed with status code: {response.status_code}")
            raise ProviderAuthError(
                _auth_error_message(body), status_code=response.status_code, details=body
            )

        token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            raise ProviderAuthError(
                "Amadeus token response did not include an access token.",
                status_code=response.status_code,
                details=body,
            )

        expires_in = body.get("expires_in", DEFAULT_EXPIRES_IN)
        if isinstance(expires_in, bool) or not isinstance(expires_in, (int, float)):
            expires_in = DEFAULT_EXPIRES_IN

        logger.info(f"Amadeus token acquired, expires in {expires_in}s")
        return token, expires_in

    async def fetch_flight_offers(
        self,
        params: FlightOffersSearchParams,
        client_id: str,
        client_secret: str,
    ) -> Dict[str, Any]:
        """
        Queries the Amadeus Flight Offers Search API restricted to the given
        carriers. Returns the parsed body: a `data` list of raw offers and an
        optional `dictionaries.carriers` code-to-name map.
        """
        token = await self.get_access_token(client_id, client_secret)
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.amadeus+json"
        }

        query = {
            "originLocationCode": params.origin,
            "destinationLocationCode": params.destination,
            "departureDate": params.depart_date,
            "adults": str(params.adults or 1),
            "max": str(params.max_results or 10),
            "currencyCode": params.currency_code or "USD",
            "includedAirlineCodes": ",".join(params.included_airline_codes),
        }

        if params.children and params.children > 0:
            query["children"] = str(params.children)
        if params.infants and params.infants > 0:
            query["infants"] = str(params.infants)
        if params.return_date:
            query["returnDate"] = params.return_date

        search_url = f"{self.base_url}/v2/shopping/flight-offers"

        try:
            async with self._client() as client:
                response = await client.get(search_url, headers=headers, params=query)
        except httpx.RequestError as e:
            logger.error(f"Network error querying Amadeus: {e}")
            raise ProviderQueryError(f"Could not connect to Amadeus: {e}") from e

        body = _json_or_none(response)
        if not response.is_success:
            if response.status_code == 401:
                # Force token refresh next time around
                self.token_cache.invalidate()
            elif response.status_code == 429:
                logger.warning("Amadeus Rate Limit Exceeded")
            logger.error(f"Amadeus Search API failed: status {response.status_code}")
            raise ProviderQueryError(
                _query_error_message(body), status_code=response.status_code, details=body
            )

        if not isinstance(body, dict):
            raise ProviderQueryError(
                "Amadeus returned an unreadable flight offers response.",
                status_code=response.status_code,
            )

        offers = body.get("data")
        logger.info(
            f"Amadeus returned {len(offers) if isinstance(offers, list) else 0} offers for "
            f"{params.origin}-{params.destination} on {params.depart_date}"
        )
        return body
