"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import List, Optional

import httpx
import pytest

# Ensure backend is on path when running tests without installed package
backend = Path(__file__).resolve().parent.parent / "backend"
if backend.exists() and str(backend) not in sys.path:
    sys.path.insert(0, str(backend))

from poleflights.config import Settings  # noqa: E402

TOKEN_PATH = "/v1/security/oauth2/token"
OFFERS_PATH = "/v2/shopping/flight-offers"


class FakeClock:
    """Millisecond clock the tests advance by hand."""

    def __init__(self, now_ms: int = 1_700_000_000_000):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, seconds: float) -> None:
        self.now_ms += int(seconds * 1000)


class FakeAmadeus:
    """
    Stand-in for the Amadeus API behind an httpx.MockTransport.
    Records every request it receives.
    """

    def __init__(
        self,
        offers: Optional[list] = None,
        carriers: Optional[dict] = None,
        token_status: int = 200,
        token_body: Optional[dict] = None,
        offers_status: int = 200,
        offers_body: Optional[dict] = None,
    ):
        self.offers = offers or []
        self.carriers = carriers
        self.token_status = token_status
        self.token_body = token_body or {"access_token": "token-1", "expires_in": 1799}
        self.offers_status = offers_status
        self.offers_body = offers_body
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == TOKEN_PATH:
            return httpx.Response(self.token_status, json=self.token_body)
        if request.url.path == OFFERS_PATH:
            if self.offers_body is not None:
                return httpx.Response(self.offers_status, json=self.offers_body)
            body = {"data": self.offers}
            if self.carriers is not None:
                body["dictionaries"] = {"carriers": self.carriers}
            return httpx.Response(self.offers_status, json=body)
        return httpx.Response(404, json={})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


def make_segment(
    carrier: Optional[str] = "PR",
    number: Optional[str] = "100",
    depart: Optional[str] = "2026-02-10T08:00:00",
    arrive: Optional[str] = "2026-02-10T12:00:00",
) -> dict:
    segment: dict = {}
    if carrier is not None:
        segment["carrierCode"] = carrier
    if number is not None:
        segment["number"] = number
    if depart is not None:
        segment["departure"] = {"at": depart}
    if arrive is not None:
        segment["arrival"] = {"at": arrive}
    return segment


def make_offer(
    offer_id: Optional[str] = "1",
    segments: Optional[list] = None,
    total: Optional[str] = "500.00",
    currency: Optional[str] = "USD",
    duration: Optional[str] = "PT4H",
    validating: Optional[list] = None,
) -> dict:
    offer: dict = {
        "itineraries": [
            {"segments": segments if segments is not None else [make_segment()]}
        ],
    }
    if duration is not None:
        offer["itineraries"][0]["duration"] = duration
    if offer_id is not None:
        offer["id"] = offer_id
    price = {}
    if total is not None:
        price["grandTotal"] = total
    if currency is not None:
        price["currency"] = currency
    offer["price"] = price
    if validating is not None:
        offer["validatingAirlineCodes"] = validating
    return offer


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def live_settings() -> Settings:
    return Settings(
        _env_file=None,
        amadeus_host="https://amadeus.test",
        amadeus_client_id="client-id",
        amadeus_client_secret="client-secret",
    )


@pytest.fixture
def mock_settings() -> Settings:
    return Settings(
        _env_file=None,
        amadeus_host="https://amadeus.test",
        amadeus_client_id="",
        amadeus_client_secret="",
    )

