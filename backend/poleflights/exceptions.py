"""
Error taxonomy for flight searches.

Validation errors are raised before any network call and map to HTTP 400.
Provider errors wrap failed Amadeus calls and map to HTTP 502.
"""
from typing import Any, Optional


class SearchValidationError(Exception):
    """A search request failed validation. `field` names the offending input."""

    field: str = "request"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRoute(SearchValidationError):
    field = "route"


class InvalidDepartDate(SearchValidationError):
    field = "departDate"


class InvalidReturnDate(SearchValidationError):
    field = "returnDate"


class InvalidPassengerCount(SearchValidationError):
    field = "passengerCount"


class TooManyInfants(SearchValidationError):
    field = "infantCount"


class ProviderError(Exception):
    """An upstream Amadeus call failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ProviderAuthError(ProviderError):
    """The client-credentials token exchange failed."""


class ProviderQueryError(ProviderError):
    """The flight-offers query failed after authentication."""
