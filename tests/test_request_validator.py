"""Unit tests for search request validation."""

from datetime import date

import pytest

from poleflights.exceptions import (
    InvalidDepartDate,
    InvalidPassengerCount,
    InvalidReturnDate,
    InvalidRoute,
    SearchValidationError,
    TooManyInfants,
)
from poleflights.services.request_validator import parse_count, parse_date, validate_search_params


def _validate(**overrides):
    params = {
        "origin": "JFK",
        "destination": "MNL",
        "depart_date": "2026-02-10",
    }
    params.update(overrides)
    return validate_search_params(**params)


class TestAcceptedRequests:
    """Requests that pass every check."""

    def test_minimal_request_uses_defaults(self) -> None:
        req = _validate()
        assert req.origin == "JFK"
        assert req.destination == "MNL"
        assert req.depart_date == date(2026, 2, 10)
        assert req.return_date is None
        assert (req.adults, req.children, req.infants) == (1, 0, 0)

    def test_codes_are_uppercased(self) -> None:
        req = _validate(origin="jfk", destination=" mnl ")
        assert (req.origin, req.destination) == ("JFK", "MNL")

    def test_round_trip_same_day(self) -> None:
        req = _validate(return_date="2026-02-10")
        assert req.return_date == date(2026, 2, 10)

    def test_blank_counts_use_defaults(self) -> None:
        req = _validate(adults="", children="  ", infants="")
        assert (req.adults, req.children, req.infants) == (1, 0, 0)

    def test_empty_return_date_is_absent(self) -> None:
        assert _validate(return_date="").return_date is None

    @pytest.mark.parametrize("adults,children,infants", [("1", "0", "1"), ("3", "2", "3"), ("9", "0", "0")])
    def test_valid_passenger_mixes(self, adults: str, children: str, infants: str) -> None:
        req = _validate(adults=adults, children=children, infants=infants)
        assert req.infants <= req.adults


class TestRejectedRequests:
    """Each check rejects with its own error type and field."""

    @pytest.mark.parametrize("origin,destination", [("JF", "MNL"), ("JFK", "MNL1"), ("", "MNL"), ("J1K", "MNL"), (None, "MNL")])
    def test_bad_codes(self, origin, destination) -> None:
        with pytest.raises(InvalidRoute) as exc:
            _validate(origin=origin, destination=destination)
        assert exc.value.field == "route"

    def test_same_origin_and_destination(self) -> None:
        with pytest.raises(InvalidRoute, match="must be different"):
            _validate(origin="mnl", destination="MNL")

    @pytest.mark.parametrize("value", [None, "", "2026-2-10", "10/02/2026", "2026-02-30", "2026-13-01"])
    def test_bad_depart_date(self, value) -> None:
        with pytest.raises(InvalidDepartDate) as exc:
            _validate(depart_date=value)
        assert exc.value.field == "departDate"

    def test_bad_return_date(self) -> None:
        with pytest.raises(InvalidReturnDate, match="Use YYYY-MM-DD"):
            _validate(return_date="2026-02-31")

    def test_return_before_departure(self) -> None:
        with pytest.raises(InvalidReturnDate, match="before departure"):
            _validate(depart_date="2026-02-10", return_date="2026-02-09")

    @pytest.mark.parametrize("value", ["two", "9" * 5000, "\u0662"])
    @pytest.mark.parametrize("field", ["adults", "children", "infants"])
    def test_non_numeric_counts(self, field: str, value: str) -> None:
        with pytest.raises(InvalidPassengerCount, match="integers only"):
            _validate(**{field: value})

    @pytest.mark.parametrize("adults,children,infants", [("0", "0", "0"), ("1", "-1", "0"), ("1", "0", "-1")])
    def test_out_of_range_counts(self, adults, children, infants) -> None:
        with pytest.raises(InvalidPassengerCount, match="at least 1 adult"):
            _validate(adults=adults, children=children, infants=infants)

    def test_too_many_infants(self) -> None:
        with pytest.raises(TooManyInfants) as exc:
            _validate(adults="1", infants="2")
        assert exc.value.field == "infantCount"


class TestCheckOrder:
    """First failing check wins."""

    def test_route_checked_before_dates(self) -> None:
        with pytest.raises(InvalidRoute):
            _validate(origin="XX", depart_date="bad")

    def test_depart_date_checked_before_counts(self) -> None:
        with pytest.raises(InvalidDepartDate):
            _validate(depart_date="bad", adults="x")

    def test_adult_range_masks_infant_excess(self) -> None:
        with pytest.raises(InvalidPassengerCount):
            _validate(adults="0", infants="2")

    def test_all_errors_share_base_class(self) -> None:
        with pytest.raises(SearchValidationError):
            _validate(adults="1", infants="5")


class TestParsers:
    """Tests for parse_date and parse_count."""

    def test_parse_date_leap_day(self) -> None:
        assert parse_date("2028-02-29") == date(2028, 2, 29)
        assert parse_date("2026-02-29") is None

    def test_parse_date_ascii_digits_only(self) -> None:
        assert parse_date("\u0662\u0660\u0662\u0666-02-10") is None

    def test_parse_count_distinguishes_blank_and_garbage(self) -> None:
        assert parse_count(None, 1) == 1
        assert parse_count("", 1) == 1
        assert parse_count("4", 1) == 4
        assert parse_count("-2", 0) == -2
        assert parse_count("4x", 1) is None
        assert parse_count("1.5", 1) is None
        assert parse_count("\u0662", 1) is None
        assert parse_count("9" * 5000, 1) is None
