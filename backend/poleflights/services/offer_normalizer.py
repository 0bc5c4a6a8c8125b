"""
Normalization of raw Amadeus flight offers.

Raw offers are untrusted: every field may be missing or of the wrong type.
An offer that fails a structural check is dropped on its own and never
aborts the batch.
"""
import logging
import math
import re
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from poleflights.reference.airlines import get_approved_airline
from poleflights.schemas.flight_offer_schema import NormalizedOffer, Price

logger = logging.getLogger(__name__)

DURATION_RE = re.compile(r"^P(?:([0-9]+)D)?(?:T(?:([0-9]+)H)?(?:([0-9]+)M)?(?:([0-9]+)S)?)?$")

DEFAULT_PRICE_TOTAL = "0.00"
DEFAULT_CURRENCY = "USD"
ROUTE_SEPARATOR = " -> "


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> Optional[str]:
    """Non-empty string, or a number rendered as one."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def parse_duration_minutes(duration: Optional[str]) -> Optional[int]:
    """Parse an ISO 8601 duration (P1DT2H30M15S) to whole minutes, seconds rounded."""
    if not duration or not isinstance(duration, str):
        return None
    match = DURATION_RE.match(duration)
    if not match:
        return None
    try:
        days, hours, minutes, seconds = (int(g or 0) for g in match.groups())
    except ValueError:
        # Component longer than the interpreter's integer string limit
        return None
    return days * 24 * 60 + hours * 60 + minutes + _round_half_up(seconds / 60)


def _parse_timestamp(value: str) -> Optional[datetime]:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def compute_duration_minutes(start: Optional[str], end: Optional[str]) -> Optional[int]:
    """Minutes between two ISO 8601 timestamps, or None unless strictly positive."""
    if not start or not end:
        return None
    start_at = _parse_timestamp(start)
    end_at = _parse_timestamp(end)
    if start_at is None or end_at is None:
        return None
    try:
        diff_seconds = (end_at - start_at).total_seconds()
    except TypeError:
        # naive vs aware timestamps
        return None
    if diff_seconds <= 0:
        return None
    minutes = _round_half_up(diff_seconds / 60)
    return minutes or None


def _sort_price(total: str) -> float:
    try:
        price = float(total)
    except ValueError:
        return math.inf
    return price if math.isfinite(price) else math.inf


def _normalize_offer(
    offer: Any,
    carrier_names: Mapping[str, Any],
    allowed_codes: frozenset,
) -> Optional[NormalizedOffer]:
    if not isinstance(offer, dict):
        return None

    itineraries = _as_list(offer.get("itineraries"))
    itinerary = _as_dict(itineraries[0]) if itineraries else {}
    segments = [_as_dict(s) for s in _as_list(itinerary.get("segments"))]
    if not segments:
        return None

    first_segment = segments[0]
    last_segment = segments[-1]

    validating_codes = _as_list(offer.get("validatingAirlineCodes"))
    carrier_code = _as_str(first_segment.get("carrierCode")) or (
        _as_str(validating_codes[0]) if validating_codes else None
    )
    if not carrier_code:
        return None
    carrier_code = carrier_code.upper()
    if carrier_code not in allowed_codes:
        return None

    depart_at = _as_str(_as_dict(first_segment.get("departure")).get("at"))
    arrive_at = _as_str(_as_dict(last_segment.get("arrival")).get("at"))
    if not depart_at or not arrive_at:
        return None

    price = _as_dict(offer.get("price"))
    price_total = _as_str(price.get("grandTotal")) or _as_str(price.get("total")) or DEFAULT_PRICE_TOTAL
    price_currency = _as_str(price.get("currency")) or DEFAULT_CURRENCY

    route_parts = []
    for segment in segments:
        code = (_as_str(segment.get("carrierCode")) or carrier_code).upper()
        number = _as_str(segment.get("number"))
        route_parts.append(f"{code} {number}" if number else code)
    route_summary = ROUTE_SEPARATOR.join(route_parts)

    duration_minutes = parse_duration_minutes(itinerary.get("duration"))
    if not duration_minutes:
        duration_minutes = compute_duration_minutes(depart_at, arrive_at)

    approved = get_approved_airline(carrier_code)
    airline_name = (
        _as_str(carrier_names.get(carrier_code))
        or (approved.name if approved else None)
        or carrier_code
    )

    return NormalizedOffer(
        id=_as_str(offer.get("id")) or f"{carrier_code}-{depart_at}",
        carrier_code=carrier_code,
        airline_name=airline_name,
        price=Price(total=price_total, currency=price_currency),
        depart_at=depart_at,
        arrive_at=arrive_at,
        stops=max(len(segments) - 1, 0),
        route_summary=route_summary,
        duration_minutes=duration_minutes or None,
    )


def _sort_key(offer: NormalizedOffer) -> Tuple[float, float]:
    duration = offer.duration_minutes if offer.duration_minutes is not None else math.inf
    return _sort_price(offer.price.total), duration


def normalize_offers(
    raw_offers: Any,
    carrier_names: Optional[Mapping[str, Any]],
    allowed_codes: Iterable[str],
) -> List[NormalizedOffer]:
    """
    Filter raw offers to allowed carriers and reshape them, cheapest first.

    Ties on price are broken by shorter duration; offers without a duration
    sort after those with one. Order is otherwise stable.
    """
    allowed = frozenset(code.upper() for code in allowed_codes)
    names = carrier_names if isinstance(carrier_names, Mapping) else {}

    normalized = []
    for offer in _as_list(raw_offers):
        try:
            item = _normalize_offer(offer, names, allowed)
        except Exception as e:
            # If one single offer structurally breaks during decoding, skip it
            logger.warning(f"Failed parsing single flight offer. Skipping. Cause: {e}")
            continue
        if item is None:
            logger.debug(f"Dropped ineligible offer {_as_dict(offer).get('id')!r}")
            continue
        normalized.append(item)

    return sorted(normalized, key=_sort_key)
