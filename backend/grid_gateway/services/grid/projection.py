"""
Project booking intervals onto the grid's date axis.

Every date starts available at the item's base price. A booking marks each date d
with start <= d < end as booked (end exclusive, so back-to-back stays do not collide).
Only bookings whose status is absent or equals the booked token are applied; other
statuses are ignored rather than mapped to pending/unavailable. Booked is sticky:
nothing in a projection turns a booked date back to available.
"""
import logging
from collections.abc import Iterable, Sequence
from datetime import timedelta
from typing import Any

from grid_gateway.core.constants import DEFAULT_BOOKED_STATUS_TOKEN, STATUS_BOOKED
from grid_gateway.services.grid.dates import day_start, parse_timestamp
from grid_gateway.services.grid.types import BookingInterval, DayAvailability

logger = logging.getLogger(__name__)


def build_interval(unit_id: Any, start_raw: Any, end_raw: Any = None, status: Any = None) -> BookingInterval | None:
    """
    BookingInterval from raw provider values, or None when it cannot be projected.
    No start (or an unparseable one) drops the booking; no end means a single-day booking.
    """
    starts_at = parse_timestamp(start_raw)
    if starts_at is None:
        logger.debug("Skipping booking for unit %s: no usable start (%r)", unit_id, start_raw)
        return None
    if end_raw is None or end_raw == "":
        ends_at = starts_at + timedelta(days=1)
    else:
        ends_at = parse_timestamp(end_raw)
        if ends_at is None:
            logger.debug("Skipping booking for unit %s: unparseable end (%r)", unit_id, end_raw)
            return None
    return BookingInterval(unit_id=str(unit_id), starts_at=starts_at, ends_at=ends_at, status=status)


def is_booked_status(status: Any, booked_token: str = DEFAULT_BOOKED_STATUS_TOKEN) -> bool:
    """Absent/empty status counts as booked; a boolean is taken as is; otherwise case-insensitive match on the token."""
    if status is None or status == "":
        return True
    # Boolean flags (e.g. a "confirmed" field) book only when true
    if isinstance(status, bool):
        return status
    return str(status).lower() == booked_token.lower()


def project(
    dates: Sequence[str],
    intervals: Iterable[BookingInterval],
    booked_token: str = DEFAULT_BOOKED_STATUS_TOKEN,
) -> dict[str, str]:
    """Map of date -> status override for the dates covered by matching intervals."""
    day_starts = [(d, day_start(d)) for d in dates]
    overrides: dict[str, str] = {}
    for interval in intervals:
        if not is_booked_status(interval.status, booked_token):
            continue
        for d, instant in day_starts:
            if interval.starts_at <= instant < interval.ends_at:
                overrides[d] = STATUS_BOOKED
    return overrides


def baseline(dates: Sequence[str], price: float | None) -> dict[str, DayAvailability]:
    """Every date available at the base price, no remaining count."""
    return {d: DayAvailability(price=price) for d in dates}


def apply_overrides(availability: dict[str, DayAvailability], overrides: dict[str, str]) -> None:
    for d, status in overrides.items():
        day = availability.get(d)
        if day is not None:
            day.status = status


def group_by_unit(intervals: Iterable[BookingInterval]) -> dict[str, list[BookingInterval]]:
    """Intervals keyed by unit id, source order kept within each unit."""
    grouped: dict[str, list[BookingInterval]] = {}
    for interval in intervals:
        grouped.setdefault(interval.unit_id, []).append(interval)
    return grouped
