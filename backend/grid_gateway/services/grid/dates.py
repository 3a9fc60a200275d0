"""Calendar-date axis and timestamp parsing shared by every adapter."""
from datetime import date, datetime, timedelta, timezone
from typing import Any

from grid_gateway.core.errors import InvalidDateError


def _parse_iso_datetime(s: str) -> datetime | None:
    """fromisoformat that also accepts a trailing Z. Returns None if invalid."""
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def parse_calendar_date(value: Any) -> date:
    """
    Parse YYYY-MM-DD (or a full ISO timestamp) to a calendar date.
    Time of day and offset are dropped; the date is the one written in the input.
    Raises InvalidDateError when the value is not a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip() if value is not None else ""
    if not s:
        raise InvalidDateError("Missing date. Use YYYY-MM-DD.")
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    parsed = _parse_iso_datetime(s)
    if parsed is None:
        raise InvalidDateError(f"Invalid date: {s!r}. Use YYYY-MM-DD.")
    return parsed.date()


def generate_date_range(start: Any, end: Any) -> list[str]:
    """
    Inclusive list of YYYY-MM-DD strings from start to end, one per day, ascending.
    Empty when start > end. Raises InvalidDateError if either bound does not parse.
    """
    first = parse_calendar_date(start)
    last = parse_calendar_date(end)
    return [(first + timedelta(days=i)).isoformat() for i in range((last - first).days + 1)]


def calendar_bounds(start: Any, end: Any) -> tuple[str, str]:
    """Request bounds as plain YYYY-MM-DD strings, for upstream query parameters."""
    return parse_calendar_date(start).isoformat(), parse_calendar_date(end).isoformat()


def day_start(day: str) -> datetime:
    """Midnight UTC of a YYYY-MM-DD string; the instant a grid date is compared at."""
    return datetime.combine(date.fromisoformat(day), datetime.min.time(), tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse a provider timestamp to an aware UTC datetime. None if missing or unparseable.

    Accepts ISO dates/datetimes (Z or offset; naive is taken as UTC), datetime/date
    objects, and epoch milliseconds.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        s = str(value).strip()
        if not s:
            return None
        parsed = _parse_iso_datetime(s)
        if parsed is None:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
