"""Canonical grid types. Same shape regardless of Booqable/Wix/custom provider."""
from datetime import datetime
from typing import Any

from grid_gateway.core.constants import GRID_SCHEMA_VERSION, STATUS_AVAILABLE

# Wire shape produced by GridResponse.to_dict():
#   { "version": "1.0", "dates": ["YYYY-MM-DD", ...],
#     "items": [{ "id", "name", "image"?, "url"?, "availability": {date: day}, "metadata"? }],
#     "metadata"?: { "currency"?, "timezone"? } }
# Optional fields are omitted when absent, never emitted as null.


def wire_number(value: float | int | None) -> float | int | None:
    """Whole floats go out as ints (25, not 25.0)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class DayAvailability:
    """Status/price/remaining for one (item, date) pair."""

    __slots__ = ("status", "price", "remaining")

    def __init__(
        self,
        status: str = STATUS_AVAILABLE,
        *,
        price: float | None = None,
        remaining: int | None = None,
    ):
        self.status = status
        self.price = price
        self.remaining = remaining

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"status": self.status}
        if self.price is not None:
            out["price"] = wire_number(self.price)
        if self.remaining is not None:
            out["remaining"] = self.remaining
        return out


class GridItem:
    """One bookable unit with an availability entry for every requested date."""

    __slots__ = ("id", "name", "image", "url", "availability", "metadata")

    def __init__(
        self,
        *,
        id: str,
        name: str,
        image: str | None = None,
        url: str | None = None,
        availability: dict[str, DayAvailability] | None = None,
        metadata: dict[str, Any] | None = None,
    ):
        self.id = id
        self.name = name
        self.image = image
        self.url = url
        self.availability = availability if availability is not None else {}
        self.metadata = metadata

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.image is not None:
            out["image"] = self.image
        if self.url is not None:
            out["url"] = self.url
        out["availability"] = {d: day.to_dict() for d, day in self.availability.items()}
        if self.metadata is not None:
            out["metadata"] = self.metadata
        return out


class GridResponse:
    """Full normalized response: the date axis plus items in source record order."""

    __slots__ = ("version", "dates", "items", "metadata")

    def __init__(
        self,
        *,
        dates: list[str],
        items: list[GridItem],
        metadata: dict[str, str] | None = None,
        version: str = GRID_SCHEMA_VERSION,
    ):
        self.version = version
        self.dates = dates
        self.items = items
        self.metadata = metadata

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "version": self.version,
            "dates": list(self.dates),
            "items": [item.to_dict() for item in self.items],
        }
        if self.metadata:
            out["metadata"] = dict(self.metadata)
        return out


class BookingInterval:
    """A provider booking reduced to [starts_at, ends_at) for one unit. Request-scoped."""

    __slots__ = ("unit_id", "starts_at", "ends_at", "status")

    def __init__(
        self,
        *,
        unit_id: str,
        starts_at: datetime,
        ends_at: datetime,
        status: Any = None,
    ):
        self.unit_id = unit_id
        self.starts_at = starts_at
        self.ends_at = ends_at
        self.status = status

    def __repr__(self) -> str:
        return (
            f"BookingInterval(unit_id={self.unit_id!r}, starts_at={self.starts_at.isoformat()}, "
            f"ends_at={self.ends_at.isoformat()}, status={self.status!r})"
        )
