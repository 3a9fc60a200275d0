"""
Field resolution over arbitrary provider JSON.

Records are plain dicts from json decoding; nothing here knows a provider schema.
An explicit dot-path from tenant config always wins; the ranked alias tables
are the fallback used when no path is configured or the path finds nothing.
A missing field resolves to None and never raises.
"""
import math
from collections.abc import Mapping, Sequence
from typing import Any

# Ranked, first-match-wins. Order is part of the tenant-facing contract; do not reorder.
ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id", "_id", "uuid", "pk", "uId"),
    "name": ("name", "title", "label", "display_name", "fileName", "carName"),
    "image": ("image", "img", "photo", "thumbnail", "pic", "carImage"),
    "url": ("url", "link", "href", "website"),
    "price": ("price", "amount", "cost", "rate", "value"),
    "startDate": ("startDate", "start", "from", "reservationDate", "checkIn"),
    "endDate": ("endDate", "end", "to", "checkOut"),
    "unitId": ("unitId", "resourceId", "itemId", "carId", "refId"),
    "status": ("status", "state", "availability", "confirmed"),
}


def _step(node: Any, key: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(key)
    # Numeric segments index into lists, e.g. "data.0.attributes"
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)) and key.isdigit():
        idx = int(key)
        return node[idx] if idx < len(node) else None
    return None


def resolve(record: Any, path: str | None) -> Any:
    """Value at dot-path (e.g. "attributes.price.amount"), or None as soon as a segment is missing."""
    if record is None or not path:
        return None
    node = record
    for part in path.split("."):
        node = _step(node, part)
        if node is None:
            return None
    return node


def resolve_by_alias(record: Any, aliases: Sequence[str]) -> Any:
    """First alias present at the top level of record, in the order given. No nested lookup."""
    if not isinstance(record, Mapping):
        return None
    for alias in aliases:
        value = record.get(alias)
        if value is not None:
            return value
    return None


def resolve_field(record: Any, path: str | None, aliases: Sequence[str] = ()) -> Any:
    """Explicit path first; alias guessing only when the path is unset or resolves to nothing."""
    value = resolve(record, path)
    if value is not None:
        return value
    return resolve_by_alias(record, aliases)


def coerce_price(value: Any) -> float:
    """Numeric price from a raw value; missing, non-numeric, negative or non-finite becomes 0."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(price) or price < 0:
        return 0.0
    return price


def coerce_text(value: Any) -> str | None:
    """Scalar as string; None for missing, empty, or nested (dict/list) values."""
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return None
    text = str(value)
    return text or None
