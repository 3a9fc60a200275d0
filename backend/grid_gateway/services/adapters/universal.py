"""
Universal adapter for any REST API (Wix HTTP functions, custom endpoints, etc).

Normalizes arbitrary JSON into a GridResponse using path-based mapping from tenant
settings, falling back to the ALIASES tables when a field has no configured path.

Payload discovery:
  - units at settings.units_path (default "units"); a top-level list is the units list itself
  - bookings at settings.bookings_path (default "bookings"), matched to units by unit id,
    unless a unit carries its own nested bookings list
"""
import logging
from collections.abc import Mapping
from typing import Any

from grid_gateway.core.constants import DEFAULT_BOOKINGS_PATH, UNNAMED_ITEM
from grid_gateway.core.errors import HttpError, IntegrationError, MappingError
from grid_gateway.services.adapters.settings import AdapterSettings, parse_adapter_settings
from grid_gateway.services.grid.dates import calendar_bounds, generate_date_range
from grid_gateway.services.grid.fields import ALIASES, coerce_price, coerce_text, resolve, resolve_field
from grid_gateway.services.grid.projection import apply_overrides, baseline, build_interval, group_by_unit, project
from grid_gateway.services.grid.types import BookingInterval, GridItem, GridResponse
from grid_gateway.services.http.client import UpstreamClient, bearer_headers, default_client
from grid_gateway.services.tenants.store import TenantConfig

logger = logging.getLogger(__name__)

_QUERY_SCALARS = (str, int, float, bool)


def _booking_interval(booking: Any, unit_id: Any, cfg: AdapterSettings) -> BookingInterval | None:
    start_raw = resolve_field(booking, cfg.booking_start, ALIASES["startDate"])
    end_raw = resolve_field(booking, cfg.booking_end, ALIASES["endDate"])
    status = resolve_field(booking, cfg.booking_status, ALIASES["status"])
    return build_interval(unit_id, start_raw, end_raw, status)


def _global_intervals(raw_bookings: list[Any], cfg: AdapterSettings) -> dict[str, list[BookingInterval]]:
    """Top-level bookings keyed by the unit id they reference. Bookings without a unit id are dropped."""
    intervals: list[BookingInterval] = []
    for booking in raw_bookings:
        unit_id = resolve_field(booking, cfg.booking_unit_id, ALIASES["unitId"])
        if unit_id is None:
            continue
        interval = _booking_interval(booking, unit_id, cfg)
        if interval is not None:
            intervals.append(interval)
    return group_by_unit(intervals)


def _nested_bookings(unit: Any, bookings_path: str) -> list[Any] | None:
    nested = resolve(unit, bookings_path)
    if nested is None:
        nested = resolve(unit, DEFAULT_BOOKINGS_PATH)
    return nested if isinstance(nested, list) else None


def _build_item(unit: Any, index: int, dates: list[str], cfg: AdapterSettings) -> GridItem:
    raw_id = resolve_field(unit, cfg.unit_id, ALIASES["id"])
    # Records without any id still get a stable, unique key (source position)
    item_id = str(raw_id) if raw_id is not None else f"unit-{index}"
    name = coerce_text(resolve_field(unit, cfg.unit_name, ALIASES["name"])) or UNNAMED_ITEM
    price = coerce_price(resolve_field(unit, cfg.unit_price, ALIASES["price"]))
    return GridItem(
        id=item_id,
        name=name,
        image=coerce_text(resolve_field(unit, cfg.unit_image, ALIASES["image"])),
        url=coerce_text(resolve_field(unit, cfg.unit_url, ALIASES["url"])),
        availability=baseline(dates, price),
        metadata=dict(unit) if isinstance(unit, Mapping) else None,
    )


def normalize_payload(payload: Any, dates: list[str], cfg: AdapterSettings) -> list[GridItem]:
    """
    Map a raw provider payload to grid items, one per unit, in source order.
    Raises MappingError when the units (or bookings) path does not point at a list.
    """
    units_path = cfg.resolved_units_path()
    bookings_path = cfg.resolved_bookings_path()

    raw_units = resolve(payload, units_path)
    if raw_units is None and isinstance(payload, list):
        raw_units = payload
    if not isinstance(raw_units, list):
        raise MappingError(f"Units not found at path: {units_path}. Verify your mapping.")

    raw_bookings = resolve(payload, bookings_path)
    if raw_bookings is None:
        raw_bookings = []
    if not isinstance(raw_bookings, list):
        raise MappingError(f"Bookings at path {bookings_path} is not a list. Verify your mapping.")
    by_unit = _global_intervals(raw_bookings, cfg)

    items: list[GridItem] = []
    for index, unit in enumerate(raw_units):
        item = _build_item(unit, index, dates, cfg)
        nested = _nested_bookings(unit, bookings_path)
        if nested is not None:
            intervals = [i for i in (_booking_interval(b, item.id, cfg) for b in nested) if i is not None]
        else:
            intervals = by_unit.get(item.id, [])
        apply_overrides(item.availability, project(dates, intervals, cfg.status_booked))
        items.append(item)
    return items


class UniversalAdapter:
    """Generic mapping adapter. With wix_functions=True, source is a Wix site and the URL is its HTTP function."""

    def __init__(
        self,
        *,
        adapter_id: str = "generic",
        wix_functions: bool = False,
        client: UpstreamClient | None = None,
    ) -> None:
        self.adapter_id = adapter_id
        self._wix_functions = wix_functions
        self._client = client or default_client

    def _url(self, cfg: AdapterSettings) -> str:
        source = (cfg.source or "").strip()
        if self._wix_functions:
            return f"{source.rstrip('/')}/_functions/{cfg.wix_fn}"
        return source

    def _params(self, start_date: str, end_date: str, cfg: AdapterSettings) -> dict[str, Any]:
        """Tenant passthrough extras as query parameters; start/end always win."""
        params = {k: v for k, v in cfg.extras.items() if isinstance(v, _QUERY_SCALARS)}
        params["start"] = start_date
        params["end"] = end_date
        return params

    async def fetch_availability(self, start_date: str, end_date: str, tenant: TenantConfig) -> GridResponse:
        cfg = parse_adapter_settings(tenant.settings)
        if not cfg.source:
            raise IntegrationError("Adapter requires 'source' parameter")
        dates = generate_date_range(start_date, end_date)
        url = self._url(cfg)
        params = self._params(*calendar_bounds(start_date, end_date), cfg)
        headers = bearer_headers(cfg.api_key) if cfg.api_key else None
        try:
            payload = await self._client.get_json(url, params=params, headers=headers)
        except HttpError as e:
            logger.warning("[%s] Error fetching %s for tenant %s: %s", self.adapter_id, url, tenant.tenant_id, e)
            raise IntegrationError(f"Integration Error: {e}", detail=e.body) from e
        items = normalize_payload(payload, dates, cfg)
        return GridResponse(dates=dates, items=items, metadata=cfg.response_metadata())
