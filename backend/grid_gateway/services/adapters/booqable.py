"""
Booqable adapter. Fetches bundles and plannings (bookings) from Booqable API v4.

Booqable uses JSON:API:
  body["data"] = list of resource objects
  each object: { id, type, attributes: { name, photo_url, base_price_in_cents, ... } }
Older responses are flat (fields on the resource itself), so attributes fall back to the resource.
"""
import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

from grid_gateway.core.constants import (
    BOOQABLE_BUNDLES_PAGE_SIZE,
    BOOQABLE_PLANNINGS_PAGE_SIZE,
    UNNAMED_BUNDLE,
)
from grid_gateway.core.errors import HttpError, IntegrationError
from grid_gateway.services.adapters.settings import parse_adapter_settings
from grid_gateway.services.grid.dates import calendar_bounds, generate_date_range
from grid_gateway.services.grid.fields import coerce_price, coerce_text, resolve
from grid_gateway.services.grid.projection import apply_overrides, baseline, build_interval, group_by_unit, project
from grid_gateway.services.grid.types import BookingInterval, GridItem, GridResponse
from grid_gateway.services.http.client import UpstreamClient, bearer_headers, default_client
from grid_gateway.services.tenants.store import TenantConfig

logger = logging.getLogger(__name__)


def _attributes(resource: Any) -> dict[str, Any]:
    if not isinstance(resource, Mapping):
        return {}
    attrs = resource.get("attributes")
    return attrs if isinstance(attrs, Mapping) else resource


def _data_list(body: Any, *fallback_keys: str) -> list[Any]:
    if not isinstance(body, Mapping):
        return []
    for key in ("data", *fallback_keys):
        value = body.get(key)
        if isinstance(value, list):
            return value
    return []


def is_visible(resource: Any) -> bool:
    """Shown in the storefront unless show_in_store is explicitly false or the bundle is archived."""
    attrs = _attributes(resource)
    return attrs.get("show_in_store") is not False and not attrs.get("archived")


def base_price(attrs: Mapping[str, Any]) -> float:
    """Decimal price from cents; base_price_in_cents first, then price_in_cents, else 0."""
    cents = attrs.get("base_price_in_cents")
    if cents is None:
        cents = attrs.get("price_in_cents")
    return coerce_price(cents) / 100


def _planning_item_id(planning: Any) -> Any:
    attrs = _attributes(planning)
    item_id = attrs.get("item_id")
    if not item_id:
        item_id = resolve(planning, "relationships.item.data.id")
    return item_id


def planning_intervals(raw_plannings: list[Any]) -> dict[str, list[BookingInterval]]:
    """Plannings keyed by the bundle/product id they reserve. Every planning books (no status filter)."""
    intervals: list[BookingInterval] = []
    for planning in raw_plannings:
        item_id = _planning_item_id(planning)
        if item_id is None:
            continue
        attrs = _attributes(planning)
        interval = build_interval(item_id, attrs.get("starts_at"), attrs.get("stops_at"))
        if interval is not None:
            intervals.append(interval)
    return group_by_unit(intervals)


def normalize_bundles(
    bundles_body: Any,
    plannings_body: Any,
    dates: list[str],
    base_url: str,
) -> list[GridItem]:
    """Visible bundles as grid items, booked where a planning covers the date."""
    by_item = planning_intervals(_data_list(plannings_body, "plannings"))
    items: list[GridItem] = []
    for index, resource in enumerate(_data_list(bundles_body)):
        if not isinstance(resource, Mapping) or not is_visible(resource):
            continue
        attrs = _attributes(resource)
        raw_id = resource.get("id")
        bundle_id = str(raw_id) if raw_id is not None else f"bundle-{index}"
        slug = coerce_text(attrs.get("slug"))
        item = GridItem(
            id=bundle_id,
            name=coerce_text(attrs.get("name")) or UNNAMED_BUNDLE,
            image=coerce_text(attrs.get("photo_url")),
            # Bundle slug gives the storefront product page
            url=f"{base_url}/products/{slug}" if slug else None,
            availability=baseline(dates, base_price(attrs)),
            metadata={**attrs, "id": bundle_id},
        )
        apply_overrides(item.availability, project(dates, by_item.get(bundle_id, [])))
        items.append(item)
    return items


class BooqableAdapter:
    adapter_id = "booqable"

    def __init__(self, *, client: UpstreamClient | None = None) -> None:
        self._client = client or default_client

    async def fetch_availability(self, start_date: str, end_date: str, tenant: TenantConfig) -> GridResponse:
        cfg = parse_adapter_settings(tenant.settings)
        if not cfg.source:
            raise IntegrationError("Booqable adapter requires 'source' (e.g., https://yourcompany.booqable.com)")
        if not cfg.api_key:
            raise IntegrationError("Booqable adapter requires 'apiKey'")
        dates = generate_date_range(start_date, end_date)
        first_day, last_day = calendar_bounds(start_date, end_date)
        base_url = cfg.source.rstrip("/")
        headers = bearer_headers(cfg.api_key)

        # Plannings are filtered only by window; matching to bundles happens in memory
        # (strict filters like item_type get 400s from Booqable).
        bundles_req = self._client.get_json(
            f"{base_url}/api/4/bundles",
            params={"page[size]": BOOQABLE_BUNDLES_PAGE_SIZE},
            headers=headers,
        )
        plannings_req = self._client.get_json(
            f"{base_url}/api/4/plannings",
            params={
                "filter[starts_at][lte]": f"{last_day}T23:59:59Z",
                "filter[stops_at][gte]": f"{first_day}T00:00:00Z",
                "page[size]": BOOQABLE_PLANNINGS_PAGE_SIZE,
            },
            headers=headers,
        )
        results = await asyncio.gather(bundles_req, plannings_req, return_exceptions=True)
        for result in results:
            if isinstance(result, HttpError):
                raise self._integration_error(result, tenant) from result
            if isinstance(result, BaseException):
                raise result
        bundles_body, plannings_body = results

        items = normalize_bundles(bundles_body, plannings_body, dates, base_url)
        return GridResponse(dates=dates, items=items, metadata=cfg.response_metadata())

    @staticmethod
    def _integration_error(e: HttpError, tenant: TenantConfig) -> IntegrationError:
        """Upstream body goes in the message when Booqable sent one, so the operator sees the API complaint."""
        if e.body:
            detail = e.body if isinstance(e.body, str) else json.dumps(e.body)
            logger.warning("[BooqableAdapter] API error for tenant %s: %s", tenant.tenant_id, detail)
            return IntegrationError(f"Booqable API Error: {detail}", detail=e.body)
        logger.warning("[BooqableAdapter] Integration error for tenant %s: %s", tenant.tenant_id, e)
        return IntegrationError(f"Booqable Integration Error: {e}")
