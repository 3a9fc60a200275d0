"""
Passthrough adapter: the tenant's endpoint already returns the grid format.

Simplest way for third-party developers to integrate. The body is checked for the
grid shape and forwarded as-is; no field mapping happens here.
"""
import logging
from collections.abc import Mapping
from typing import Any

from grid_gateway.core.errors import HttpError, IntegrationError, MappingError
from grid_gateway.services.adapters.settings import parse_adapter_settings
from grid_gateway.services.grid.dates import calendar_bounds
from grid_gateway.services.http.client import UpstreamClient, default_client
from grid_gateway.services.tenants.store import TenantConfig

logger = logging.getLogger(__name__)


class GridPayload:
    """Upstream body that already is a GridResponse; to_dict returns it untouched."""

    __slots__ = ("body",)

    def __init__(self, body: dict[str, Any]):
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        return self.body


def check_grid_shape(body: Any, url: str) -> dict[str, Any]:
    if not isinstance(body, Mapping):
        raise MappingError(f"Endpoint {url} did not return a grid object.")
    if not isinstance(body.get("dates"), list) or not isinstance(body.get("items"), list):
        raise MappingError(f"Endpoint {url} response is missing 'dates' or 'items' lists.")
    return dict(body)


class PassThroughAdapter:
    adapter_id = "passthrough"

    def __init__(self, *, client: UpstreamClient | None = None) -> None:
        self._client = client or default_client

    async def fetch_availability(self, start_date: str, end_date: str, tenant: TenantConfig) -> GridPayload:
        cfg = parse_adapter_settings(tenant.settings)
        if not cfg.base_url or not cfg.availability_endpoint:
            raise IntegrationError("PassThroughAdapter requires 'baseUrl' and 'availabilityEndpoint' in settings")
        # Same date validation as the mapping adapters, so bad input fails before the upstream call
        first_day, last_day = calendar_bounds(start_date, end_date)
        url = f"{cfg.base_url}{cfg.availability_endpoint}"
        try:
            body = await self._client.get_json(
                url,
                params={"tenantId": tenant.tenant_id, "start": first_day, "end": last_day},
            )
        except HttpError as e:
            logger.warning("Error in PassThroughAdapter calling %s: %s", url, e)
            raise IntegrationError(
                f"Failed to fetch availability from external service: {e}", detail=e.body
            ) from e
        return GridPayload(check_grid_shape(body, url))
