"""
Availability: tenant -> adapter -> normalized grid.

One fetch-and-normalize pass per call. Any failure aborts the whole call;
there are no partial item lists.
"""
import logging
from typing import Any

from grid_gateway.services.adapters.registry import get_adapter
from grid_gateway.services.grid.dates import parse_calendar_date
from grid_gateway.services.tenants.store import get_tenant_config

logger = logging.getLogger(__name__)


async def fetch_availability(tenant_id: str, start: str, end: str) -> dict[str, Any]:
    """
    Grid for tenant_id over [start, end] as a wire dict.
    Raises TenantNotFoundError, UnknownProviderError, InvalidDateError, MappingError or IntegrationError.
    """
    config = get_tenant_config(tenant_id)
    adapter = get_adapter(config.provider)
    # Reject unparseable input before touching the provider
    parse_calendar_date(start)
    parse_calendar_date(end)
    result = await adapter.fetch_availability(start, end, config)
    data = result.to_dict()
    logger.debug(
        "Tenant %s via %s: %d item(s) over %d date(s)",
        tenant_id,
        adapter.adapter_id,
        len(data.get("items") or []),
        len(data.get("dates") or []),
    )
    return data
