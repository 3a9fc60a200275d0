"""Protocol for provider adapters. All adapters return the same grid wire shape."""
from typing import Any, Protocol

from grid_gateway.services.tenants.store import TenantConfig


class GridResult(Protocol):
    """GridResponse, or an upstream body already in grid format."""

    def to_dict(self) -> dict[str, Any]:
        ...


class GridAdapter(Protocol):
    """Interface for Booqable, Wix, custom REST, etc. Same contract; only fetch and field names differ."""

    adapter_id: str

    async def fetch_availability(
        self,
        start_date: str,
        end_date: str,
        tenant: TenantConfig,
    ) -> GridResult:
        """
        Fetch the tenant's provider data for [start_date, end_date] and normalize it.
        Adapter instances are shared across requests and must keep no per-request state.
        """
        ...
