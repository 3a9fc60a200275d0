"""
Provider adapters: Booqable, Wix, generic REST, passthrough, mock.
Each adapter fetches data in its own way but returns the same grid shape
so the calendar front-end stays provider-agnostic.
"""
from grid_gateway.services.adapters.base import GridAdapter, GridResult
from grid_gateway.services.adapters.registry import get_adapter, list_adapters
from grid_gateway.services.adapters.settings import AdapterSettings, parse_adapter_settings

__all__ = [
    "AdapterSettings",
    "GridAdapter",
    "GridResult",
    "get_adapter",
    "list_adapters",
    "parse_adapter_settings",
]
