"""Registry of provider adapters. Add new adapters here."""
import logging

from grid_gateway.core.errors import UnknownProviderError
from grid_gateway.services.adapters.base import GridAdapter

logger = logging.getLogger(__name__)

# Singletons: adapters hold no per-request state, so one instance serves every tenant
_adapters: dict[str, GridAdapter] = {}


def register(name: str, adapter: GridAdapter) -> None:
    """Register an adapter under a provider id (e.g. 'booqable', 'wix')."""
    _adapters[name] = adapter
    logger.info("Registered grid adapter: %s -> %s", name, type(adapter).__name__)


def get_adapter(name: str) -> GridAdapter:
    """Adapter for a provider id. Raises UnknownProviderError if unknown."""
    if name not in _adapters:
        raise UnknownProviderError(f"Unknown provider: {name}. Available: {list(_adapters.keys())}")
    return _adapters[name]


def list_adapters() -> list[str]:
    """List registered provider ids."""
    return list(_adapters.keys())


def _init_registry() -> None:
    from grid_gateway.services.adapters.booqable import BooqableAdapter
    from grid_gateway.services.adapters.mock import MockAdapter
    from grid_gateway.services.adapters.passthrough import PassThroughAdapter
    from grid_gateway.services.adapters.universal import UniversalAdapter

    passthrough = PassThroughAdapter()
    register("mock", MockAdapter())
    register("wix", UniversalAdapter(adapter_id="wix", wix_functions=True))
    # Any other REST API goes through the same universal mapping
    register("generic", UniversalAdapter())
    register("booqable", BooqableAdapter())
    # These recommend an external endpoint that already speaks the grid format
    register("wordpress", passthrough)
    register("custom", passthrough)


# Register built-in adapters on first import
_init_registry()
