"""
Tenant configuration store: tenant id -> provider + settings.

Built-in tenants live here; more can be merged from a JSON file (TENANTS_FILE).
The settings mapping is handed to the adapter verbatim.
"""
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from grid_gateway.config import settings
from grid_gateway.core.errors import TenantNotFoundError

logger = logging.getLogger(__name__)


class TenantConfig(BaseModel):
    tenant_id: str
    provider: str
    settings: dict[str, Any] = Field(default_factory=dict)


_tenants: dict[str, TenantConfig] = {}


def register_tenant(config: TenantConfig) -> None:
    _tenants[config.tenant_id] = config


def get_tenant_config(tenant_id: str) -> TenantConfig:
    """Config for tenant_id. Raises TenantNotFoundError if unknown."""
    cfg = _tenants.get(tenant_id)
    if cfg is None:
        raise TenantNotFoundError(f"Tenant not found: {tenant_id}")
    return cfg


def list_tenants() -> list[str]:
    return list(_tenants.keys())


def load_tenants_file(path: str | Path) -> int:
    """
    Merge tenants from a JSON object {tenant_id: {"provider": ..., "settings": {...}}}.
    Later definitions replace earlier ones. Returns how many were loaded.
    """
    p = Path(path)
    raw = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Tenants file must hold a JSON object: {p}")
    loaded = 0
    for tenant_id, entry in raw.items():
        try:
            register_tenant(TenantConfig(tenant_id=tenant_id, **(entry or {})))
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid tenant {tenant_id!r} in {p}: {e}") from e
        loaded += 1
    logger.info("Loaded %d tenant(s) from %s", loaded, p)
    return loaded


def _init_store() -> None:
    register_tenant(TenantConfig(tenant_id="demo", provider="mock"))
    # Wix tenant: tokens, siteId, serviceId mapping, etc. go in settings
    register_tenant(TenantConfig(tenant_id="wix_demo", provider="wix"))
    register_tenant(
        TenantConfig(
            tenant_id="wix_prod",
            provider="custom",
            settings={
                "baseUrl": "https://YOUR-WIX-DOMAIN.com",
                "availabilityEndpoint": "/_functions/calendarGrid",
            },
        )
    )
    # Custom backend that already speaks the grid format
    register_tenant(
        TenantConfig(
            tenant_id="partner1",
            provider="custom",
            settings={
                "baseUrl": "https://partner1.com/api",
                "availabilityEndpoint": "/availability",
            },
        )
    )
    if settings.tenants_file:
        load_tenants_file(settings.tenants_file)


_init_store()
