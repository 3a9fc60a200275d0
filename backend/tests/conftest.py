"""Pytest configuration and fixtures for the grid gateway tests.

This module provides reusable fixtures for testing:
- anyio backend for async adapter tests
- Tenant config factory
- Sample provider payloads (generic REST, Booqable JSON:API)
"""

import os
from typing import Any, Callable

import pytest

# === Environment Setup ===

# Keep process defaults out of GridResponse.metadata unless a test sets them
os.environ.setdefault("DEFAULT_CURRENCY", "")
os.environ.setdefault("DEFAULT_TIMEZONE", "")
os.environ.setdefault("TENANTS_FILE", "")

from grid_gateway.services.tenants.store import TenantConfig  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def make_tenant() -> Callable[..., TenantConfig]:
    """Factory for TenantConfig with a given provider and settings."""

    def _make(provider: str = "generic", settings: dict[str, Any] | None = None, tenant_id: str = "t1") -> TenantConfig:
        return TenantConfig(tenant_id=tenant_id, provider=provider, settings=settings or {})

    return _make


# === Sample Payloads ===


@pytest.fixture
def generic_payload() -> dict[str, Any]:
    """Generic REST payload: units plus a global bookings list."""
    return {
        "units": [
            {"id": 1, "title": "Cabin A", "photo": "https://img.example/a.jpg", "price": "120", "link": "/a"},
            {"_id": "b", "name": "Cabin B", "cost": 80},
        ],
        "bookings": [
            {"unitId": "1", "start": "2024-01-01", "end": "2024-01-03"},
            {"unitId": "b", "start": "2024-01-02", "status": "CONFIRMED"},
            {"unitId": "b", "start": "2024-01-03", "status": "cancelled"},
            {"unitId": "ghost", "start": "2024-01-01", "end": "2024-01-04"},
        ],
    }


@pytest.fixture
def booqable_bundles() -> dict[str, Any]:
    """Booqable /api/4/bundles body (JSON:API, one flat legacy resource)."""
    return {
        "data": [
            {
                "id": "b-1",
                "type": "bundles",
                "attributes": {
                    "name": "Kayak Set",
                    "slug": "kayak-set",
                    "photo_url": "https://cdn.example/kayak.jpg",
                    "base_price_in_cents": 2500,
                    "show_in_store": True,
                },
            },
            {
                "id": "b-2",
                "type": "bundles",
                "attributes": {"name": "Hidden", "show_in_store": False, "base_price_in_cents": 1000},
            },
            {
                "id": "b-3",
                "type": "bundles",
                "attributes": {"name": "Old", "archived": True},
            },
            {"id": 4, "name": "Flat Bundle", "price_in_cents": 1999},
        ]
    }


@pytest.fixture
def booqable_plannings() -> dict[str, Any]:
    """Booqable /api/4/plannings body: one via attributes.item_id, one via relationships."""
    return {
        "data": [
            {
                "id": "p-1",
                "attributes": {
                    "item_id": "b-1",
                    "starts_at": "2024-03-02T00:00:00Z",
                    "stops_at": "2024-03-04T00:00:00Z",
                },
            },
            {
                "id": "p-2",
                "attributes": {"starts_at": "2024-03-01T00:00:00Z", "stops_at": "2024-03-02T00:00:00Z"},
                "relationships": {"item": {"data": {"id": "4", "type": "bundles"}}},
            },
        ]
    }
