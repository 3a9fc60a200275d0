from grid_gateway.services.tenants.store import (
    TenantConfig,
    get_tenant_config,
    list_tenants,
    load_tenants_file,
    register_tenant,
)

__all__ = ["TenantConfig", "get_tenant_config", "list_tenants", "load_tenants_file", "register_tenant"]
