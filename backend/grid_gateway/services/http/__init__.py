from grid_gateway.services.http.client import UpstreamClient, bearer_headers, default_client

__all__ = ["UpstreamClient", "bearer_headers", "default_client"]
