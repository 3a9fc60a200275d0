"""Upstream HTTP client: lowest level, sends the request and decodes JSON. No provider knowledge."""
import logging
from typing import Any

import httpx

from grid_gateway.config import settings
from grid_gateway.core.constants import UPSTREAM_TEXT_LIMIT
from grid_gateway.core.errors import HttpError

logger = logging.getLogger(__name__)


def bearer_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}", "Accept": "application/json"}


def _decode_body(r: httpx.Response) -> Any:
    """JSON body when the upstream sent JSON, else truncated text. Empty body decodes to {}."""
    if not r.content:
        return {}
    try:
        return r.json()
    except ValueError:
        return r.text[:UPSTREAM_TEXT_LIMIT]


class UpstreamClient:
    """GET/POST/PUT returning decoded JSON. Raises HttpError on non-2xx, timeouts and transport errors."""

    def __init__(self, *, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self._transport = transport

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as c:
                r = await c.request(method, url, params=params, json=json_body, headers=headers)
        except httpx.TimeoutException as e:
            raise HttpError(f"Upstream timed out after {self._timeout}s: {url}") from e
        except httpx.HTTPError as e:
            raise HttpError(f"Upstream request failed: {str(e) or type(e).__name__}") from e
        body = _decode_body(r)
        if not r.is_success:
            logger.warning("%s %s -> HTTP %s", method, url, r.status_code)
            raise HttpError(f"Upstream error: HTTP {r.status_code}", status_code=r.status_code, body=body)
        return body

    async def get_json(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._request("GET", url, params=params, headers=headers)

    async def post_json(self, url: str, body: Any, *, headers: dict[str, str] | None = None) -> Any:
        return await self._request("POST", url, json_body=body, headers=headers)

    async def put_json(self, url: str, body: Any, *, headers: dict[str, str] | None = None) -> Any:
        return await self._request("PUT", url, json_body=body, headers=headers)


default_client = UpstreamClient()
