"""Tests for the upstream HTTP client."""

import json

import httpx
import pytest
import respx

from grid_gateway.core.errors import HttpError
from grid_gateway.services.http.client import UpstreamClient, bearer_headers

URL = "https://upstream.example/resource"


@pytest.fixture
def client() -> UpstreamClient:
    return UpstreamClient(timeout=2)


def test_bearer_headers() -> None:
    assert bearer_headers("t") == {"Authorization": "Bearer t", "Accept": "application/json"}


class TestUpstreamClient:
    """GET/POST/PUT decoding and error mapping."""

    @pytest.mark.anyio
    async def test_get_json(self, client: UpstreamClient) -> None:
        with respx.mock() as router:
            route = router.get(URL).mock(return_value=httpx.Response(200, json={"ok": True}))
            body = await client.get_json(URL, params={"a": "1"}, headers={"X-Key": "k"})
        assert body == {"ok": True}
        request = route.calls.last.request
        assert request.url.params["a"] == "1"
        assert request.headers["X-Key"] == "k"

    @pytest.mark.anyio
    async def test_post_and_put_send_json(self, client: UpstreamClient) -> None:
        with respx.mock() as router:
            post = router.post(URL).mock(return_value=httpx.Response(201, json={"id": 1}))
            put = router.put(URL).mock(return_value=httpx.Response(200, json={"id": 1, "v": 2}))
            assert await client.post_json(URL, {"name": "x"}) == {"id": 1}
            assert await client.put_json(URL, {"v": 2}) == {"id": 1, "v": 2}
        assert json.loads(post.calls.last.request.content) == {"name": "x"}
        assert json.loads(put.calls.last.request.content) == {"v": 2}

    @pytest.mark.anyio
    async def test_empty_body_is_empty_dict(self, client: UpstreamClient) -> None:
        with respx.mock() as router:
            router.get(URL).mock(return_value=httpx.Response(204))
            assert await client.get_json(URL) == {}

    @pytest.mark.anyio
    async def test_non_json_body_is_text(self, client: UpstreamClient) -> None:
        with respx.mock() as router:
            router.get(URL).mock(return_value=httpx.Response(200, text="plain"))
            assert await client.get_json(URL) == "plain"

    @pytest.mark.anyio
    async def test_non_2xx_raises_with_status_and_body(self, client: UpstreamClient) -> None:
        with respx.mock() as router:
            router.get(URL).mock(return_value=httpx.Response(404, json={"error": "missing"}))
            with pytest.raises(HttpError) as exc_info:
                await client.get_json(URL)
        assert exc_info.value.status_code == 404
        assert exc_info.value.body == {"error": "missing"}

    @pytest.mark.anyio
    async def test_long_error_text_truncated(self, client: UpstreamClient) -> None:
        with respx.mock() as router:
            router.get(URL).mock(return_value=httpx.Response(500, text="x" * 5000))
            with pytest.raises(HttpError) as exc_info:
                await client.get_json(URL)
        assert len(exc_info.value.body) == 2000

    @pytest.mark.anyio
    async def test_timeout(self, client: UpstreamClient) -> None:
        with respx.mock() as router:
            router.get(URL).mock(side_effect=httpx.ReadTimeout("slow"))
            with pytest.raises(HttpError, match="timed out") as exc_info:
                await client.get_json(URL)
        assert exc_info.value.status_code is None

    @pytest.mark.anyio
    async def test_transport_error(self, client: UpstreamClient) -> None:
        with respx.mock() as router:
            router.get(URL).mock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(HttpError, match="Upstream request failed"):
                await client.get_json(URL)
