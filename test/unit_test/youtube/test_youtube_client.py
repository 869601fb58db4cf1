"""Unit tests for the YouTube Data API client."""

from __future__ import annotations

import httpx
import pytest

from buzzhub.core.errors import YouTubeApiError
from buzzhub.core.logging_config import get_logger
from buzzhub.youtube.client import YouTubeApiClient

BASE_URL = "http://mock/youtube/v3"


def _client(handler) -> YouTubeApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YouTubeApiClient("test-key", base_url=BASE_URL, client=http)


@pytest.mark.asyncio
async def test_get_video_snippet_parses_first_item():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        return httpx.Response(
            200,
            json={
                "items": [
                    {
                        "id": "abc123",
                        "snippet": {
                            "title": "Epic Yarn Ball",
                            "channelTitle": "Cats Daily",
                            "thumbnails": {
                                "default": {"url": "http://img/default.jpg"},
                                "medium": {"url": "http://img/medium.jpg"},
                            },
                        },
                    }
                ]
            },
        )

    client = _client(handler)
    snippet = await client.get_video_snippet("abc123")

    assert snippet.title == "Epic Yarn Ball"
    assert snippet.channel_title == "Cats Daily"
    assert snippet.thumbnail == "http://img/medium.jpg"
    assert seen["url"].path == "/youtube/v3/videos"
    assert dict(seen["url"].params) == {"part": "snippet", "id": "abc123", "key": "test-key"}


@pytest.mark.asyncio
async def test_unknown_video_returns_none():
    client = _client(lambda request: httpx.Response(200, json={"items": []}))
    assert await client.get_video_snippet("missing") is None


@pytest.mark.asyncio
async def test_item_without_title_returns_none():
    client = _client(lambda request: httpx.Response(200, json={"items": [{"snippet": {}}]}))
    assert await client.get_video_snippet("x") is None


@pytest.mark.asyncio
async def test_http_error_is_wrapped():
    client = _client(lambda request: httpx.Response(403, json={"error": {"message": "quotaExceeded"}}))

    with pytest.raises(YouTubeApiError) as exc_info:
        await client.get_video_snippet("abc123")

    assert exc_info.value.status_code == 403
    assert "quotaExceeded" in exc_info.value.details


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)

    with pytest.raises(YouTubeApiError) as exc_info:
        await client.get_video_snippet("abc123")

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_aclose_leaves_injected_client_open():
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))
    client = YouTubeApiClient("k", base_url=BASE_URL, client=http)

    await client.aclose()

    assert http.is_closed is False
    await http.aclose()


def test_logs_through_the_module_logger():
    client = _client(lambda request: httpx.Response(200, json={}))
    assert client._logger is get_logger("buzzhub.youtube.client")


@pytest.mark.asyncio
async def test_non_json_body_is_wrapped():
    client = _client(lambda request: httpx.Response(200, text="<html>captive portal</html>"))

    with pytest.raises(YouTubeApiError, match="invalid response") as exc_info:
        await client.get_video_snippet("abc123")

    assert exc_info.value.details == "<html>captive portal</html>"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"items": ["abc123"]},
        {"items": {"id": "abc123"}},
        {"items": [{"snippet": "Epic Yarn Ball"}]},
        {"items": [{"snippet": {"title": ["Epic", "Yarn"]}}]},
    ],
)
async def test_malformed_listing_is_wrapped(body):
    client = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(YouTubeApiError, match="invalid response"):
        await client.get_video_snippet("abc123")
