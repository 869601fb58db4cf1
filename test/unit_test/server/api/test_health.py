import pytest
from httpx import AsyncClient

from buzzhub import __version__

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("http://localhost/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(client: AsyncClient):
    response = await client.get("http://localhost/version")
    assert response.status_code == 200
    assert response.json() == {"version": __version__, "schema_version": "v1"}


async def test_openapi_is_served_under_api_prefix(client: AsyncClient):
    response = await client.get("http://localhost/api/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/posts" in paths
    assert "/api/youtube/{video_id}/title" in paths
    assert "/health" in paths


async def test_process_time_header(client: AsyncClient):
    response = await client.get("http://localhost/health")
    assert float(response.headers["X-Process-Time"]) >= 0
