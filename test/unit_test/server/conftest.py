from typing import AsyncGenerator, Optional
from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from buzzhub.core.database.entities import Setting
from buzzhub.core.storage import MemStorage
from buzzhub.youtube.client import YouTubeApiClient


@pytest.fixture(name="storage")
def storage_fixture() -> MemStorage:
    """Fresh in-memory storage per test."""
    return MemStorage()


@pytest.fixture(name="youtube_client")
def youtube_client_fixture() -> Optional[YouTubeApiClient]:
    """No YouTube API key by default; tests override this fixture to inject a client."""
    return None


@pytest_asyncio.fixture(name="client")
async def client_fixture(storage: MemStorage, youtube_client) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from buzzhub.server.main import app
    from buzzhub.server.services.deps import get_storage, get_youtube_client

    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_youtube_client] = lambda: youtube_client

    # Mock the lifespan to prevent storage initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("buzzhub.server.main.lifespan", mock_lifespan):
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://localhost"
        ) as client:
            yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="default_settings")
async def default_settings_fixture(storage: MemStorage) -> MemStorage:
    """Storage holding the comment settings a fresh install starts with."""
    await storage.create_setting(Setting(key="enable_comments", value="true", category="content"))
    await storage.create_setting(Setting(key="auto_approve_comments", value="false", category="content"))
    return storage
