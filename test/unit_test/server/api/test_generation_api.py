"""API tests for templated content generation."""

import pytest
from httpx import AsyncClient

from buzzhub.core.database.entities import User

pytestmark = pytest.mark.asyncio

REQUEST = {"category": "Technology", "post_count": 3, "cohere_api_key": "key", "keywords": ["AI", "Cloud"]}


async def test_generates_draft_posts(client: AsyncClient, storage):
    response = await client.post("http://localhost/api/generate-content", json=REQUEST)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["posts_generated"] == 3
    for post in body["posts"]:
        assert post["status"] == "draft"
        assert post["category"] == "Technology"
        assert post["tags"] == ["AI", "Cloud"]
        assert "Technology" in post["title"]
        assert post["author_id"] is None
    assert len({post["slug"] for post in body["posts"]}) == 3
    assert len(await storage.get_posts(limit=None)) == 3


async def test_drafts_are_attributed_to_the_system_author(client: AsyncClient, storage):
    admin = await storage.create_user(
        User(username="admin", email="admin@buzzhub.com", password="admin123", role="admin")
    )

    response = await client.post("http://localhost/api/generate-content", json={**REQUEST, "post_count": 2})

    assert response.status_code == 200
    assert [post["author_id"] for post in response.json()["posts"]] == [admin.id, admin.id]


async def test_category_is_the_fallback_tag(client: AsyncClient):
    response = await client.post(
        "http://localhost/api/generate-content", json={**REQUEST, "post_count": 1, "keywords": []}
    )
    assert response.json()["posts"][0]["tags"] == ["Technology"]


async def test_batch_is_capped(client: AsyncClient):
    response = await client.post("http://localhost/api/generate-content", json={**REQUEST, "post_count": 45})
    assert response.json()["posts_generated"] == 30


@pytest.mark.parametrize("missing", ["category", "post_count", "cohere_api_key"])
async def test_missing_parameters(client: AsyncClient, storage, missing):
    payload = {key: value for key, value in REQUEST.items() if key != missing}

    response = await client.post("http://localhost/api/generate-content", json=payload)

    assert response.status_code == 400
    assert response.json() == {"detail": "Missing required parameters"}
    assert await storage.get_posts() == []


async def test_zero_posts_is_missing(client: AsyncClient):
    response = await client.post("http://localhost/api/generate-content", json={**REQUEST, "post_count": 0})
    assert response.status_code == 400
