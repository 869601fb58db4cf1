"""API tests for comments."""

import pytest
from httpx import AsyncClient

from buzzhub.core.database.entities import Post

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def post(storage) -> Post:
    return await storage.create_post(
        Post(title="Commented", slug="commented", content="<p>Body</p>", category="Technology", status="published")
    )


async def comment_on(client: AsyncClient, post_id: int, **fields):
    return await client.post("http://localhost/api/comments", json={"content": "Nice post!", "post_id": post_id, **fields})


async def test_comment_follows_auto_approve_setting(client: AsyncClient, storage, default_settings, post):
    response = await comment_on(client, post.id)

    assert response.status_code == 201
    comment = response.json()
    assert comment["is_approved"] is False
    assert comment["is_spam"] is False
    assert (await storage.get_post(post.id)).comments == 1

    await storage.update_setting("auto_approve_comments", "true")
    assert (await comment_on(client, post.id)).json()["is_approved"] is True
    assert (await storage.get_post(post.id)).comments == 2


async def test_explicit_approval_wins(client: AsyncClient, default_settings, post):
    response = await comment_on(client, post.id, is_approved=True)
    assert response.json()["is_approved"] is True


async def test_comments_allowed_without_settings(client: AsyncClient, post):
    response = await comment_on(client, post.id)

    assert response.status_code == 201
    assert response.json()["is_approved"] is False


async def test_disabled_comments_are_rejected(client: AsyncClient, storage, default_settings, post):
    await storage.update_setting("enable_comments", "false")

    response = await comment_on(client, post.id)

    assert response.status_code == 403
    assert response.json() == {"detail": "Comments are disabled"}
    assert (await storage.get_post(post.id)).comments == 0


async def test_comment_on_missing_post(client: AsyncClient, default_settings):
    response = await comment_on(client, 999)

    assert response.status_code == 404
    assert response.json() == {"detail": "Post not found"}


async def test_empty_comment_is_invalid(client: AsyncClient, post):
    assert (await comment_on(client, post.id, content="")).status_code == 422


async def test_list_comments_oldest_first(client: AsyncClient, default_settings, post):
    for text in ("first", "second"):
        await comment_on(client, post.id, content=text)

    response = await client.get(f"http://localhost/api/posts/{post.id}/comments")

    assert response.status_code == 200
    assert [comment["content"] for comment in response.json()] == ["first", "second"]
    assert (await client.get("http://localhost/api/posts/999/comments")).json() == []


async def test_moderate_and_delete(client: AsyncClient, storage, default_settings, post):
    comment = (await comment_on(client, post.id)).json()

    moderated = await client.put(
        f"http://localhost/api/comments/{comment['id']}", json={"is_approved": True, "is_spam": True}
    )
    assert moderated.status_code == 200
    assert (moderated.json()["is_approved"], moderated.json()["is_spam"]) == (True, True)
    assert moderated.json()["content"] == "Nice post!"

    assert (await client.delete(f"http://localhost/api/comments/{comment['id']}")).status_code == 204
    assert (await client.get(f"http://localhost/api/posts/{post.id}/comments")).json() == []
    # the post counter is not decremented
    assert (await storage.get_post(post.id)).comments == 1


async def test_missing_comment(client: AsyncClient):
    updated = await client.put("http://localhost/api/comments/5", json={"is_spam": True})
    assert (updated.status_code, updated.json()) == (404, {"detail": "Comment not found"})

    deleted = await client.delete("http://localhost/api/comments/5")
    assert (deleted.status_code, deleted.json()) == (404, {"detail": "Comment not found"})


@pytest.mark.parametrize("field", ["content", "is_approved", "is_spam", "reactions"])
async def test_null_for_required_comment_field_is_rejected(client: AsyncClient, default_settings, post, field):
    comment = (await comment_on(client, post.id)).json()

    response = await client.put(f"http://localhost/api/comments/{comment['id']}", json={field: None})

    assert response.status_code == 422
    listed = (await client.get(f"http://localhost/api/posts/{post.id}/comments")).json()
    assert listed == [comment]
