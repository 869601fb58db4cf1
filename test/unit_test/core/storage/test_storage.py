"""Behavioural tests shared by every storage backend.

Each test runs against ``MemStorage`` and ``SqlStorage`` (SQLite) through the
parametrized ``storage`` fixture.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from buzzhub.core.database.base import utc_now
from buzzhub.core.database.entities import (
    Analytics,
    Category,
    Comment,
    Post,
    Reaction,
    SavedPost,
    Setting,
    User,
    YoutubeCache,
)
from buzzhub.core.storage import MONTHLY_GROWTH

pytestmark = pytest.mark.asyncio


def make_post(slug: str, **fields) -> Post:
    defaults = {"title": slug.replace("-", " ").title(), "content": "<p>Body</p>", "category": "Technology"}
    defaults.update(fields)
    return Post(slug=slug, **defaults)


def make_user(username: str, **fields) -> User:
    defaults = {"email": f"{username}@example.com", "password": "secret"}
    defaults.update(fields)
    return User(username=username, **defaults)


class TestUsers:
    """User persistence."""

    async def test_ids_start_at_one_and_increment(self, storage):
        first = await storage.create_user(make_user("alice"))
        second = await storage.create_user(make_user("bob"))
        assert (first.id, second.id) == (1, 2)

    async def test_lookup_by_username_and_email(self, storage):
        await storage.create_user(make_user("alice"))

        assert (await storage.get_user_by_username("alice")).email == "alice@example.com"
        assert (await storage.get_user_by_email("alice@example.com")).username == "alice"
        assert await storage.get_user_by_username("nobody") is None
        assert await storage.get_user(99) is None

    async def test_update_user_bumps_updated_at(self, storage):
        user = await storage.create_user(make_user("alice"))
        before = user.updated_at

        updated = await storage.update_user(user.id, {"working_score": 50, "id": 42})

        assert updated.id == user.id
        assert updated.working_score == 50
        assert updated.updated_at.replace(tzinfo=None) >= before.replace(tzinfo=None)

    async def test_update_missing_user_returns_none(self, storage):
        assert await storage.update_user(7, {"working_score": 1}) is None

    async def test_list_users_ordered_by_id(self, storage):
        for name in ("carol", "alice", "bob"):
            await storage.create_user(make_user(name))
        assert [user.username for user in await storage.list_users()] == ["carol", "alice", "bob"]


class TestPosts:
    """Post persistence, listing and filtering."""

    async def test_listing_is_newest_first(self, storage):
        now = utc_now()
        await storage.create_post(make_post("old", created_at=now - timedelta(hours=2)))
        await storage.create_post(make_post("new", created_at=now))
        await storage.create_post(make_post("middle", created_at=now - timedelta(hours=1)))

        assert [post.slug for post in await storage.get_posts()] == ["new", "middle", "old"]

    async def test_same_creation_time_orders_by_higher_id(self, storage):
        now = utc_now()
        await storage.create_post(make_post("first", created_at=now))
        await storage.create_post(make_post("second", created_at=now))

        assert [post.slug for post in await storage.get_posts()] == ["second", "first"]

    async def test_filters_and_pagination(self, storage):
        now = utc_now()
        for index in range(5):
            await storage.create_post(
                make_post(
                    f"post-{index}",
                    category="Technology" if index % 2 == 0 else "Viral Videos",
                    status="published" if index < 3 else "draft",
                    created_at=now - timedelta(minutes=index),
                )
            )

        tech = await storage.get_posts(category="Technology")
        assert [post.slug for post in tech] == ["post-0", "post-2", "post-4"]

        published_tech = await storage.get_posts(category="Technology", status="published")
        assert [post.slug for post in published_tech] == ["post-0", "post-2"]

        page = await storage.get_posts(limit=2, offset=1)
        assert [post.slug for post in page] == ["post-1", "post-2"]

        assert len(await storage.get_posts(limit=None)) == 5
        assert [post.slug for post in await storage.get_posts(limit=None, offset=3)] == ["post-3", "post-4"]

    async def test_default_limit_is_twenty(self, storage):
        for index in range(25):
            await storage.create_post(make_post(f"post-{index}"))
        assert len(await storage.get_posts()) == 20

    async def test_lookup_update_and_delete(self, storage):
        post = await storage.create_post(make_post("hello-world", tags=["AI", "Tech"]))

        assert (await storage.get_post_by_slug("hello-world")).id == post.id
        assert (await storage.get_post(post.id)).tags == ["AI", "Tech"]

        updated = await storage.update_post(post.id, {"views": 10, "tags": ["AI"]})
        assert updated.views == 10
        assert updated.tags == ["AI"]

        assert await storage.delete_post(post.id) is True
        assert await storage.delete_post(post.id) is False
        assert await storage.get_post(post.id) is None
        assert await storage.update_post(post.id, {"views": 1}) is None

    async def test_count_published_posts(self, storage):
        await storage.create_post(make_post("a", status="published"))
        await storage.create_post(make_post("b", status="published"))
        await storage.create_post(make_post("c", status="draft"))
        await storage.create_post(make_post("d", status="published", category="Listicles"))

        assert await storage.count_published_posts("Technology") == 2
        assert await storage.count_published_posts("Listicles") == 1
        assert await storage.count_published_posts("Unknown") == 0


class TestCategories:
    """Category persistence."""

    async def test_crud(self, storage):
        category = await storage.create_category(Category(name="Technology", color="#FF7675", icon="💻"))

        assert (await storage.get_category_by_name("Technology")).id == category.id
        updated = await storage.update_category(category.id, {"post_count": 3, "is_trending": True})
        assert (updated.post_count, updated.is_trending) == (3, True)

        assert [c.name for c in await storage.get_categories()] == ["Technology"]
        assert await storage.delete_category(category.id) is True
        assert await storage.get_category(category.id) is None
        assert await storage.update_category(category.id, {"post_count": 1}) is None


class TestEngagement:
    """Comments, reactions and saved posts."""

    async def test_comments_are_listed_per_post_oldest_first(self, storage):
        post = await storage.create_post(make_post("p"))
        other = await storage.create_post(make_post("q"))
        first = await storage.create_comment(Comment(content="first", post_id=post.id))
        await storage.create_comment(Comment(content="elsewhere", post_id=other.id))
        second = await storage.create_comment(Comment(content="second", post_id=post.id))

        comments = await storage.get_comments_by_post(post.id)
        assert [comment.id for comment in comments] == [first.id, second.id]

    async def test_comment_update_and_delete(self, storage):
        comment = await storage.create_comment(Comment(content="hi", post_id=1))

        updated = await storage.update_comment(comment.id, {"is_approved": True, "reactions": {"like": 2}})
        assert updated.is_approved is True
        assert updated.reactions == {"like": 2}
        assert (await storage.get_comment(comment.id)).is_approved is True

        assert await storage.delete_comment(comment.id) is True
        assert await storage.delete_comment(comment.id) is False

    async def test_reactions_by_post(self, storage):
        post = await storage.create_post(make_post("p"))
        await storage.create_reaction(Reaction(type="like", post_id=post.id))
        await storage.create_reaction(Reaction(type="wow", post_id=post.id))
        await storage.create_reaction(Reaction(type="like", post_id=post.id + 1))

        assert sorted(r.type for r in await storage.get_reactions_by_post(post.id)) == ["like", "wow"]

    async def test_saved_posts(self, storage):
        user = await storage.create_user(make_user("alice"))
        post = await storage.create_post(make_post("p"))
        await storage.create_saved_post(SavedPost(user_id=user.id, post_id=post.id))

        saved = await storage.get_saved_posts_by_user(user.id)
        assert [item.post_id for item in saved] == [post.id]

        assert await storage.delete_saved_post(user.id, post.id) is True
        assert await storage.delete_saved_post(user.id, post.id) is False
        assert await storage.get_saved_posts_by_user(user.id) == []


class TestSettings:
    """Key/value settings."""

    async def test_settings_by_key_and_category(self, storage):
        await storage.create_setting(Setting(key="site_title", value="BuzzHub", category="general"))
        await storage.create_setting(Setting(key="enable_comments", value="true", category="content"))

        assert (await storage.get_setting("site_title")).value == "BuzzHub"
        assert await storage.get_setting("missing") is None
        assert [s.key for s in await storage.get_settings()] == ["site_title", "enable_comments"]
        assert [s.key for s in await storage.get_settings("content")] == ["enable_comments"]

    async def test_update_setting(self, storage):
        await storage.create_setting(Setting(key="enable_comments", value="true", category="content"))

        updated = await storage.update_setting("enable_comments", "false")

        assert updated.value == "false"
        assert (await storage.get_setting("enable_comments")).value == "false"
        assert await storage.update_setting("missing", "x") is None


class TestAnalytics:
    """Analytics events and dashboard aggregation."""

    async def test_events_by_post(self, storage):
        await storage.create_analytics(Analytics(post_id=1, action="view"))
        await storage.create_analytics(Analytics(post_id=1, action="share"))
        await storage.create_analytics(Analytics(post_id=2, action="view"))

        assert [event.action for event in await storage.get_analytics_by_post(1)] == ["view", "share"]

    async def test_dashboard_stats(self, storage):
        await storage.create_post(make_post("a", views=100, likes=10, comments=2, shares=3))
        await storage.create_post(make_post("b", views=50, likes=5, comments=0, shares=1, status="draft"))
        await storage.create_user(make_user("alice"))
        await storage.create_user(make_user("bob", is_active=False))

        stats = await storage.get_dashboard_stats()

        assert stats == {
            "total_posts": 2,
            "total_views": 150,
            "total_engagement": 21,
            "active_users": 1,
            "monthly_growth": MONTHLY_GROWTH,
        }

    async def test_dashboard_stats_on_empty_storage(self, storage):
        stats = await storage.get_dashboard_stats()
        assert (stats["total_posts"], stats["total_views"], stats["total_engagement"], stats["active_users"]) == (
            0,
            0,
            0,
            0,
        )


class TestYoutubeCache:
    """YouTube title cache and its expiry sweep."""

    async def test_lookup_by_video_id(self, storage):
        await storage.create_youtube_cache(YoutubeCache(video_id="dQw4w9WgXcQ", title="Never Gonna Give You Up"))

        assert (await storage.get_youtube_cache("dQw4w9WgXcQ")).title == "Never Gonna Give You Up"
        assert await storage.get_youtube_cache("unknown") is None

    async def test_clean_old_entries(self, storage):
        now = utc_now()
        for video_id, age_days in (("old", 40), ("recent", 5)):
            await storage.create_youtube_cache(
                YoutubeCache(video_id=video_id, title=video_id.title(), created_at=now - timedelta(days=age_days))
            )
        await storage.create_youtube_cache(YoutubeCache(video_id="fresh", title="Fresh"))

        assert await storage.clean_old_youtube_cache() == 1
        assert await storage.get_youtube_cache("old") is None
        assert await storage.get_youtube_cache("recent") is not None

        assert await storage.clean_old_youtube_cache(max_age_days=1) == 1
        assert await storage.get_youtube_cache("recent") is None
        assert await storage.get_youtube_cache("fresh") is not None

    async def test_clean_on_empty_cache(self, storage):
        assert await storage.clean_old_youtube_cache(30) == 0
