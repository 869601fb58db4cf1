"""
In-memory storage backend.

Every entity lives in a ``dict`` keyed by an autoincrement id that starts at 1
per entity type (settings are keyed by ``key``, cache entries by
``video_id``). Lookups are linear scans; nothing is shared across processes.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, Iterable, List, Optional, TypeVar

from ..database.base import utc_now
from ..database.entities import (
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
from ..logging_config import get_logger
from .base import DEFAULT_CACHE_MAX_AGE_DAYS, DEFAULT_POST_LIMIT, MONTHLY_GROWTH, BlogStorage

logger = get_logger(__name__)

EntityT = TypeVar("EntityT")


def _apply_updates(entity: EntityT, updates: Dict[str, Any]) -> EntityT:
    for key, value in updates.items():
        if key == "id" or not hasattr(entity, key):
            continue
        setattr(entity, key, value)
    return entity


def _first(items: Iterable[EntityT], **criteria: Any) -> Optional[EntityT]:
    for item in items:
        if all(getattr(item, name) == value for name, value in criteria.items()):
            return item
    return None


class MemStorage(BlogStorage):
    """Process-local implementation of :class:`BlogStorage`."""

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._posts: Dict[int, Post] = {}
        self._categories: Dict[int, Category] = {}
        self._comments: Dict[int, Comment] = {}
        self._reactions: Dict[int, Reaction] = {}
        self._saved_posts: Dict[int, SavedPost] = {}
        self._settings: Dict[str, Setting] = {}
        self._analytics: Dict[int, Analytics] = {}
        self._youtube_cache: Dict[str, YoutubeCache] = {}
        self._next_ids: Dict[str, int] = {}

    def _assign_id(self, kind: str, entity: EntityT) -> EntityT:
        next_id = self._next_ids.get(kind, 1)
        self._next_ids[kind] = next_id + 1
        entity.id = next_id  # type: ignore[attr-defined]
        return entity

    # ------------------------------------------------------------------ users

    async def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return _first(self._users.values(), username=username)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return _first(self._users.values(), email=email)

    async def list_users(self) -> List[User]:
        return [self._users[key] for key in sorted(self._users)]

    async def create_user(self, user: User) -> User:
        self._assign_id("users", user)
        self._users[user.id] = user
        logger.debug(f"Created user {user.id} ({user.username})")
        return user

    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        _apply_updates(user, updates)
        user.updated_at = utc_now()
        return user

    # ------------------------------------------------------------------ posts

    async def get_posts(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = DEFAULT_POST_LIMIT,
        offset: int = 0,
    ) -> List[Post]:
        posts = [
            post
            for post in self._posts.values()
            if (category is None or post.category == category) and (status is None or post.status == status)
        ]
        posts.sort(key=lambda post: (post.created_at, post.id), reverse=True)
        if limit is None:
            return posts[offset:]
        return posts[offset : offset + limit]

    async def get_post(self, post_id: int) -> Optional[Post]:
        return self._posts.get(post_id)

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        return _first(self._posts.values(), slug=slug)

    async def create_post(self, post: Post) -> Post:
        self._assign_id("posts", post)
        self._posts[post.id] = post
        logger.debug(f"Created post {post.id} ({post.slug})")
        return post

    async def update_post(self, post_id: int, updates: Dict[str, Any]) -> Optional[Post]:
        post = self._posts.get(post_id)
        if post is None:
            return None
        _apply_updates(post, updates)
        post.updated_at = utc_now()
        return post

    async def delete_post(self, post_id: int) -> bool:
        return self._posts.pop(post_id, None) is not None

    async def count_published_posts(self, category: str) -> int:
        return sum(1 for post in self._posts.values() if post.category == category and post.status == "published")

    # ------------------------------------------------------------- categories

    async def get_categories(self) -> List[Category]:
        return [self._categories[key] for key in sorted(self._categories)]

    async def get_category(self, category_id: int) -> Optional[Category]:
        return self._categories.get(category_id)

    async def get_category_by_name(self, name: str) -> Optional[Category]:
        return _first(self._categories.values(), name=name)

    async def create_category(self, category: Category) -> Category:
        self._assign_id("categories", category)
        self._categories[category.id] = category
        return category

    async def update_category(self, category_id: int, updates: Dict[str, Any]) -> Optional[Category]:
        category = self._categories.get(category_id)
        if category is None:
            return None
        return _apply_updates(category, updates)

    async def delete_category(self, category_id: int) -> bool:
        return self._categories.pop(category_id, None) is not None

    # --------------------------------------------------------------- comments

    async def get_comments_by_post(self, post_id: int) -> List[Comment]:
        comments = [comment for comment in self._comments.values() if comment.post_id == post_id]
        comments.sort(key=lambda comment: (comment.created_at, comment.id))
        return comments

    async def get_comment(self, comment_id: int) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def create_comment(self, comment: Comment) -> Comment:
        self._assign_id("comments", comment)
        self._comments[comment.id] = comment
        return comment

    async def update_comment(self, comment_id: int, updates: Dict[str, Any]) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        return _apply_updates(comment, updates)

    async def delete_comment(self, comment_id: int) -> bool:
        return self._comments.pop(comment_id, None) is not None

    # -------------------------------------------------------------- reactions

    async def create_reaction(self, reaction: Reaction) -> Reaction:
        self._assign_id("reactions", reaction)
        self._reactions[reaction.id] = reaction
        return reaction

    async def get_reactions_by_post(self, post_id: int) -> List[Reaction]:
        return [reaction for reaction in self._reactions.values() if reaction.post_id == post_id]

    # ------------------------------------------------------------ saved posts

    async def get_saved_posts_by_user(self, user_id: int) -> List[SavedPost]:
        return [saved for saved in self._saved_posts.values() if saved.user_id == user_id]

    async def create_saved_post(self, saved_post: SavedPost) -> SavedPost:
        self._assign_id("saved_posts", saved_post)
        self._saved_posts[saved_post.id] = saved_post
        return saved_post

    async def delete_saved_post(self, user_id: int, post_id: int) -> bool:
        saved = _first(self._saved_posts.values(), user_id=user_id, post_id=post_id)
        if saved is None:
            return False
        del self._saved_posts[saved.id]
        return True

    # --------------------------------------------------------------- settings

    async def get_settings(self, category: Optional[str] = None) -> List[Setting]:
        settings = sorted(self._settings.values(), key=lambda setting: setting.id)
        if category is None:
            return settings
        return [setting for setting in settings if setting.category == category]

    async def get_setting(self, key: str) -> Optional[Setting]:
        return self._settings.get(key)

    async def create_setting(self, setting: Setting) -> Setting:
        self._assign_id("settings", setting)
        self._settings[setting.key] = setting
        return setting

    async def update_setting(self, key: str, value: str) -> Optional[Setting]:
        setting = self._settings.get(key)
        if setting is None:
            return None
        setting.value = value
        setting.updated_at = utc_now()
        return setting

    # -------------------------------------------------------------- analytics

    async def create_analytics(self, event: Analytics) -> Analytics:
        self._assign_id("analytics", event)
        self._analytics[event.id] = event
        return event

    async def get_analytics_by_post(self, post_id: int) -> List[Analytics]:
        return [event for event in self._analytics.values() if event.post_id == post_id]

    async def get_dashboard_stats(self) -> Dict[str, Any]:
        posts = list(self._posts.values())
        return {
            "total_posts": len(posts),
            "total_views": sum(post.views for post in posts),
            "total_engagement": sum(post.engagement for post in posts),
            "active_users": sum(1 for user in self._users.values() if user.is_active),
            "monthly_growth": dict(MONTHLY_GROWTH),
        }

    # ---------------------------------------------------------- youtube cache

    async def get_youtube_cache(self, video_id: str) -> Optional[YoutubeCache]:
        return self._youtube_cache.get(video_id)

    async def create_youtube_cache(self, entry: YoutubeCache) -> YoutubeCache:
        self._assign_id("youtube_cache", entry)
        self._youtube_cache[entry.video_id] = entry
        return entry

    async def clean_old_youtube_cache(self, max_age_days: int = DEFAULT_CACHE_MAX_AGE_DAYS) -> int:
        cutoff = utc_now() - timedelta(days=max_age_days)
        expired = [video_id for video_id, entry in self._youtube_cache.items() if entry.created_at < cutoff]
        for video_id in expired:
            del self._youtube_cache[video_id]
        if expired:
            logger.info(f"Removed {len(expired)} expired YouTube cache entries")
        return len(expired)
