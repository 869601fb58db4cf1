"""
Storage interface for BuzzHub.

``BlogStorage`` is the single persistence seam used by the services and API
routers. Two implementations ship with the project:

- :class:`~buzzhub.core.storage.memory.MemStorage`: process-local maps keyed by
  autoincrement id (default backend, used by tests and local runs)
- :class:`~buzzhub.core.storage.sql.SqlStorage`: SQLModel entities over an
  async SQLAlchemy session (Postgres in production, SQLite in tests)

Both return the SQLModel entity instances from
:mod:`buzzhub.core.database.entities`. Lookups of missing rows return ``None``;
deletes return whether a row was removed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

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

# Month-over-month growth shown on the dashboard. No history is kept to
# derive it, so the figures are fixed.
MONTHLY_GROWTH: Dict[str, int] = {"posts": 12, "views": 18, "engagement": 25, "users": 8}

DEFAULT_POST_LIMIT = 20
DEFAULT_CACHE_MAX_AGE_DAYS = 30


class BlogStorage(ABC):
    """Abstract persistence API for every BuzzHub entity."""

    # ------------------------------------------------------------------ users

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by id."""

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Get a user by exact username."""

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by exact e-mail address."""

    @abstractmethod
    async def list_users(self) -> List[User]:
        """List all users ordered by id."""

    @abstractmethod
    async def create_user(self, user: User) -> User:
        """Persist a new user and return it with its id assigned."""

    @abstractmethod
    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        """Apply ``updates`` to a user and bump ``updated_at``."""

    # ------------------------------------------------------------------ posts

    @abstractmethod
    async def get_posts(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = DEFAULT_POST_LIMIT,
        offset: int = 0,
    ) -> List[Post]:
        """List posts, newest first.

        Args:
            category: Exact category name to filter on
            status: Exact status to filter on
            limit: Page size; ``None`` returns every matching post
            offset: Number of posts to skip

        Returns:
            Posts ordered by ``created_at`` descending, ties broken by the
            higher id first
        """

    @abstractmethod
    async def get_post(self, post_id: int) -> Optional[Post]:
        """Get a post by id."""

    @abstractmethod
    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        """Get a post by slug."""

    @abstractmethod
    async def create_post(self, post: Post) -> Post:
        """Persist a new post."""

    @abstractmethod
    async def update_post(self, post_id: int, updates: Dict[str, Any]) -> Optional[Post]:
        """Apply ``updates`` to a post and bump ``updated_at``."""

    @abstractmethod
    async def delete_post(self, post_id: int) -> bool:
        """Delete a post."""

    @abstractmethod
    async def count_published_posts(self, category: str) -> int:
        """Count published posts in a category."""

    # ------------------------------------------------------------- categories

    @abstractmethod
    async def get_categories(self) -> List[Category]:
        """List all categories ordered by id."""

    @abstractmethod
    async def get_category(self, category_id: int) -> Optional[Category]:
        """Get a category by id."""

    @abstractmethod
    async def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get a category by exact name."""

    @abstractmethod
    async def create_category(self, category: Category) -> Category:
        """Persist a new category."""

    @abstractmethod
    async def update_category(self, category_id: int, updates: Dict[str, Any]) -> Optional[Category]:
        """Apply ``updates`` to a category."""

    @abstractmethod
    async def delete_category(self, category_id: int) -> bool:
        """Delete a category."""

    # --------------------------------------------------------------- comments

    @abstractmethod
    async def get_comments_by_post(self, post_id: int) -> List[Comment]:
        """List the comments on a post, oldest first."""

    @abstractmethod
    async def get_comment(self, comment_id: int) -> Optional[Comment]:
        """Get a comment by id."""

    @abstractmethod
    async def create_comment(self, comment: Comment) -> Comment:
        """Persist a new comment."""

    @abstractmethod
    async def update_comment(self, comment_id: int, updates: Dict[str, Any]) -> Optional[Comment]:
        """Apply ``updates`` to a comment."""

    @abstractmethod
    async def delete_comment(self, comment_id: int) -> bool:
        """Delete a comment."""

    # -------------------------------------------------------------- reactions

    @abstractmethod
    async def create_reaction(self, reaction: Reaction) -> Reaction:
        """Persist a new reaction."""

    @abstractmethod
    async def get_reactions_by_post(self, post_id: int) -> List[Reaction]:
        """List the reactions on a post."""

    # ------------------------------------------------------------ saved posts

    @abstractmethod
    async def get_saved_posts_by_user(self, user_id: int) -> List[SavedPost]:
        """List a user's saved posts."""

    @abstractmethod
    async def create_saved_post(self, saved_post: SavedPost) -> SavedPost:
        """Persist a new saved post."""

    @abstractmethod
    async def delete_saved_post(self, user_id: int, post_id: int) -> bool:
        """Remove ``post_id`` from a user's saved posts."""

    # --------------------------------------------------------------- settings

    @abstractmethod
    async def get_settings(self, category: Optional[str] = None) -> List[Setting]:
        """List settings, optionally restricted to one category."""

    @abstractmethod
    async def get_setting(self, key: str) -> Optional[Setting]:
        """Get a setting by key."""

    @abstractmethod
    async def create_setting(self, setting: Setting) -> Setting:
        """Persist a new setting."""

    @abstractmethod
    async def update_setting(self, key: str, value: str) -> Optional[Setting]:
        """Replace a setting's value and bump ``updated_at``."""

    # -------------------------------------------------------------- analytics

    @abstractmethod
    async def create_analytics(self, event: Analytics) -> Analytics:
        """Persist a new analytics event."""

    @abstractmethod
    async def get_analytics_by_post(self, post_id: int) -> List[Analytics]:
        """List the analytics events recorded for a post."""

    @abstractmethod
    async def get_dashboard_stats(self) -> Dict[str, Any]:
        """Aggregate totals for the admin dashboard.

        Returns:
            Mapping with ``total_posts``, ``total_views``,
            ``total_engagement`` (likes + comments + shares),
            ``active_users`` and ``monthly_growth``
        """

    # ---------------------------------------------------------- youtube cache

    @abstractmethod
    async def get_youtube_cache(self, video_id: str) -> Optional[YoutubeCache]:
        """Get the cached entry for a video id."""

    @abstractmethod
    async def create_youtube_cache(self, entry: YoutubeCache) -> YoutubeCache:
        """Persist a new cache entry."""

    @abstractmethod
    async def clean_old_youtube_cache(self, max_age_days: int = DEFAULT_CACHE_MAX_AGE_DAYS) -> int:
        """Remove entries created strictly before ``now - max_age_days``.

        Returns:
            Number of removed entries
        """

    # -------------------------------------------------------------- lifecycle

    async def close(self) -> None:
        """Release resources held by the backend."""
        return None
