"""
SQL storage backend.

Persists the SQLModel entities through an async SQLAlchemy session factory.
Each operation runs in its own short-lived session and commits immediately,
mirroring the per-call semantics of the in-memory backend.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List, Optional, Type, TypeVar

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel import SQLModel, select

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

EntityT = TypeVar("EntityT", bound=SQLModel)


class SqlStorage(BlogStorage):
    """:class:`BlogStorage` over an async SQLAlchemy session factory.

    Args:
        sessionmaker: Factory producing ``AsyncSession`` objects
        engine: Engine to dispose on :meth:`close` (optional)
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession], engine: Optional[AsyncEngine] = None) -> None:
        self._sessionmaker = sessionmaker
        self._engine = engine

    # ---------------------------------------------------------------- helpers

    async def _add(self, entity: EntityT) -> EntityT:
        async with self._sessionmaker() as session:
            session.add(entity)
            await session.commit()
            await session.refresh(entity)
            return entity

    async def _get(self, model: Type[EntityT], entity_id: int) -> Optional[EntityT]:
        async with self._sessionmaker() as session:
            return await session.get(model, entity_id)

    async def _first(self, stmt) -> Any:
        async with self._sessionmaker() as session:
            result = await session.execute(stmt)
            return result.scalars().first()

    async def _all(self, stmt) -> List[Any]:
        async with self._sessionmaker() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def _update(
        self, model: Type[EntityT], entity_id: int, updates: Dict[str, Any], touch: bool = False
    ) -> Optional[EntityT]:
        async with self._sessionmaker() as session:
            entity = await session.get(model, entity_id)
            if entity is None:
                return None
            for key, value in updates.items():
                if key == "id" or not hasattr(entity, key):
                    continue
                setattr(entity, key, value)
            if touch:
                entity.updated_at = utc_now()
            session.add(entity)
            await session.commit()
            await session.refresh(entity)
            return entity

    async def _delete(self, model: Type[EntityT], entity_id: int) -> bool:
        async with self._sessionmaker() as session:
            entity = await session.get(model, entity_id)
            if entity is None:
                return False
            await session.delete(entity)
            await session.commit()
            return True

    # ------------------------------------------------------------------ users

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self._get(User, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self._first(select(User).where(User.username == username))

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self._first(select(User).where(User.email == email))

    async def list_users(self) -> List[User]:
        return await self._all(select(User).order_by(User.id))

    async def create_user(self, user: User) -> User:
        return await self._add(user)

    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        return await self._update(User, user_id, updates, touch=True)

    # ------------------------------------------------------------------ posts

    async def get_posts(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = DEFAULT_POST_LIMIT,
        offset: int = 0,
    ) -> List[Post]:
        stmt = select(Post)
        if category is not None:
            stmt = stmt.where(Post.category == category)
        if status is not None:
            stmt = stmt.where(Post.status == status)
        stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc())
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._all(stmt)

    async def get_post(self, post_id: int) -> Optional[Post]:
        return await self._get(Post, post_id)

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        return await self._first(select(Post).where(Post.slug == slug))

    async def create_post(self, post: Post) -> Post:
        return await self._add(post)

    async def update_post(self, post_id: int, updates: Dict[str, Any]) -> Optional[Post]:
        return await self._update(Post, post_id, updates, touch=True)

    async def delete_post(self, post_id: int) -> bool:
        return await self._delete(Post, post_id)

    async def count_published_posts(self, category: str) -> int:
        stmt = select(func.count()).select_from(Post).where(Post.category == category, Post.status == "published")
        async with self._sessionmaker() as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())

    # ------------------------------------------------------------- categories

    async def get_categories(self) -> List[Category]:
        return await self._all(select(Category).order_by(Category.id))

    async def get_category(self, category_id: int) -> Optional[Category]:
        return await self._get(Category, category_id)

    async def get_category_by_name(self, name: str) -> Optional[Category]:
        return await self._first(select(Category).where(Category.name == name))

    async def create_category(self, category: Category) -> Category:
        return await self._add(category)

    async def update_category(self, category_id: int, updates: Dict[str, Any]) -> Optional[Category]:
        return await self._update(Category, category_id, updates)

    async def delete_category(self, category_id: int) -> bool:
        return await self._delete(Category, category_id)

    # --------------------------------------------------------------- comments

    async def get_comments_by_post(self, post_id: int) -> List[Comment]:
        stmt = select(Comment).where(Comment.post_id == post_id).order_by(Comment.created_at, Comment.id)
        return await self._all(stmt)

    async def get_comment(self, comment_id: int) -> Optional[Comment]:
        return await self._get(Comment, comment_id)

    async def create_comment(self, comment: Comment) -> Comment:
        return await self._add(comment)

    async def update_comment(self, comment_id: int, updates: Dict[str, Any]) -> Optional[Comment]:
        return await self._update(Comment, comment_id, updates)

    async def delete_comment(self, comment_id: int) -> bool:
        return await self._delete(Comment, comment_id)

    # -------------------------------------------------------------- reactions

    async def create_reaction(self, reaction: Reaction) -> Reaction:
        return await self._add(reaction)

    async def get_reactions_by_post(self, post_id: int) -> List[Reaction]:
        return await self._all(select(Reaction).where(Reaction.post_id == post_id).order_by(Reaction.id))

    # ------------------------------------------------------------ saved posts

    async def get_saved_posts_by_user(self, user_id: int) -> List[SavedPost]:
        return await self._all(select(SavedPost).where(SavedPost.user_id == user_id).order_by(SavedPost.id))

    async def create_saved_post(self, saved_post: SavedPost) -> SavedPost:
        return await self._add(saved_post)

    async def delete_saved_post(self, user_id: int, post_id: int) -> bool:
        async with self._sessionmaker() as session:
            result = await session.execute(
                select(SavedPost).where(SavedPost.user_id == user_id, SavedPost.post_id == post_id)
            )
            saved = result.scalars().first()
            if saved is None:
                return False
            await session.delete(saved)
            await session.commit()
            return True

    # --------------------------------------------------------------- settings

    async def get_settings(self, category: Optional[str] = None) -> List[Setting]:
        stmt = select(Setting)
        if category is not None:
            stmt = stmt.where(Setting.category == category)
        return await self._all(stmt.order_by(Setting.id))

    async def get_setting(self, key: str) -> Optional[Setting]:
        return await self._first(select(Setting).where(Setting.key == key))

    async def create_setting(self, setting: Setting) -> Setting:
        return await self._add(setting)

    async def update_setting(self, key: str, value: str) -> Optional[Setting]:
        async with self._sessionmaker() as session:
            result = await session.execute(select(Setting).where(Setting.key == key))
            setting = result.scalars().first()
            if setting is None:
                return None
            setting.value = value
            setting.updated_at = utc_now()
            session.add(setting)
            await session.commit()
            await session.refresh(setting)
            return setting

    # -------------------------------------------------------------- analytics

    async def create_analytics(self, event: Analytics) -> Analytics:
        return await self._add(event)

    async def get_analytics_by_post(self, post_id: int) -> List[Analytics]:
        return await self._all(select(Analytics).where(Analytics.post_id == post_id).order_by(Analytics.id))

    async def get_dashboard_stats(self) -> Dict[str, Any]:
        post_totals = select(
            func.count(Post.id),
            func.coalesce(func.sum(Post.views), 0),
            func.coalesce(func.sum(Post.likes + Post.comments + Post.shares), 0),
        )
        active_users = select(func.count(User.id)).where(User.is_active == True)  # noqa: E712
        async with self._sessionmaker() as session:
            total_posts, total_views, total_engagement = (await session.execute(post_totals)).one()
            active = (await session.execute(active_users)).scalar_one()
        return {
            "total_posts": int(total_posts),
            "total_views": int(total_views),
            "total_engagement": int(total_engagement),
            "active_users": int(active),
            "monthly_growth": dict(MONTHLY_GROWTH),
        }

    # ---------------------------------------------------------- youtube cache

    async def get_youtube_cache(self, video_id: str) -> Optional[YoutubeCache]:
        return await self._first(select(YoutubeCache).where(YoutubeCache.video_id == video_id))

    async def create_youtube_cache(self, entry: YoutubeCache) -> YoutubeCache:
        return await self._add(entry)

    async def clean_old_youtube_cache(self, max_age_days: int = DEFAULT_CACHE_MAX_AGE_DAYS) -> int:
        cutoff = utc_now() - timedelta(days=max_age_days)
        async with self._sessionmaker() as session:
            result = await session.execute(delete(YoutubeCache).where(YoutubeCache.created_at < cutoff))
            await session.commit()
        removed = result.rowcount or 0
        if removed:
            logger.info(f"Removed {removed} expired YouTube cache entries")
        return removed

    # -------------------------------------------------------------- lifecycle

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
