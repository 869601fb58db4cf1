"""
Post service.

Wraps the storage post operations with the rules that span entities:

- slugs default to the slugified title and are made unique with a ``-2``,
  ``-3``, ... suffix
- excerpts default to the meta description derived from the content
- the SEO score is computed on create and recomputed when title, excerpt,
  content or tags change
- a category's ``post_count`` tracks the number of its published posts
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from buzzhub.content.generator import SYSTEM_AUTHOR_ID
from buzzhub.content.seo import calculate_seo_score, generate_meta_description, generate_slug
from buzzhub.core.database.base import utc_now
from buzzhub.core.database.entities import Post
from buzzhub.core.errors import InvalidInputError, NotFoundError
from buzzhub.core.logging_config import get_logger
from buzzhub.core.models.enums import PostStatus
from buzzhub.core.models.io import PostCreate, PostUpdate
from buzzhub.core.storage import BlogStorage

logger = get_logger(__name__)

SEO_FIELDS = frozenset({"title", "excerpt", "content", "tags"})
FALLBACK_SLUG = "post"


class PostService:
    """Business rules for creating, updating and deleting posts."""

    def __init__(self, storage: BlogStorage) -> None:
        self.storage = storage

    async def list_posts(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        limit: Optional[int] = 20,
        offset: int = 0,
    ) -> List[Post]:
        return await self.storage.get_posts(category=category, status=status, limit=limit, offset=offset)

    async def get_post(self, post_id: int) -> Post:
        post = await self.storage.get_post(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    async def get_post_by_slug(self, slug: str) -> Post:
        post = await self.storage.get_post_by_slug(slug)
        if post is None:
            raise NotFoundError("Post", slug)
        return post

    async def unique_slug(self, base: str, exclude_id: Optional[int] = None) -> str:
        """Return ``base`` or the first free ``base-N`` (N >= 2)."""
        base = base or FALLBACK_SLUG
        candidate = base
        suffix = 2
        while True:
            existing = await self.storage.get_post_by_slug(candidate)
            if existing is None or existing.id == exclude_id:
                return candidate
            candidate = f"{base}-{suffix}"
            suffix += 1

    async def refresh_category_count(self, category_name: Optional[str]) -> None:
        """Recompute ``post_count`` of a category from its published posts."""
        if not category_name:
            return
        category = await self.storage.get_category_by_name(category_name)
        if category is None:
            return
        count = await self.storage.count_published_posts(category_name)
        if category.post_count != count:
            await self.storage.update_category(category.id, {"post_count": count})

    async def check_author(self, author_id: Optional[int]) -> None:
        """Reject an ``author_id`` that names no user."""
        if author_id is not None and await self.storage.get_user(author_id) is None:
            raise InvalidInputError(f"Author {author_id} does not exist")

    async def system_author_id(self) -> Optional[int]:
        """Author for generated posts, or ``None`` while the system account is missing."""
        if await self.storage.get_user(SYSTEM_AUTHOR_ID) is None:
            logger.warning(f"System author {SYSTEM_AUTHOR_ID} does not exist; generated posts have no author")
            return None
        return SYSTEM_AUTHOR_ID

    async def create_post(self, data: PostCreate) -> Post:
        await self.check_author(data.author_id)
        fields = data.model_dump()
        fields["status"] = data.status.value
        fields["slug"] = await self.unique_slug(data.slug.strip() if data.slug else generate_slug(data.title))
        if not fields.get("excerpt"):
            fields["excerpt"] = generate_meta_description(data.content)
        if fields.get("seo_score") is None:
            fields["seo_score"] = calculate_seo_score(
                title=data.title,
                meta_description=fields["excerpt"],
                content=data.content,
                tags=data.tags,
            ).score
        if data.status == PostStatus.published and fields.get("published_at") is None:
            fields["published_at"] = utc_now()

        post = await self.storage.create_post(Post(**fields))
        await self.refresh_category_count(post.category)
        logger.info(f"Created post {post.id} '{post.slug}' in {post.category} (seo_score={post.seo_score})")
        return post

    async def update_post(self, post_id: int, data: PostUpdate) -> Post:
        current = await self.get_post(post_id)
        old_category = current.category
        updates: Dict[str, Any] = data.model_dump(exclude_unset=True)
        if isinstance(updates.get("status"), PostStatus):
            updates["status"] = updates["status"].value

        if updates.get("slug"):
            updates["slug"] = await self.unique_slug(updates["slug"].strip(), exclude_id=post_id)
        elif "slug" in updates:
            # an explicit null/empty slug keeps the current one
            del updates["slug"]
        if "author_id" in updates:
            await self.check_author(updates["author_id"])

        if SEO_FIELDS & updates.keys() and "seo_score" not in updates:
            updates["seo_score"] = calculate_seo_score(
                title=updates.get("title", current.title),
                meta_description=updates.get("excerpt", current.excerpt) or "",
                content=updates.get("content", current.content),
                tags=updates.get("tags", current.tags),
            ).score

        if updates.get("status") == PostStatus.published.value and current.published_at is None:
            updates.setdefault("published_at", utc_now())

        post = await self.storage.update_post(post_id, updates)
        if post is None:
            raise NotFoundError("Post", post_id)
        await self.refresh_category_count(old_category)
        if post.category != old_category:
            await self.refresh_category_count(post.category)
        return post

    async def delete_post(self, post_id: int) -> None:
        post = await self.get_post(post_id)
        await self.storage.delete_post(post_id)
        await self.refresh_category_count(post.category)
        logger.info(f"Deleted post {post_id} '{post.slug}'")
