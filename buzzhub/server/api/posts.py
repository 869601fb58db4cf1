"""
API endpoints for posts.

Listing, lookup by id or slug, and CRUD. Slug uniqueness, excerpts, SEO
scores and category counters are handled by
:class:`~buzzhub.server.services.posts.PostService`.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, status

from buzzhub.core.logging_config import get_logger
from buzzhub.core.models.enums import PostStatus
from buzzhub.core.models.io import PostCreate, PostRead, PostUpdate
from buzzhub.server.services.deps import PostServiceDep

logger = get_logger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get(
    "",
    response_model=List[PostRead],
    summary="List Posts",
    description="List posts newest first, optionally filtered by category and status.",
    response_description="A page of posts.",
)
async def list_posts(
    posts: PostServiceDep,
    category: Optional[str] = None,
    status: Optional[PostStatus] = None,
    limit: int = Query(default=20, ge=1, description="Page size"),
    offset: int = Query(default=0, ge=0, description="Number of posts to skip"),
) -> List[PostRead]:
    """
    List posts.

    Posts are ordered by creation time, newest first; posts created at the same
    instant are ordered by id, highest first.

    - **category**: Exact category name.
    - **status**: ``draft``, ``published`` or ``scheduled``.
    - **limit** / **offset**: Pagination.
    """
    items = await posts.list_posts(
        category=category,
        status=status.value if status else None,
        limit=limit,
        offset=offset,
    )
    return [PostRead.model_validate(post) for post in items]


@router.get(
    "/slug/{slug}",
    response_model=PostRead,
    summary="Get Post by Slug",
    responses={404: {"description": "Post not found"}},
)
async def get_post_by_slug(slug: str, posts: PostServiceDep) -> PostRead:
    return PostRead.model_validate(await posts.get_post_by_slug(slug))


@router.get(
    "/{post_id}",
    response_model=PostRead,
    summary="Get Post",
    responses={404: {"description": "Post not found"}},
)
async def get_post(post_id: int, posts: PostServiceDep) -> PostRead:
    return PostRead.model_validate(await posts.get_post(post_id))


@router.post(
    "",
    response_model=PostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Post",
    description="Create a post. Slug, excerpt and SEO score are derived when omitted.",
    responses={
        201: {"description": "Post created"},
        422: {"description": "Invalid post data"},
    },
)
async def create_post(data: PostCreate, posts: PostServiceDep) -> PostRead:
    """
    Create a new post.

    - **slug**: Defaults to the slugified title; ``-2``, ``-3``, ... is appended
      when the slug is already taken.
    - **excerpt**: Defaults to the first sentence of the content.
    - **seo_score**: Computed from title, excerpt, content and tags unless given.

    The category's published post count is refreshed afterwards.
    """
    return PostRead.model_validate(await posts.create_post(data))


@router.put(
    "/{post_id}",
    response_model=PostRead,
    summary="Update Post",
    description="Partially update a post. Only provided fields are changed.",
    responses={404: {"description": "Post not found"}},
)
async def update_post(post_id: int, data: PostUpdate, posts: PostServiceDep) -> PostRead:
    """
    Update an existing post.

    The SEO score is recomputed when the title, excerpt, content or tags change
    (unless a score is supplied), and the counts of both the old and the new
    category are refreshed.
    """
    return PostRead.model_validate(await posts.update_post(post_id, data))


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Post",
    responses={
        204: {"description": "Post deleted"},
        404: {"description": "Post not found"},
    },
)
async def delete_post(post_id: int, posts: PostServiceDep) -> None:
    await posts.delete_post(post_id)
