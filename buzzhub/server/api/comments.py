"""
API endpoints for comments.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from buzzhub.core.errors import NotFoundError
from buzzhub.core.models.io import CommentCreate, CommentRead, CommentUpdate
from buzzhub.server.services.deps import EngagementServiceDep, StorageDep

router = APIRouter(tags=["comments"])


@router.get(
    "/posts/{post_id}/comments",
    response_model=List[CommentRead],
    summary="List Post Comments",
    description="Comments on a post, oldest first.",
)
async def list_comments(post_id: int, engagement: EngagementServiceDep) -> List[CommentRead]:
    return [CommentRead.model_validate(comment) for comment in await engagement.list_comments(post_id)]


@router.post(
    "/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Comment",
    responses={
        201: {"description": "Comment created"},
        403: {"description": "Comments are disabled"},
        404: {"description": "Post not found"},
    },
)
async def create_comment(data: CommentCreate, engagement: EngagementServiceDep) -> CommentRead:
    """
    Comment on a post.

    Rejected with 403 while the ``enable_comments`` setting is ``"false"``.
    When ``is_approved`` is omitted it follows the ``auto_approve_comments``
    setting. The post's comment counter is incremented.
    """
    return CommentRead.model_validate(await engagement.create_comment(data))


@router.put(
    "/comments/{comment_id}",
    response_model=CommentRead,
    summary="Update Comment",
    description="Edit or moderate a comment (approve, flag as spam).",
    responses={404: {"description": "Comment not found"}},
)
async def update_comment(comment_id: int, data: CommentUpdate, storage: StorageDep) -> CommentRead:
    comment = await storage.update_comment(comment_id, data.model_dump(exclude_unset=True))
    if comment is None:
        raise NotFoundError("Comment", comment_id)
    return CommentRead.model_validate(comment)


@router.delete(
    "/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Comment",
    responses={404: {"description": "Comment not found"}},
)
async def delete_comment(comment_id: int, storage: StorageDep) -> None:
    if not await storage.delete_comment(comment_id):
        raise NotFoundError("Comment", comment_id)
