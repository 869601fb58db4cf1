"""
User and saved-post endpoints.

User payloads never include the password.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from buzzhub.core.models.io import SavedPostCreate, SavedPostRead, UserRead, UserUpdate
from buzzhub.server.services.deps import AccountServiceDep, EngagementServiceDep, StorageDep

router = APIRouter(tags=["users"])


@router.get(
    "/users",
    response_model=List[UserRead],
    summary="List Users",
    description="List every user account ordered by id.",
)
async def list_users(storage: StorageDep) -> List[UserRead]:
    return [UserRead.model_validate(user) for user in await storage.list_users()]


@router.get(
    "/users/{user_id}",
    response_model=UserRead,
    summary="Get User",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, accounts: AccountServiceDep) -> UserRead:
    return UserRead.model_validate(await accounts.get_user(user_id))


@router.put(
    "/users/{user_id}",
    response_model=UserRead,
    summary="Update User",
    description="Partially update a user. Only provided fields are changed.",
    responses={
        404: {"description": "User not found"},
        409: {"description": "E-mail or username already in use"},
    },
)
async def update_user(user_id: int, data: UserUpdate, accounts: AccountServiceDep) -> UserRead:
    """
    Update a user account.

    Supports partial updates; ``updated_at`` is bumped on every call.
    """
    return UserRead.model_validate(await accounts.update_user(user_id, data))


@router.get(
    "/users/{user_id}/saved-posts",
    response_model=List[SavedPostRead],
    summary="List Saved Posts",
)
async def list_saved_posts(user_id: int, storage: StorageDep) -> List[SavedPostRead]:
    return [SavedPostRead.model_validate(saved) for saved in await storage.get_saved_posts_by_user(user_id)]


@router.post(
    "/saved-posts",
    response_model=SavedPostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Save Post",
    responses={
        404: {"description": "User or post not found"},
        409: {"description": "Post already saved by the user"},
    },
)
async def save_post(data: SavedPostCreate, engagement: EngagementServiceDep) -> SavedPostRead:
    return SavedPostRead.model_validate(await engagement.save_post(data))


@router.delete(
    "/users/{user_id}/saved-posts/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unsave Post",
    responses={404: {"description": "The user has not saved this post"}},
)
async def unsave_post(user_id: int, post_id: int, storage: StorageDep) -> None:
    if not await storage.delete_saved_post(user_id, post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Saved post not found")
