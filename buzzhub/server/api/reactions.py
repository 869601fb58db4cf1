"""
API endpoints for post reactions.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from buzzhub.core.models.io import ReactionCreate, ReactionRead, ReactionSummary
from buzzhub.server.services.deps import EngagementServiceDep, StorageDep

router = APIRouter(tags=["reactions"])


@router.post(
    "/reactions",
    response_model=ReactionRead,
    status_code=status.HTTP_201_CREATED,
    summary="React to Post",
    description="Record a reaction (like, love, laugh, angry, sad, wow). A like also bumps the post's likes.",
    responses={
        404: {"description": "Post not found"},
        422: {"description": "Unknown reaction type"},
    },
)
async def create_reaction(data: ReactionCreate, engagement: EngagementServiceDep) -> ReactionRead:
    return ReactionRead.model_validate(await engagement.create_reaction(data))


@router.get(
    "/posts/{post_id}/reactions",
    response_model=ReactionSummary,
    summary="List Post Reactions",
    description="Every reaction on a post plus a count per reaction type.",
)
async def list_reactions(post_id: int, storage: StorageDep, engagement: EngagementServiceDep) -> ReactionSummary:
    reactions = await storage.get_reactions_by_post(post_id)
    return ReactionSummary(
        post_id=post_id,
        total=len(reactions),
        counts=await engagement.reaction_counts(post_id),
        reactions=[ReactionRead.model_validate(reaction) for reaction in reactions],
    )
