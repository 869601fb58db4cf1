"""
Engagement service: comments, reactions, saved posts and analytics events.

Each recorded interaction also bumps the matching counter on the post
(comments, likes, views, shares) so listings never need to aggregate.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional

from buzzhub.core.database.entities import Analytics, Comment, Post, Reaction, SavedPost
from buzzhub.core.errors import ConflictError, NotFoundError, PermissionDeniedError
from buzzhub.core.logging_config import get_logger
from buzzhub.core.models.enums import AnalyticsAction, ReactionType
from buzzhub.core.models.io import AnalyticsCreate, CommentCreate, ReactionCreate, SavedPostCreate
from buzzhub.core.storage import BlogStorage

logger = get_logger(__name__)

ENABLE_COMMENTS_KEY = "enable_comments"
AUTO_APPROVE_COMMENTS_KEY = "auto_approve_comments"

# analytics action -> post counter it increments
ACTION_COUNTERS = {
    AnalyticsAction.view: "views",
    AnalyticsAction.share: "shares",
}


class EngagementService:
    """Record reader interactions against posts."""

    def __init__(self, storage: BlogStorage) -> None:
        self.storage = storage

    async def _require_post(self, post_id: int) -> Post:
        post = await self.storage.get_post(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    async def _increment(self, post: Post, counter: str) -> None:
        await self.storage.update_post(post.id, {counter: getattr(post, counter) + 1})

    async def _setting_is_true(self, key: str, default: bool) -> bool:
        setting = await self.storage.get_setting(key)
        if setting is None:
            return default
        return setting.value.strip().lower() == "true"

    # --------------------------------------------------------------- comments

    async def create_comment(self, data: CommentCreate) -> Comment:
        if not await self._setting_is_true(ENABLE_COMMENTS_KEY, default=True):
            raise PermissionDeniedError("Comments are disabled")
        post = await self._require_post(data.post_id)

        fields = data.model_dump()
        if fields["is_approved"] is None:
            fields["is_approved"] = await self._setting_is_true(AUTO_APPROVE_COMMENTS_KEY, default=False)

        comment = await self.storage.create_comment(Comment(**fields))
        await self._increment(post, "comments")
        logger.debug(f"Comment {comment.id} added to post {post.id} (approved={comment.is_approved})")
        return comment

    async def list_comments(self, post_id: int) -> List[Comment]:
        return await self.storage.get_comments_by_post(post_id)

    # -------------------------------------------------------------- reactions

    async def create_reaction(self, data: ReactionCreate) -> Reaction:
        post = await self._require_post(data.post_id)
        reaction = await self.storage.create_reaction(
            Reaction(type=data.type.value, post_id=data.post_id, user_id=data.user_id)
        )
        if data.type == ReactionType.like:
            await self._increment(post, "likes")
        return reaction

    async def reaction_counts(self, post_id: int) -> Dict[str, int]:
        """Per-type reaction counts for a post, zero-filled for every type."""
        reactions = await self.storage.get_reactions_by_post(post_id)
        counts = Counter(reaction.type for reaction in reactions)
        return {reaction_type.value: counts.get(reaction_type.value, 0) for reaction_type in ReactionType}

    # ------------------------------------------------------------ saved posts

    async def save_post(self, data: SavedPostCreate) -> SavedPost:
        await self._require_post(data.post_id)
        if await self.storage.get_user(data.user_id) is None:
            raise NotFoundError("User", data.user_id)
        saved = await self.storage.get_saved_posts_by_user(data.user_id)
        if any(item.post_id == data.post_id for item in saved):
            raise ConflictError("Post already saved")
        return await self.storage.create_saved_post(SavedPost(user_id=data.user_id, post_id=data.post_id))

    # -------------------------------------------------------------- analytics

    async def record_event(self, data: AnalyticsCreate) -> Analytics:
        post: Optional[Post] = None
        if data.post_id is not None:
            post = await self._require_post(data.post_id)

        fields = data.model_dump()
        fields["action"] = data.action.value
        event = await self.storage.create_analytics(Analytics(**fields))

        counter = ACTION_COUNTERS.get(data.action)
        if post is not None and counter is not None:
            await self._increment(post, counter)
        return event
