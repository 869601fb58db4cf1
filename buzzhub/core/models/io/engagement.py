"""
Engagement I/O models: comments, reactions and saved posts.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import ReactionType
from .base import PartialUpdate


class CommentRead(BaseModel):
    """Schema for reading a comment."""

    id: int
    content: str
    post_id: Optional[int] = None
    user_id: Optional[int] = None
    parent_id: Optional[int] = None
    is_approved: bool = False
    is_spam: bool = False
    reactions: Dict[str, int] = Field(default_factory=dict)
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentCreate(BaseModel):
    """Schema for creating a comment.

    ``is_approved`` falls back to the ``auto_approve_comments`` site setting
    when omitted.
    """

    content: str = Field(min_length=1)
    post_id: int
    user_id: Optional[int] = None
    parent_id: Optional[int] = None
    is_approved: Optional[bool] = None
    is_spam: bool = False
    reactions: Dict[str, int] = Field(default_factory=dict)


class CommentUpdate(PartialUpdate):
    """Schema for moderating or editing a comment."""

    required_fields = frozenset({"content", "is_approved", "is_spam", "reactions"})

    content: Optional[str] = None
    is_approved: Optional[bool] = None
    is_spam: Optional[bool] = None
    reactions: Optional[Dict[str, int]] = None


class ReactionRead(BaseModel):
    """Schema for reading a reaction."""

    id: int
    type: ReactionType
    post_id: Optional[int] = None
    user_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReactionCreate(BaseModel):
    """Schema for reacting to a post."""

    type: ReactionType
    post_id: int
    user_id: Optional[int] = None


class ReactionSummary(BaseModel):
    """All reactions on a post plus per-type counts."""

    post_id: int
    total: int
    counts: Dict[str, int]
    reactions: List[ReactionRead]


class SavedPostRead(BaseModel):
    """Schema for reading a saved post."""

    id: int
    user_id: Optional[int] = None
    post_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SavedPostCreate(BaseModel):
    """Schema for saving a post to a user's list."""

    user_id: int
    post_id: int
