"""
Comment entity model.

Comments may be threaded through ``parent_id`` and carry a free-form
``reactions`` mapping (reaction type -> count).
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field

from ..base import Base, utc_now


class CommentBase(Base):
    """Base fields for a comment."""

    content: str = Field(sa_column=Column(Text, nullable=False))
    post_id: Optional[int] = Field(default=None, foreign_key="posts.id", index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    parent_id: Optional[int] = Field(default=None, description="Parent comment for replies")
    is_approved: bool = Field(default=False)
    is_spam: bool = Field(default=False)
    reactions: Dict[str, int] = Field(default_factory=dict, sa_column=Column(JSON))


class Comment(CommentBase, table=True):
    """Persistent comment on a post.

    Table: comments
    """

    __tablename__ = "comments"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
