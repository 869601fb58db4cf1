"""Reaction and saved-post entity models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class ReactionBase(Base):
    """Base fields for a post reaction."""

    type: str = Field(description="like, love, laugh, angry, sad or wow")
    post_id: Optional[int] = Field(default=None, foreign_key="posts.id", index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")


class Reaction(ReactionBase, table=True):
    """Persistent reaction.

    Table: reactions
    """

    __tablename__ = "reactions"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))


class SavedPostBase(Base):
    """Base fields for a bookmarked post."""

    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    post_id: Optional[int] = Field(default=None, foreign_key="posts.id")


class SavedPost(SavedPostBase, table=True):
    """Persistent bookmark of a post by a user.

    Table: saved_posts
    """

    __tablename__ = "saved_posts"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
