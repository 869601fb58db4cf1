"""
Post entity model.

A post belongs to a category by *name* (not by foreign key) and carries its
own engagement counters (views, likes, comments, shares).
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field

from ..base import Base, utc_now


class PostBase(Base):
    """Base fields for a post."""

    title: str = Field(description="Post title")
    content: str = Field(sa_column=Column(Text, nullable=False), description="HTML body")
    slug: str = Field(index=True, unique=True, description="URL slug")
    excerpt: Optional[str] = Field(default=None, description="Short summary / meta description")
    featured_image: Optional[str] = Field(default=None, description="Header image URL")
    category: str = Field(index=True, description="Category name")
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON), description="Keywords")
    status: str = Field(default="draft", index=True, description="draft, published or scheduled")
    seo_score: int = Field(default=0, description="Overall SEO score (0-100)")
    views: int = Field(default=0)
    likes: int = Field(default=0)
    comments: int = Field(default=0)
    shares: int = Field(default=0)
    is_trending: bool = Field(default=False)
    is_featured: bool = Field(default=False)
    author_id: Optional[int] = Field(default=None, foreign_key="users.id")
    scheduled_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)))
    published_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)))


class Post(PostBase, table=True):
    """Persistent blog post.

    Table: posts
    """

    __tablename__ = "posts"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))

    @property
    def engagement(self) -> int:
        """Likes, comments and shares combined."""
        return self.likes + self.comments + self.shares

    def __repr__(self) -> str:
        return f"Post(id={self.id}, slug={self.slug}, status={self.status})"
