"""
Post and category I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import PostStatus
from .base import PartialUpdate


class PostRead(BaseModel):
    """Schema for reading a post."""

    id: int
    title: str
    content: str
    slug: str
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category: str
    tags: List[str] = Field(default_factory=list)
    status: PostStatus
    seo_score: int = 0
    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0
    is_trending: bool = False
    is_featured: bool = False
    author_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostCreate(BaseModel):
    """Schema for creating a post.

    ``slug``, ``excerpt`` and ``seo_score`` are derived from the title and
    content when omitted.
    """

    title: str = Field(min_length=1, description="Post title")
    content: str = Field(description="HTML body")
    slug: Optional[str] = Field(default=None, description="URL slug (generated from the title when omitted)")
    excerpt: Optional[str] = Field(default=None, description="Summary (generated from the content when omitted)")
    featured_image: Optional[str] = None
    category: str = Field(min_length=1, description="Category name")
    tags: List[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.draft
    seo_score: Optional[int] = Field(default=None, ge=0, le=100)
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)
    is_trending: bool = False
    is_featured: bool = False
    author_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    published_at: Optional[datetime] = None


class PostUpdate(PartialUpdate):
    """Schema for partially updating a post.

    An explicit null ``slug`` keeps the current slug.
    """

    required_fields = frozenset(
        {
            "title",
            "content",
            "category",
            "tags",
            "status",
            "seo_score",
            "views",
            "likes",
            "comments",
            "shares",
            "is_trending",
            "is_featured",
        }
    )

    title: Optional[str] = None
    content: Optional[str] = None
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[PostStatus] = None
    seo_score: Optional[int] = Field(default=None, ge=0, le=100)
    views: Optional[int] = Field(default=None, ge=0)
    likes: Optional[int] = Field(default=None, ge=0)
    comments: Optional[int] = Field(default=None, ge=0)
    shares: Optional[int] = Field(default=None, ge=0)
    is_trending: Optional[bool] = None
    is_featured: Optional[bool] = None
    author_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    published_at: Optional[datetime] = None


class CategoryRead(BaseModel):
    """Schema for reading a category."""

    id: int
    name: str
    description: Optional[str] = None
    color: str
    icon: str
    is_active: bool = True
    is_trending: bool = False
    post_count: int = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    name: str = Field(min_length=1)
    description: Optional[str] = None
    color: str = Field(description="Hex colour, e.g. '#FF6B6B'")
    icon: str
    is_active: bool = True
    is_trending: bool = False
    post_count: int = Field(default=0, ge=0)


class CategoryUpdate(PartialUpdate):
    """Schema for partially updating a category."""

    required_fields = frozenset({"name", "color", "icon", "is_active", "is_trending", "post_count"})

    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    is_active: Optional[bool] = None
    is_trending: Optional[bool] = None
    post_count: Optional[int] = Field(default=None, ge=0)
