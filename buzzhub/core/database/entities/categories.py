"""Category entity model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class CategoryBase(Base):
    """Base fields for a category."""

    name: str = Field(index=True, unique=True, description="Display name, referenced by posts")
    description: Optional[str] = Field(default=None)
    color: str = Field(description="Hex colour used by the UI")
    icon: str = Field(description="Emoji or icon name")
    is_active: bool = Field(default=True)
    is_trending: bool = Field(default=False)
    post_count: int = Field(default=0, description="Number of published posts in the category")


class Category(CategoryBase, table=True):
    """Persistent post category.

    Table: categories
    """

    __tablename__ = "categories"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
