"""
User entity model.

Users author posts, comment, react and save posts. ``role`` drives the
permission helpers in :mod:`buzzhub.auth.permissions`.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class UserBase(Base):
    """Base fields for a user."""

    username: str = Field(index=True, unique=True, description="Unique login name")
    email: str = Field(index=True, unique=True, description="Unique e-mail address")
    role: str = Field(default="user", description="user, admin, author, editor or super_admin")
    profile_image: Optional[str] = Field(default=None, description="Avatar URL")
    badges: List[str] = Field(default_factory=list, sa_column=Column(JSON), description="Earned badges")
    blogger_connected: bool = Field(default=False, description="Whether a Blogger account is linked")
    blogger_api_key: Optional[str] = Field(default=None, description="Blogger API key")
    blog_id: Optional[str] = Field(default=None, description="Linked Blogger blog id")
    blog_url: Optional[str] = Field(default=None, description="Linked Blogger blog URL")
    working_score: int = Field(default=0, description="Contribution score")
    is_active: bool = Field(default=True, description="Inactive accounts cannot log in")


class User(UserBase, table=True):
    """Persistent user account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    password: str = Field(description="Account password")
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, role={self.role})"
