"""
User and authentication I/O models for API requests and responses.

Passwords are accepted on input only; ``UserRead`` never exposes them.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import UserRole
from .base import PartialUpdate


class UserRead(BaseModel):
    """Public view of a user account."""

    id: int
    username: str
    email: str
    role: UserRole
    profile_image: Optional[str] = None
    badges: List[str] = Field(default_factory=list)
    blogger_connected: bool = False
    blog_id: Optional[str] = None
    blog_url: Optional[str] = None
    working_score: int = 0
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    username: str = Field(min_length=1, max_length=64, description="Unique login name")
    email: str = Field(min_length=3, description="Unique e-mail address")
    password: str = Field(min_length=1, description="Account password")
    role: UserRole = Field(default=UserRole.user)
    profile_image: Optional[str] = None
    badges: List[str] = Field(default_factory=list)
    blogger_connected: bool = False
    blogger_api_key: Optional[str] = None
    blog_id: Optional[str] = None
    blog_url: Optional[str] = None
    working_score: int = 0
    is_active: bool = True


class UserUpdate(PartialUpdate):
    """Schema for partially updating a user."""

    required_fields = frozenset(
        {"username", "email", "password", "role", "badges", "blogger_connected", "working_score", "is_active"}
    )

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None
    profile_image: Optional[str] = None
    badges: Optional[List[str]] = None
    blogger_connected: Optional[bool] = None
    blogger_api_key: Optional[str] = None
    blog_id: Optional[str] = None
    blog_url: Optional[str] = None
    working_score: Optional[int] = None
    is_active: Optional[bool] = None


class LoginRequest(BaseModel):
    """Credentials for ``POST /api/auth/login``."""

    email: str
    password: str


class AuthResponse(BaseModel):
    """Body returned by register and login."""

    user: UserRead
    token: Optional[str] = Field(default=None, description="The auth token also set as the auth_token cookie")


class TokenRefreshResponse(BaseModel):
    """Outcome of a token refresh attempt."""

    refreshed: bool = Field(description="Whether a new auth token was issued")
    token: Optional[str] = None


class PermissionsRead(BaseModel):
    """Capabilities derived from the caller's role."""

    role: UserRole
    is_admin: bool
    can_edit: bool
    can_delete: bool
    can_manage_users: bool
    can_view_analytics: bool
    can_access_admin_panel: bool
