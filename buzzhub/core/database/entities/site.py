"""
Site-wide entity models: key/value settings and analytics events.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class SettingBase(Base):
    """Base fields for a site setting."""

    key: str = Field(index=True, unique=True)
    value: str = Field(description="Stored as text; booleans are 'true' / 'false'")
    category: str = Field(description="Grouping such as 'general' or 'content'")
    description: Optional[str] = Field(default=None)


class Setting(SettingBase, table=True):
    """Persistent site setting.

    Table: settings
    """

    __tablename__ = "settings"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))


class AnalyticsBase(Base):
    """Base fields for an analytics event."""

    post_id: Optional[int] = Field(default=None, foreign_key="posts.id", index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    action: str = Field(description="view, like, share or comment")
    user_agent: Optional[str] = Field(default=None)
    ip_address: Optional[str] = Field(default=None)
    referrer: Optional[str] = Field(default=None)


class Analytics(AnalyticsBase, table=True):
    """Persistent analytics event.

    Table: analytics
    """

    __tablename__ = "analytics"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
