"""
Site I/O models: settings, analytics events and the dashboard summary.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import AnalyticsAction


class SettingRead(BaseModel):
    """Schema for reading a site setting."""

    id: int
    key: str
    value: str
    category: str
    description: Optional[str] = None
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SettingCreate(BaseModel):
    """Schema for creating a site setting."""

    key: str = Field(min_length=1)
    value: str
    category: str = Field(default="general")
    description: Optional[str] = None


class SettingValueUpdate(BaseModel):
    """Schema for ``PUT /api/settings/{key}``."""

    value: str


class AnalyticsRead(BaseModel):
    """Schema for reading an analytics event."""

    id: int
    post_id: Optional[int] = None
    user_id: Optional[int] = None
    action: AnalyticsAction
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    referrer: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AnalyticsCreate(BaseModel):
    """Schema for recording an analytics event."""

    post_id: Optional[int] = None
    user_id: Optional[int] = None
    action: AnalyticsAction
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    referrer: Optional[str] = None


class MonthlyGrowth(BaseModel):
    """Month-over-month growth percentages."""

    posts: int
    views: int
    engagement: int
    users: int


class DashboardStats(BaseModel):
    """Admin dashboard summary."""

    total_posts: int
    total_views: int
    total_engagement: int
    active_users: int
    monthly_growth: MonthlyGrowth
