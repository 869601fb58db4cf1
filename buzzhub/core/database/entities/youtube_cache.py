"""
YouTube title cache entity.

Entries are keyed by ``video_id`` and swept once older than the configured
expiry (30 days by default).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class YoutubeCacheBase(Base):
    """Base fields for a cached video."""

    video_id: str = Field(index=True, unique=True)
    title: str
    thumbnail: Optional[str] = Field(default=None)
    duration: Optional[str] = Field(default=None)
    channel_title: Optional[str] = Field(default=None)


class YoutubeCache(YoutubeCacheBase, table=True):
    """Persistent cache entry for a YouTube video title.

    Table: youtube_cache
    """

    __tablename__ = "youtube_cache"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
