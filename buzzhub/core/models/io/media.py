"""
YouTube cache, content generation and SEO I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import ContentTone
from .posts import PostRead


class YoutubeCacheRead(BaseModel):
    """Schema for reading a cached video."""

    id: int
    video_id: str
    title: str
    thumbnail: Optional[str] = None
    duration: Optional[str] = None
    channel_title: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class YoutubeCacheCreate(BaseModel):
    """Schema for caching a video title."""

    video_id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    thumbnail: Optional[str] = None
    duration: Optional[str] = None
    channel_title: Optional[str] = None


class YoutubeTitleRead(BaseModel):
    """Resolved title for a video id."""

    video_id: str
    title: str


class CacheSweepResult(BaseModel):
    """Outcome of an expired-entry sweep."""

    removed: int


class GenerateContentRequest(BaseModel):
    """Body of ``POST /api/generate-content``.

    Fields are optional at the schema level so that a missing value yields
    the 400 "Missing required parameters" response rather than a 422.
    """

    category: Optional[str] = None
    post_count: Optional[int] = Field(default=None, ge=0)
    cohere_api_key: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    tone: ContentTone = ContentTone.professional


class GenerateContentResponse(BaseModel):
    """Result of a generation batch."""

    success: bool
    posts_generated: int
    posts: List[PostRead]


class SEOAnalyzeRequest(BaseModel):
    """Input of the SEO analyzer."""

    title: str = ""
    meta_description: str = ""
    content: str = ""
    tags: List[str] = Field(default_factory=list)


class TitleAnalysis(BaseModel):
    length: int
    has_keywords: bool
    score: int


class DescriptionAnalysis(BaseModel):
    length: int
    has_keywords: bool
    score: int


class ContentAnalysis(BaseModel):
    word_count: int
    has_headings: bool
    has_images: bool
    score: int


class KeywordAnalysis(BaseModel):
    density: float
    score: int


class SEOMetrics(BaseModel):
    """Full SEO report for a piece of content."""

    score: int = Field(description="Overall score, the rounded mean of the four sub-scores")
    grade: str
    title: TitleAnalysis
    description: DescriptionAnalysis
    content: ContentAnalysis
    keywords: KeywordAnalysis
    suggestions: List[str]


class MetaTagsRequest(BaseModel):
    """Input for social meta tag generation."""

    title: str
    description: str
    slug: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None
    type: str = "article"


class MetaTagsResponse(BaseModel):
    canonical_url: Optional[str] = None
    open_graph: Dict[str, str]
    twitter: Dict[str, str]


class SlugRequest(BaseModel):
    title: str


class SlugResponse(BaseModel):
    slug: str
