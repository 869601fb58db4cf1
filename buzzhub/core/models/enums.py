"""Domain enums for BuzzHub models."""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Account roles, from least to most privileged."""

    user = "user"
    author = "author"
    editor = "editor"
    admin = "admin"
    super_admin = "super_admin"


class PostStatus(str, Enum):
    """Publication status of a post."""

    draft = "draft"
    published = "published"
    scheduled = "scheduled"


class ReactionType(str, Enum):
    """Reactions a reader can leave on a post."""

    like = "like"
    love = "love"
    laugh = "laugh"
    angry = "angry"
    sad = "sad"
    wow = "wow"


class AnalyticsAction(str, Enum):
    """Tracked reader actions."""

    view = "view"
    like = "like"
    share = "share"
    comment = "comment"


class ExportFormat(str, Enum):
    """Formats supported by the post export endpoint."""

    json = "json"
    csv = "csv"
    xml = "xml"


class ContentTone(str, Enum):
    """Writing tone requested from the content generator."""

    professional = "professional"
    casual = "casual"
    technical = "technical"
    friendly = "friendly"
