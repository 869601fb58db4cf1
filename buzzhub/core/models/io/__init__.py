"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- users: accounts and authentication
- posts: posts and categories
- engagement: comments, reactions and saved posts
- site: settings, analytics and dashboard
- media: YouTube cache, content generation and SEO
"""

from .engagement import (
    CommentCreate,
    CommentRead,
    CommentUpdate,
    ReactionCreate,
    ReactionRead,
    ReactionSummary,
    SavedPostCreate,
    SavedPostRead,
)
from .media import (
    CacheSweepResult,
    GenerateContentRequest,
    GenerateContentResponse,
    MetaTagsRequest,
    MetaTagsResponse,
    SEOAnalyzeRequest,
    SEOMetrics,
    SlugRequest,
    SlugResponse,
    YoutubeCacheCreate,
    YoutubeCacheRead,
    YoutubeTitleRead,
)
from .posts import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    PostCreate,
    PostRead,
    PostUpdate,
)
from .site import (
    AnalyticsCreate,
    AnalyticsRead,
    DashboardStats,
    MonthlyGrowth,
    SettingCreate,
    SettingRead,
    SettingValueUpdate,
)
from .users import (
    AuthResponse,
    LoginRequest,
    PermissionsRead,
    TokenRefreshResponse,
    UserCreate,
    UserRead,
    UserUpdate,
)

__all__ = [
    "AnalyticsCreate",
    "AnalyticsRead",
    "AuthResponse",
    "CacheSweepResult",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "CommentCreate",
    "CommentRead",
    "CommentUpdate",
    "DashboardStats",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "LoginRequest",
    "MetaTagsRequest",
    "MetaTagsResponse",
    "MonthlyGrowth",
    "PermissionsRead",
    "PostCreate",
    "PostRead",
    "PostUpdate",
    "ReactionCreate",
    "ReactionRead",
    "ReactionSummary",
    "SEOAnalyzeRequest",
    "SEOMetrics",
    "SavedPostCreate",
    "SavedPostRead",
    "SettingCreate",
    "SettingRead",
    "SettingValueUpdate",
    "SlugRequest",
    "SlugResponse",
    "TokenRefreshResponse",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
