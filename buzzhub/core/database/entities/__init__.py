"""
Database entity models.

Importing this package registers every table with ``Base.metadata``.
"""

from .categories import Category, CategoryBase
from .comments import Comment, CommentBase
from .posts import Post, PostBase
from .reactions import Reaction, ReactionBase, SavedPost, SavedPostBase
from .site import Analytics, AnalyticsBase, Setting, SettingBase
from .users import User, UserBase
from .youtube_cache import YoutubeCache, YoutubeCacheBase

__all__ = [
    "Analytics",
    "AnalyticsBase",
    "Category",
    "CategoryBase",
    "Comment",
    "CommentBase",
    "Post",
    "PostBase",
    "Reaction",
    "ReactionBase",
    "SavedPost",
    "SavedPostBase",
    "Setting",
    "SettingBase",
    "User",
    "UserBase",
    "YoutubeCache",
    "YoutubeCacheBase",
]
