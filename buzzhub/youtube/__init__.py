"""
YouTube integration: the Data API client and the cached title lookup.
"""

from .client import VideoSnippet, YouTubeApiClient
from .service import YouTubeTitleService

__all__ = ["VideoSnippet", "YouTubeApiClient", "YouTubeTitleService"]
