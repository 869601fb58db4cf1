"""
Cached YouTube title lookup.

``YouTubeTitleService.get_title`` serves titles from the storage-backed cache
and falls back to the YouTube Data API on a miss, caching whatever the API
returns. Lookup failures are logged and reported as ``None``; they never
propagate to the caller.
"""

from __future__ import annotations

from typing import Optional

from ..core.database.entities import YoutubeCache
from ..core.errors import YouTubeApiError
from ..core.logging_config import get_logger
from ..core.monitoring import log_error, log_youtube_lookup
from ..core.storage import BlogStorage
from .client import YouTubeApiClient

logger = get_logger(__name__)


class YouTubeTitleService:
    """Resolve video ids to titles through the cache.

    Args:
        storage: Storage holding the ``youtube_cache`` entries
        api_client: API client, or ``None`` when no API key is configured
        cache_expiry_days: Age after which :meth:`sweep_expired` removes entries
    """

    def __init__(
        self,
        storage: BlogStorage,
        api_client: Optional[YouTubeApiClient] = None,
        cache_expiry_days: int = 30,
    ) -> None:
        self.storage = storage
        self.api_client = api_client
        self.cache_expiry_days = cache_expiry_days

    async def get_title(self, video_id: str) -> Optional[str]:
        cached = await self.storage.get_youtube_cache(video_id)
        if cached is not None:
            log_youtube_lookup(video_id, cache_hit=True, resolved=True)
            return cached.title

        if self.api_client is None:
            logger.debug(f"No YouTube API key configured; cannot resolve {video_id}")
            log_youtube_lookup(video_id, cache_hit=False, resolved=False)
            return None

        try:
            snippet = await self.api_client.get_video_snippet(video_id)
        except YouTubeApiError as e:
            logger.error(f"Error fetching YouTube video title for {video_id}: {e} (status={e.status_code})")
            log_error("YouTubeApiError", str(e), {"video_id": video_id, "status_code": e.status_code})
            return None

        if snippet is None:
            log_youtube_lookup(video_id, cache_hit=False, resolved=False)
            return None

        # A concurrent request may have cached the video meanwhile
        if await self.storage.get_youtube_cache(video_id) is None:
            await self.storage.create_youtube_cache(
                YoutubeCache(
                    video_id=video_id,
                    title=snippet.title,
                    thumbnail=snippet.thumbnail,
                    channel_title=snippet.channel_title,
                )
            )
        log_youtube_lookup(video_id, cache_hit=False, resolved=True)
        return snippet.title

    async def sweep_expired(self) -> int:
        """Remove cache entries older than ``cache_expiry_days``."""
        return await self.storage.clean_old_youtube_cache(self.cache_expiry_days)

    async def aclose(self) -> None:
        if self.api_client is not None:
            await self.api_client.aclose()
