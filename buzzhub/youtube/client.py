from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel

from ..core.errors import YouTubeApiError
from ..core.logging_config import get_logger


class VideoSnippet(BaseModel):
    """Subset of a YouTube ``videos`` resource snippet that BuzzHub caches."""

    video_id: str
    title: str
    thumbnail: Optional[str] = None
    channel_title: Optional[str] = None


class YouTubeApiClient:
    """
    Thin async HTTP client for the YouTube Data API v3.

    Responsibilities:
    - get_video_snippet: resolve a video id to its title, thumbnail and channel

    Note: This client does no caching; see ``YouTubeTitleService`` for that.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://www.googleapis.com/youtube/v3",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._owns_client = client is None
        self._logger = get_logger(__name__)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_video_snippet(self, video_id: str) -> Optional[VideoSnippet]:
        """Fetch the snippet of one video.

        Returns:
            The snippet, or ``None`` when the API knows no such video

        Raises:
            YouTubeApiError: On transport failures, non-2xx responses and
                response bodies that are not a ``videos`` listing
        """
        params = {"part": "snippet", "id": video_id, "key": self.api_key}
        try:
            self._logger.debug("YouTubeApiClient.get_video_snippet: GET %s/videos id=%s", self.base_url, video_id)
            r = await self._client.get(f"{self.base_url}/videos", params=params)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise YouTubeApiError(
                f"YouTube videos lookup failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise YouTubeApiError(f"YouTube videos lookup failed: {e}", details=str(e)) from e

        try:
            data = r.json()
        except ValueError as e:
            raise YouTubeApiError("YouTube videos lookup failed: invalid response", details=r.text) from e
        items = data.get("items") if isinstance(data, dict) else None
        if not items:
            self._logger.debug("YouTubeApiClient.get_video_snippet: no items for id=%s", video_id)
            return None
        item = items[0] if isinstance(items, list) else None
        snippet = (item.get("snippet") or {}) if isinstance(item, dict) else None
        if not isinstance(snippet, dict):
            raise YouTubeApiError("YouTube videos lookup failed: invalid response", details=r.text)
        try:
            return self._parse_snippet(video_id, snippet)
        except ValueError as e:
            raise YouTubeApiError("YouTube videos lookup failed: invalid response", details=r.text) from e

    def _parse_snippet(self, video_id: str, snippet: Dict[str, Any]) -> Optional[VideoSnippet]:
        title = snippet.get("title")
        if not title:
            return None
        thumbnails = snippet.get("thumbnails")
        if not isinstance(thumbnails, dict):
            thumbnails = {}
        thumbnail = None
        for size in ("high", "medium", "default"):
            if isinstance(thumbnails.get(size), dict) and thumbnails[size].get("url"):
                thumbnail = thumbnails[size]["url"]
                break
        return VideoSnippet(
            video_id=video_id,
            title=title,
            thumbnail=thumbnail,
            channel_title=snippet.get("channelTitle"),
        )
