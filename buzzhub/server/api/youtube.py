"""
API endpoints for the YouTube title cache.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from buzzhub.core.database.entities import YoutubeCache
from buzzhub.core.models.io import CacheSweepResult, YoutubeCacheCreate, YoutubeCacheRead, YoutubeTitleRead
from buzzhub.server.services.deps import StorageDep, YouTubeServiceDep

router = APIRouter(tags=["youtube"])


@router.delete(
    "/youtube-cache/expired",
    response_model=CacheSweepResult,
    summary="Sweep Expired Cache Entries",
    description="Remove cache entries older than the configured expiry.",
)
async def sweep_expired(youtube: YouTubeServiceDep) -> CacheSweepResult:
    return CacheSweepResult(removed=await youtube.sweep_expired())


@router.get(
    "/youtube-cache/{video_id}",
    response_model=YoutubeCacheRead,
    summary="Get Cached Video",
    responses={404: {"description": "Video not cached"}},
)
async def get_cached_video(video_id: str, storage: StorageDep) -> YoutubeCacheRead:
    entry = await storage.get_youtube_cache(video_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video not found in cache")
    return YoutubeCacheRead.model_validate(entry)


@router.post(
    "/youtube-cache",
    response_model=YoutubeCacheRead,
    status_code=status.HTTP_201_CREATED,
    summary="Cache Video",
    responses={
        200: {"description": "Video already cached; the existing entry is returned"},
        201: {"description": "Video cached"},
    },
)
async def cache_video(data: YoutubeCacheCreate, response: Response, storage: StorageDep) -> YoutubeCacheRead:
    """
    Cache a video title.

    Video ids are unique in the cache: posting an id that is already cached
    leaves the entry untouched and returns it with status 200.
    """
    existing = await storage.get_youtube_cache(data.video_id)
    if existing is not None:
        response.status_code = status.HTTP_200_OK
        return YoutubeCacheRead.model_validate(existing)
    return YoutubeCacheRead.model_validate(await storage.create_youtube_cache(YoutubeCache(**data.model_dump())))


@router.get(
    "/youtube/{video_id}/title",
    response_model=YoutubeTitleRead,
    summary="Resolve Video Title",
    description="Title from the cache, or from the YouTube Data API on a cache miss.",
    responses={404: {"description": "Title could not be resolved"}},
)
async def get_video_title(video_id: str, youtube: YouTubeServiceDep) -> YoutubeTitleRead:
    title = await youtube.get_title(video_id)
    if title is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Video title not available")
    return YoutubeTitleRead(video_id=video_id, title=title)
