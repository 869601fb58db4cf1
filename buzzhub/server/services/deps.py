"""
Service Dependencies.

Providers used with ``Depends`` by the API routers. The storage backend and
the YouTube API client are created by the application lifespan and kept on
``app.state``; everything else is built per request on top of them.
"""

from typing import Annotated, Optional

from fastapi import Depends, Request

from buzzhub.auth.tokens import AuthTokenManager
from buzzhub.content.generator import BlogPostGenerator
from buzzhub.core.storage import BlogStorage
from buzzhub.server.core.config import settings
from buzzhub.youtube.client import YouTubeApiClient
from buzzhub.youtube.service import YouTubeTitleService

from .auth import AccountService
from .engagement import EngagementService
from .posts import PostService


def get_storage(request: Request) -> BlogStorage:
    return request.app.state.storage


StorageDep = Annotated[BlogStorage, Depends(get_storage)]


def get_youtube_client(request: Request) -> Optional[YouTubeApiClient]:
    return getattr(request.app.state, "youtube_client", None)


def get_post_service(storage: StorageDep) -> PostService:
    return PostService(storage)


def get_engagement_service(storage: StorageDep) -> EngagementService:
    return EngagementService(storage)


def get_account_service(storage: StorageDep) -> AccountService:
    return AccountService(storage)


def get_youtube_service(
    storage: StorageDep,
    client: Annotated[Optional[YouTubeApiClient], Depends(get_youtube_client)],
) -> YouTubeTitleService:
    return YouTubeTitleService(storage, client, cache_expiry_days=settings.youtube.cache_expiry_days)


def get_token_manager() -> AuthTokenManager:
    return AuthTokenManager(expiry_days=settings.auth.token_expiry_days)


def get_content_generator() -> BlogPostGenerator:
    return BlogPostGenerator()


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
EngagementServiceDep = Annotated[EngagementService, Depends(get_engagement_service)]
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
YouTubeServiceDep = Annotated[YouTubeTitleService, Depends(get_youtube_service)]
TokenManagerDep = Annotated[AuthTokenManager, Depends(get_token_manager)]
GeneratorDep = Annotated[BlogPostGenerator, Depends(get_content_generator)]
