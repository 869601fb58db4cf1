"""Unit tests for server services dependencies.

Tests verify that the ``Annotated`` dependency aliases point at their
providers and that the providers build services on top of the objects kept
on ``app.state``.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from buzzhub.auth.tokens import AuthTokenManager
from buzzhub.content.generator import BlogPostGenerator
from buzzhub.core.storage import MemStorage
from buzzhub.server.core.config import AuthConfig, YouTubeConfig
from buzzhub.server.services import deps
from buzzhub.server.services.auth import AccountService
from buzzhub.server.services.engagement import EngagementService
from buzzhub.server.services.posts import PostService
from buzzhub.youtube.service import YouTubeTitleService


def make_request(**state):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


class TestAnnotatedDeps:
    @pytest.mark.parametrize(
        "alias, provider",
        [
            (deps.StorageDep, deps.get_storage),
            (deps.PostServiceDep, deps.get_post_service),
            (deps.EngagementServiceDep, deps.get_engagement_service),
            (deps.AccountServiceDep, deps.get_account_service),
            (deps.YouTubeServiceDep, deps.get_youtube_service),
            (deps.TokenManagerDep, deps.get_token_manager),
            (deps.GeneratorDep, deps.get_content_generator),
        ],
    )
    def test_alias_uses_provider(self, alias, provider):
        assert hasattr(alias, "__metadata__")
        assert alias.__metadata__[0].dependency is provider


class TestProviders:
    def test_storage_from_app_state(self):
        storage = MemStorage()
        assert deps.get_storage(make_request(storage=storage)) is storage

    def test_youtube_client_defaults_to_none(self):
        assert deps.get_youtube_client(make_request()) is None

    def test_services_share_storage(self):
        storage = MemStorage()

        for provider, service_type in (
            (deps.get_post_service, PostService),
            (deps.get_engagement_service, EngagementService),
            (deps.get_account_service, AccountService),
        ):
            service = provider(storage)
            assert isinstance(service, service_type)
            assert service.storage is storage

    def test_youtube_service_uses_configured_expiry(self):
        with patch.object(deps, "settings") as mock_settings:
            mock_settings.youtube = YouTubeConfig(cache_expiry_days=12)
            service = deps.get_youtube_service(MemStorage(), None)

        assert isinstance(service, YouTubeTitleService)
        assert service.cache_expiry_days == 12
        assert service.api_client is None

    def test_token_manager_uses_configured_expiry(self):
        with patch.object(deps, "settings") as mock_settings:
            mock_settings.auth = AuthConfig(token_expiry_days=2)
            manager = deps.get_token_manager()

        assert isinstance(manager, AuthTokenManager)
        assert manager.expiry_days == 2

    def test_content_generator(self):
        assert isinstance(deps.get_content_generator(), BlogPostGenerator)
