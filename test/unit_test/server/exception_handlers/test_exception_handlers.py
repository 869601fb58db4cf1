"""
Unit tests for server exception handlers.

Tests cover the domain error mapping and the catch-all handler, both called
directly and through a small application.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from buzzhub.core.errors import (
    AuthenticationError,
    BuzzHubError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
    YouTubeApiError,
)
from buzzhub.server.exception_handlers import setup_exception_handlers
from buzzhub.server.exception_handlers.global_handler import (
    buzzhub_error_handler,
    global_exception_handler,
    status_code_for,
)


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/test"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestStatusCodeFor:
    @pytest.mark.parametrize(
        "exc, expected",
        [
            (InvalidInputError("bad"), 400),
            (AuthenticationError("who"), 401),
            (PermissionDeniedError("no"), 403),
            (NotFoundError("Post", 1), 404),
            (ConflictError("taken"), 409),
            (YouTubeApiError("down", status_code=503), 502),
            (BuzzHubError("other"), 500),
        ],
    )
    def test_mapping(self, exc, expected):
        assert status_code_for(exc) == expected


class TestBuzzHubErrorHandler:
    """Test suite for the domain error handler."""

    @pytest.mark.asyncio
    async def test_not_found_body(self, mock_request):
        response = await buzzhub_error_handler(mock_request, NotFoundError("Category", 3))

        assert response.status_code == 404
        assert json.loads(response.body.decode()) == {"detail": "Category not found"}

    @pytest.mark.asyncio
    async def test_client_errors_log_at_info(self, mock_request):
        with patch("buzzhub.server.exception_handlers.global_handler.logger") as mock_logger:
            await buzzhub_error_handler(mock_request, ConflictError("Email already exists"))

        mock_logger.info.assert_called_once()
        mock_logger.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_server_errors_log_at_error(self, mock_request):
        with patch("buzzhub.server.exception_handlers.global_handler.logger") as mock_logger:
            response = await buzzhub_error_handler(mock_request, YouTubeApiError("quota", status_code=403))

        assert response.status_code == 502
        mock_logger.error.assert_called_once()
        assert "YouTubeApiError" in mock_logger.error.call_args[0][0]


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch("buzzhub.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["client"] == "127.0.0.1"

    @pytest.mark.asyncio
    async def test_exception_handler_returns_500_json(self, mock_request):
        with patch("buzzhub.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, RuntimeError("boom"))

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = json.loads(response.body.decode())
        assert body["detail"] == "Internal server error"
        assert body["error_type"] == "RuntimeError"
        assert len(body["error_id"]) == 12

    @pytest.mark.asyncio
    async def test_error_ids_are_unique(self, mock_request):
        with patch("buzzhub.server.exception_handlers.global_handler.logger"):
            first = await global_exception_handler(mock_request, RuntimeError("a"))
            second = await global_exception_handler(mock_request, RuntimeError("b"))

        assert json.loads(first.body)["error_id"] != json.loads(second.body)["error_id"]

    @pytest.mark.asyncio
    async def test_request_without_client(self, mock_request):
        mock_request.client = None

        with patch("buzzhub.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestSetupExceptionHandlers:
    @pytest.fixture
    def app(self) -> FastAPI:
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/missing")
        async def missing():
            raise NotFoundError("Post", 1)

        @app.get("/disabled")
        async def disabled():
            raise PermissionDeniedError("Comments are disabled")

        @app.get("/crash")
        async def crash():
            raise RuntimeError("unexpected")

        return app

    def test_handlers_registered(self, app):
        assert BuzzHubError in app.exception_handlers
        assert Exception in app.exception_handlers

    @pytest.mark.asyncio
    async def test_handlers_in_application(self, app):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://localhost") as client:
            missing = await client.get("/missing")
            disabled = await client.get("/disabled")
            crash = await client.get("/crash")

        assert (missing.status_code, missing.json()) == (404, {"detail": "Post not found"})
        assert (disabled.status_code, disabled.json()) == (403, {"detail": "Comments are disabled"})
        assert crash.status_code == 500
        assert crash.json()["error_type"] == "RuntimeError"
