"""
Unit tests for the request logging middleware.

This test suite covers:
- Request/response processing
- Performance metrics collection
- Error handling and exception tracking
- Slow request detection
- Header injection
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.responses import Response

from buzzhub.server.middleware.logfire_middleware import LogfireMiddleware


def make_request(method: str = "GET", path: str = "/api/posts") -> AsyncMock:
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    request.url.query = ""
    request.state = MagicMock()
    return request


class TestLogfireMiddlewareDispatch:
    """Test LogfireMiddleware.dispatch method."""

    @pytest.mark.asyncio
    async def test_middleware_processes_successful_request(self):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("buzzhub.server.middleware.logfire_middleware.log_api_request") as mock_log:
            response = await middleware.dispatch(make_request(), call_next)

        assert response.status_code == 200
        mock_log.assert_called_once()
        call_args = mock_log.call_args
        assert call_args[1]["method"] == "GET"
        assert call_args[1]["path"] == "/api/posts"
        assert call_args[1]["status_code"] == 200
        assert call_args[1]["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_middleware_adds_process_time_header(self):
        async def call_next(request):
            return Response(content="created", status_code=201)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("buzzhub.server.middleware.logfire_middleware.log_api_request"):
            response = await middleware.dispatch(make_request("POST"), call_next)

        assert float(response.headers["X-Process-Time"]) >= 0

    @pytest.mark.asyncio
    async def test_middleware_records_start_time(self):
        request = make_request()

        async def call_next(req):
            return Response(status_code=204)

        middleware = LogfireMiddleware(app=AsyncMock())
        with patch("buzzhub.server.middleware.logfire_middleware.log_api_request"):
            await middleware.dispatch(request, call_next)

        assert isinstance(request.state.start_time, float)

    @pytest.mark.asyncio
    async def test_middleware_reraises_and_logs_errors(self):
        async def call_next(request):
            raise ValueError("handler failed")

        middleware = LogfireMiddleware(app=AsyncMock())

        with (
            patch("buzzhub.server.middleware.logfire_middleware.log_api_request") as mock_log,
            patch("buzzhub.server.middleware.logfire_middleware.logger") as mock_logger,
        ):
            with pytest.raises(ValueError, match="handler failed"):
                await middleware.dispatch(make_request("DELETE"), call_next)

        assert mock_log.call_args[1]["status_code"] == 500
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[1]["extra"]["error"] == "handler failed"

    @pytest.mark.asyncio
    async def test_slow_request_warning(self):
        async def call_next(request):
            return Response(status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        # perf_counter is read at start and end of the request
        with (
            patch("buzzhub.server.middleware.logfire_middleware.time.perf_counter", side_effect=[10.0, 12.5]),
            patch("buzzhub.server.middleware.logfire_middleware.log_api_request"),
            patch("buzzhub.server.middleware.logfire_middleware.logger") as mock_logger,
        ):
            response = await middleware.dispatch(make_request(), call_next)

        assert response.headers["X-Process-Time"] == "2500.00"
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[1]["extra"]["duration_ms"] == 2500.0

    @pytest.mark.asyncio
    async def test_fast_request_has_no_warning(self):
        async def call_next(request):
            return Response(status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with (
            patch("buzzhub.server.middleware.logfire_middleware.time.perf_counter", side_effect=[1.0, 1.2]),
            patch("buzzhub.server.middleware.logfire_middleware.log_api_request"),
            patch("buzzhub.server.middleware.logfire_middleware.logger") as mock_logger,
        ):
            await middleware.dispatch(make_request(), call_next)

        mock_logger.warning.assert_not_called()


class TestLogfireMiddlewareIntegration:
    @pytest.mark.asyncio
    async def test_header_on_real_application(self):
        app = FastAPI()
        app.add_middleware(LogfireMiddleware)

        @app.get("/ping")
        async def ping():
            return {"pong": True}

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            response = await client.get("/ping")

        assert response.status_code == 200
        assert "x-process-time" in response.headers
