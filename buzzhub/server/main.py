"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

import asyncio
import contextlib
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from buzzhub import __version__
from buzzhub.core.logging_config import get_logger, setup_logging
from buzzhub.core.monitoring import initialize_logfire
from buzzhub.core.storage import build_storage, seed_default_data
from buzzhub.youtube.client import YouTubeApiClient

from .api import (
    analytics,
    auth,
    categories,
    comments,
    export,
    generation,
    health,
    posts,
    reactions,
    seo,
    users,
    youtube,
)
from .api import settings as settings_api
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.youtube_sweeper import run_cache_sweeper

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Startup builds the configured storage backend (seeding it when enabled),
    the YouTube API client when a key is configured, and the background cache
    sweeper. Shutdown stops the sweeper and releases the client and storage.
    """
    logger.info("Starting up BuzzHub Server...")
    storage = await build_storage(settings)
    app.state.storage = storage
    if settings.seed_default_data:
        await seed_default_data(storage)

    youtube_config = settings.youtube
    app.state.youtube_client = None
    if youtube_config.api_key:
        app.state.youtube_client = YouTubeApiClient(
            youtube_config.api_key,
            base_url=youtube_config.api_base_url,
            timeout=youtube_config.timeout_seconds,
        )
    else:
        logger.info("YOUTUBE_API_KEY is not set; title lookups are served from the cache only")

    sweeper = None
    if youtube_config.sweep_interval_seconds > 0:
        sweeper = asyncio.create_task(
            run_cache_sweeper(storage, youtube_config.sweep_interval_seconds, youtube_config.cache_expiry_days)
        )

    yield

    logger.info("Shutting down BuzzHub Server...")
    if sweeper is not None:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper
    if app.state.youtube_client is not None:
        await app.state.youtube_client.aclose()
    await storage.close()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    BuzzHub Server API

    Backend for the BuzzHub viral content platform: posts, categories, comments,
    reactions, site settings, analytics, SEO tooling, templated post generation
    and a cached YouTube title lookup.
    """,
    version=__version__,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)
setup_exception_handlers(app)
initialize_logfire(app)


app.include_router(health.router, tags=["health"])
for router in (
    auth.router,
    users.router,
    posts.router,
    categories.router,
    comments.router,
    reactions.router,
    settings_api.router,
    analytics.router,
    youtube.router,
    generation.router,
    export.router,
    seo.router,
):
    app.include_router(router, prefix=constant.API_PREFIX)


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "buzzhub.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
