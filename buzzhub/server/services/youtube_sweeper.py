"""
Background sweep of the YouTube title cache.

Started from the application lifespan; removes entries older than the
configured expiry every ``interval_seconds`` until cancelled.
"""

from __future__ import annotations

import asyncio

from buzzhub.core.logging_config import get_logger
from buzzhub.core.monitoring import log_error
from buzzhub.core.storage import BlogStorage

logger = get_logger(__name__)


async def sweep_once(storage: BlogStorage, max_age_days: int) -> int:
    removed = await storage.clean_old_youtube_cache(max_age_days)
    logger.debug(f"YouTube cache sweep removed {removed} entries")
    return removed


async def run_cache_sweeper(storage: BlogStorage, interval_seconds: int, max_age_days: int) -> None:
    """Sweep forever; failures are logged and the loop keeps going."""
    logger.info(f"YouTube cache sweeper started (interval={interval_seconds}s, max_age={max_age_days}d)")
    while True:
        try:
            await sweep_once(storage, max_age_days)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"YouTube cache sweep failed: {e}", exc_info=True)
            log_error(type(e).__name__, str(e), {"task": "youtube_cache_sweep"})
        await asyncio.sleep(interval_seconds)
