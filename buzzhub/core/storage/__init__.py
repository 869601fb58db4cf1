"""
Storage backends for BuzzHub.

Use :func:`build_storage` to obtain the backend selected by
``BUZZHUB_STORAGE_BACKEND``. The SQL engine is only created when the ``sql``
backend is chosen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..database import create_all, create_engine, create_sessionmaker
from ..logging_config import get_logger
from .base import MONTHLY_GROWTH, BlogStorage
from .memory import MemStorage
from .seed import seed_default_data
from .sql import SqlStorage

if TYPE_CHECKING:
    from buzzhub.server.core.config import Settings

logger = get_logger(__name__)


async def build_storage(app_settings: "Settings") -> BlogStorage:
    """Create the configured storage backend.

    For the ``sql`` backend this creates the async engine from
    ``DATABASE_URL`` and ensures the tables exist.

    Args:
        app_settings: Application settings

    Returns:
        Ready-to-use storage backend
    """
    if app_settings.storage_backend == "sql":
        engine = create_engine(app_settings.database_url)
        await create_all(engine)
        logger.info("Using SQL storage backend")
        return SqlStorage(create_sessionmaker(engine), engine=engine)

    logger.info("Using in-memory storage backend")
    return MemStorage()


__all__ = [
    "MONTHLY_GROWTH",
    "BlogStorage",
    "MemStorage",
    "SqlStorage",
    "build_storage",
    "seed_default_data",
]
