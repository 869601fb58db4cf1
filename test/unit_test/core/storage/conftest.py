"""Fixtures for storage backend tests.

Every test taking ``storage`` runs once against the in-memory backend and once
against the SQL backend on in-memory SQLite.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel.pool import StaticPool

from buzzhub.core.database import create_all, create_sessionmaker
from buzzhub.core.storage import BlogStorage, MemStorage, SqlStorage

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


async def build_sqlite_storage() -> SqlStorage:
    """SQL backend over a fresh in-memory SQLite database."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    return SqlStorage(create_sessionmaker(engine), engine=engine)


@pytest.fixture(params=["memory", "sql"])
async def storage(request) -> AsyncGenerator[BlogStorage, None]:
    backend: BlogStorage = MemStorage() if request.param == "memory" else await build_sqlite_storage()
    try:
        yield backend
    finally:
        await backend.close()
