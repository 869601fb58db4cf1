"""
Database layer for BuzzHub.

This package provides the relational schema that the ``sql`` storage backend
persists to (Postgres in production, SQLite in tests).

Structure:
- entities/: SQLModel table models, one module per business area
- utils.py: Engine, session factory and schema creation helpers
"""

from .base import Base, utc_now
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "normalize_database_url",
    "utc_now",
]
