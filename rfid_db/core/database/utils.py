"""
Database utility functions for engine and session management.

Functions:
- create_engine: Creates the async SQLAlchemy engine (the connection pool) with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- check_connection: Round-trips a trivial query to verify connectivity
"""

from __future__ import annotations

import re
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .base import Base


def normalize_url(db_url: str) -> str:
    """Rewrite ``postgresql://`` and other Postgres variants to ``postgresql+asyncpg://``."""
    return re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)


def create_engine(
    db_url: str,
    *,
    pool_size: Optional[int] = None,
    max_overflow: Optional[int] = None,
) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The engine owns the connection pool shared by every request. Pool bounds
    are only passed through when configured, otherwise the pool defaults apply.

    Args:
        db_url: Database connection URL
        pool_size: Optional number of persistent pooled connections
        max_overflow: Optional number of connections allowed above ``pool_size``

    Returns:
        Configured AsyncEngine instance
    """
    kwargs: dict[str, Any] = {}
    if pool_size is not None:
        kwargs["pool_size"] = pool_size
    if max_overflow is not None:
        kwargs["max_overflow"] = max_overflow
    return create_async_engine(normalize_url(db_url), **kwargs)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development; the production
    schema is expected to exist already.

    Args:
        engine: Async SQLAlchemy engine
    """
    # Register the table entities with the metadata
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_connection(engine: AsyncEngine) -> Any:
    """Acquire a pooled connection and ask the database for its current time.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        The database's current timestamp
    """
    async with engine.connect() as conn:
        result = await conn.execute(text("SELECT CURRENT_TIMESTAMP"))
        return result.scalar_one()
