"""
Database engine and session factory lifecycle.

The engine (and therefore the connection pool) is opened once when the server
starts and disposed when it stops. The resulting ``DatabaseResources`` is
handed to request handlers through dependency injection rather than kept as a
module-level global.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from rfid_db.core.logging_config import get_logger

from .utils import create_engine, create_sessionmaker

logger = get_logger(__name__)


@dataclass(frozen=True)
class DatabaseResources:
    """The process-wide engine and the session factory bound to it."""

    engine: AsyncEngine
    session_maker: async_sessionmaker[AsyncSession]


def open_database(
    db_url: str,
    *,
    pool_size: Optional[int] = None,
    max_overflow: Optional[int] = None,
) -> DatabaseResources:
    """Create the engine and its session factory.

    No connection is made until the first query.

    Args:
        db_url: Database connection URL
        pool_size: Optional number of persistent pooled connections
        max_overflow: Optional number of connections allowed above ``pool_size``

    Returns:
        The engine and session factory
    """
    engine = create_engine(db_url, pool_size=pool_size, max_overflow=max_overflow)
    logger.debug(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")
    return DatabaseResources(engine=engine, session_maker=create_sessionmaker(engine))


async def close_database(resources: DatabaseResources) -> None:
    """Dispose the engine, closing every pooled connection."""
    await resources.engine.dispose()
    logger.debug("Database engine disposed")
