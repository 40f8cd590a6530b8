"""
Database Dependencies.

Handlers never reach for a global engine: the lifespan stores the opened
``DatabaseResources`` on ``app.state`` and these dependencies hand each request
its own session, closed (and its connection returned to the pool) whether the
handler succeeds or raises.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from rfid_db.core.database import DatabaseResources
from rfid_db.core.database.repositories import SqlRepoBundle, build_sql_repos


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session from the shared pool.
    """
    database: DatabaseResources = request.app.state.database
    async with database.session_maker() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_repos(session: SessionDep) -> SqlRepoBundle:
    """Repositories bound to the request's session."""
    return build_sql_repos(session)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]
