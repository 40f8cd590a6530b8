"""
Access log repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.access_log import AccessLogEntry
from .base import AsyncBaseRepository


class AccessLogRepository(AsyncBaseRepository[AccessLogEntry]):
    """Data access for the ``access_log`` table."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AccessLogEntry)

    async def create(self, entry: AccessLogEntry) -> AccessLogEntry:
        return await self._insert(entry)

    async def get_by_id(self, log_id: int) -> Optional[AccessLogEntry]:
        stmt = select(AccessLogEntry).where(AccessLogEntry.log_id == log_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list(self) -> List[AccessLogEntry]:
        result = await self.session.execute(select(AccessLogEntry))
        return list(result.scalars().all())
