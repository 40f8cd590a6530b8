"""
Weapon repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.weapons import Weapon
from .base import AsyncBaseRepository


class WeaponRepository(AsyncBaseRepository[Weapon]):
    """Data access for the ``weapons`` table.

    Does not check that the owning user exists; callers do that first.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Weapon)

    async def create(self, weapon: Weapon) -> Weapon:
        return await self._insert(weapon)

    async def get_by_id(self, weapon_id: int) -> Optional[Weapon]:
        stmt = select(Weapon).where(Weapon.weapon_id == weapon_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list(self) -> List[Weapon]:
        result = await self.session.execute(select(Weapon))
        return list(result.scalars().all())
