"""
Weapon entity model.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Weapon(Base, table=True):
    """Weapon issued to a user.

    The owning user must exist when the weapon is created; the API checks this
    before inserting and the foreign key backs it up.

    Table: weapons
    """

    __tablename__ = "weapons"
    __table_args__ = ({"extend_existing": True},)

    weapon_id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.user_id")
    weapon_rfid: str = Field(nullable=False)

    def __repr__(self) -> str:
        return f"Weapon(weapon_id={self.weapon_id}, user_id={self.user_id}, weapon_rfid={self.weapon_rfid})"
