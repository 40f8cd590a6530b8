"""
User entity model.

Users are created once and never updated or deleted by the service.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class User(Base, table=True):
    """Persistent user record.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    user_id: Optional[int] = Field(default=None, primary_key=True)
    name: Optional[str] = Field(default=None)
    age: Optional[int] = Field(default=None)
    rank: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    # Uniqueness is the schema's job, handlers never check it
    rfid_number: Optional[str] = Field(default=None, unique=True)

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id}, name={self.name}, rfid_number={self.rfid_number})"
