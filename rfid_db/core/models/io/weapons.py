"""
Weapon I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WeaponCreate(BaseModel):
    """Schema for creating a weapon via API.

    The handler checks ``weapon_rfid`` on the raw body before validating it
    into this model, so both fields stay optional here.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    user_id: Optional[int] = Field(default=None, description="Owning user; must already exist")
    weapon_rfid: Optional[str] = Field(default=None, description="RFID tag number of the weapon")


class WeaponRead(BaseModel):
    """Schema for reading a weapon from API."""

    model_config = ConfigDict(from_attributes=True)

    weapon_id: int
    user_id: Optional[int] = None
    weapon_rfid: str


class ErrorResponse(BaseModel):
    """Body of a client error response."""

    error: str
