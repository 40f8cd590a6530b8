"""
User I/O models for API requests and responses.

Every request field is optional: presence, range and uniqueness are left to
the table's column constraints. Numbers sent for text fields are stored as
their text form.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for creating a user via API."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = Field(default=None, description="Full name")
    age: Optional[int] = Field(default=None, description="Age in years")
    rank: Optional[str] = Field(default=None, description="Rank, e.g. 'Sgt'")
    address: Optional[str] = Field(default=None, description="Postal address or base")
    rfid_number: Optional[str] = Field(default=None, description="RFID tag number of the user's badge")


class UserRead(BaseModel):
    """Schema for reading a user from API."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    name: Optional[str] = None
    age: Optional[int] = None
    rank: Optional[str] = None
    address: Optional[str] = None
    rfid_number: Optional[str] = None
