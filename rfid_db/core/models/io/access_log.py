"""
Access log I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccessLogCreate(BaseModel):
    """Schema for appending an access log entry via API.

    The user id is recorded as given; it need not match an existing user.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    user_id: Optional[int] = Field(default=None, description="User performing the action")
    action: Optional[str] = Field(default=None, description="Free-form description of the action")


class AccessLogRead(BaseModel):
    """Schema for reading an access log entry from API."""

    model_config = ConfigDict(from_attributes=True)

    log_id: int
    user_id: Optional[int] = None
    action: Optional[str] = None
    timestamp: Optional[datetime] = None
