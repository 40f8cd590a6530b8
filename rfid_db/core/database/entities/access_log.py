"""
Access log entity model.

Entries reference a user id but are not tied to an existing user.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Field

from ..base import Base


class AccessLogEntry(Base, table=True):
    """Append-only access log entry.

    Table: access_log
    """

    __tablename__ = "access_log"
    __table_args__ = ({"extend_existing": True},)

    log_id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None)
    action: Optional[str] = Field(default=None)
    # Assigned by the database at insert time
    timestamp: Optional[datetime] = Field(
        default=None,
        sa_column_kwargs={"server_default": func.now()},
    )

    def __repr__(self) -> str:
        return f"AccessLogEntry(log_id={self.log_id}, user_id={self.user_id}, action={self.action})"
