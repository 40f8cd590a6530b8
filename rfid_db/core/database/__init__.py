"""
Database layer for the RFID database service.

Structure:
- base.py: SQLModel base class shared by all entities
- entities/: one table model per module (users, weapons, access_log)
- repositories/: data access per table plus the repository bundle
- errors.py: classification of storage failures
- session.py: engine/session factory lifecycle
- utils.py: engine, session factory and schema helpers
"""

from .base import Base
from .errors import StorageErrorKind, classify_storage_error
from .session import DatabaseResources, close_database, open_database
from .utils import (
    check_connection,
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "DatabaseResources",
    "StorageErrorKind",
    "check_connection",
    "classify_storage_error",
    "close_database",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "open_database",
]
