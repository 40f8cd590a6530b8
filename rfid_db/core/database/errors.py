"""
Storage error classification.

Every storage failure is answered with the same generic server error. The
kind computed here is only logged, or surfaced in a response header when
``RFID_DB_EXPOSE_ERROR_KIND`` is enabled.
"""

from __future__ import annotations

from enum import Enum

from sqlalchemy import exc as sa_exc


class StorageErrorKind(str, Enum):
    """Coarse category of a storage failure."""

    CONSTRAINT_VIOLATION = "constraint_violation"
    CONNECTION_ERROR = "connection_error"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


def classify_storage_error(error: BaseException) -> StorageErrorKind:
    """Map a SQLAlchemy (or driver) exception onto a ``StorageErrorKind``.

    Args:
        error: The exception raised while talking to the database

    Returns:
        The matching kind, ``UNKNOWN`` when nothing more specific applies
    """
    if isinstance(error, sa_exc.IntegrityError):
        return StorageErrorKind.CONSTRAINT_VIOLATION
    # Pool checkout timeout is raised as sqlalchemy.exc.TimeoutError
    if isinstance(error, (sa_exc.TimeoutError, TimeoutError)):
        return StorageErrorKind.TIMEOUT
    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return StorageErrorKind.CONNECTION_ERROR
    if isinstance(error, (sa_exc.InterfaceError, sa_exc.OperationalError, sa_exc.DisconnectionError, OSError)):
        return StorageErrorKind.CONNECTION_ERROR
    return StorageErrorKind.UNKNOWN
