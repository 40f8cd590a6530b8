"""Unit tests for storage error classification."""

import pytest
from sqlalchemy import exc as sa_exc

from rfid_db.core.database.errors import StorageErrorKind, classify_storage_error


def _dbapi_error(cls, connection_invalidated: bool = False):
    return cls("INSERT INTO users ...", {}, Exception("driver error"), connection_invalidated=connection_invalidated)


@pytest.mark.parametrize(
    "error,expected",
    [
        (_dbapi_error(sa_exc.IntegrityError), StorageErrorKind.CONSTRAINT_VIOLATION),
        (_dbapi_error(sa_exc.OperationalError), StorageErrorKind.CONNECTION_ERROR),
        (_dbapi_error(sa_exc.InterfaceError), StorageErrorKind.CONNECTION_ERROR),
        (_dbapi_error(sa_exc.ProgrammingError, connection_invalidated=True), StorageErrorKind.CONNECTION_ERROR),
        (sa_exc.TimeoutError("QueuePool limit reached"), StorageErrorKind.TIMEOUT),
        (TimeoutError("timed out"), StorageErrorKind.TIMEOUT),
        (ConnectionRefusedError("refused"), StorageErrorKind.CONNECTION_ERROR),
        (_dbapi_error(sa_exc.ProgrammingError), StorageErrorKind.UNKNOWN),
        (sa_exc.SQLAlchemyError("generic"), StorageErrorKind.UNKNOWN),
    ],
)
def test_classify_storage_error(error, expected):
    assert classify_storage_error(error) is expected


def test_kind_values_are_strings():
    assert StorageErrorKind.CONSTRAINT_VIOLATION == "constraint_violation"
    assert {kind.value for kind in StorageErrorKind} == {
        "constraint_violation",
        "connection_error",
        "timeout",
        "unknown",
    }
