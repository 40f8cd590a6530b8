"""
API endpoints for the access log.

Entries are appended as given; the user id is not checked against the users table.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from rfid_db.core.database.entities import AccessLogEntry
from rfid_db.core.logging_config import get_logger
from rfid_db.core.models.io import AccessLogCreate, AccessLogRead
from rfid_db.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["access-log"])


@router.post(
    "",
    response_model=AccessLogRead,
    status_code=status.HTTP_201_CREATED,
    summary="Append Access Log Entry",
    description="Record an action performed by a user. The timestamp is assigned by the database.",
    responses={
        201: {"description": "Entry created successfully"},
        500: {"description": "Storage error (plain text)"},
    },
)
async def create_access_log_entry(repos: ReposDep, payload: AccessLogCreate | None = None) -> AccessLogRead:
    payload = payload or AccessLogCreate()
    entry = await repos.access_log.create(AccessLogEntry(**payload.model_dump()))
    logger.info(f"Logged action {entry.action!r} for user {entry.user_id}")
    return AccessLogRead.model_validate(entry)


@router.get(
    "",
    response_model=list[AccessLogRead],
    summary="List Access Log",
    description="Return every access log entry. No pagination, filtering or ordering.",
)
async def list_access_log(repos: ReposDep) -> list[AccessLogRead]:
    entries = await repos.access_log.list()
    logger.debug(f"Retrieved {len(entries)} access log entries")
    return [AccessLogRead.model_validate(entry) for entry in entries]
