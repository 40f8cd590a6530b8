"""
API endpoints for users.

Users can be created and listed; they are never updated or deleted.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from rfid_db.core.database.entities import User
from rfid_db.core.logging_config import get_logger
from rfid_db.core.models.io import UserCreate, UserRead
from rfid_db.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Insert a user and return the stored row, including its generated user_id.",
    responses={
        201: {"description": "User created successfully"},
        500: {"description": "Storage error (plain text)"},
    },
)
async def create_user(repos: ReposDep, payload: UserCreate | None = None) -> UserRead:
    """
    Create a new user.

    No field is checked here. Missing values are stored as NULL and column
    constraints (such as a duplicate ``rfid_number``) surface as a generic
    server error.
    """
    payload = payload or UserCreate()
    user = await repos.users.create(User(**payload.model_dump()))
    logger.info(f"Created user {user.user_id} (rfid_number={user.rfid_number})")
    return UserRead.model_validate(user)


@router.get(
    "",
    response_model=list[UserRead],
    summary="List Users",
    description="Return every user. No pagination, filtering or ordering.",
)
async def list_users(repos: ReposDep) -> list[UserRead]:
    users = await repos.users.list()
    logger.debug(f"Retrieved {len(users)} users")
    return [UserRead.model_validate(user) for user in users]
