"""
API endpoints for weapons.

A weapon is only inserted after its RFID has been supplied and its owning user
has been found. The lookup and the insert are separate statements with no
transaction around them.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from fastapi import APIRouter, Body, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from rfid_db.core.database.entities import Weapon
from rfid_db.core.logging_config import get_logger
from rfid_db.core.models.io import ErrorResponse, WeaponCreate, WeaponRead
from rfid_db.server.core import constant
from rfid_db.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["weapons"])


def _client_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@router.post(
    "",
    response_model=WeaponRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Weapon",
    description="Issue a weapon to an existing user.",
    responses={
        201: {"description": "Weapon created successfully"},
        400: {"model": ErrorResponse, "description": "weapon_rfid missing or user not found"},
        500: {"description": "Storage error (plain text)"},
    },
)
async def create_weapon(
    repos: ReposDep, body: Optional[dict[str, Any]] = Body(default=None)
) -> Union[WeaponRead, JSONResponse]:
    """
    Create a new weapon.

    - **weapon_rfid** must be present and truthy, otherwise 400 without
      touching the database, whatever **user_id** holds.
    - **user_id** must name an existing user, otherwise 400 and nothing is
      inserted.
    """
    body = body or {}
    # Checked on the raw body so a malformed user_id cannot mask it.
    if not body.get("weapon_rfid"):
        return _client_error(constant.WEAPON_RFID_REQUIRED)

    try:
        payload = WeaponCreate.model_validate(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(), body=body) from exc

    # TOCTOU: the user could vanish between this lookup and the insert.
    # Nothing deletes users today and the foreign key rejects the insert if it ever happens.
    owner = await repos.users.get_by_id(payload.user_id)
    if owner is None:
        logger.info(f"Rejected weapon {payload.weapon_rfid}: user {payload.user_id} not found")
        return _client_error(constant.USER_NOT_FOUND)

    weapon = await repos.weapons.create(Weapon(user_id=payload.user_id, weapon_rfid=payload.weapon_rfid))
    logger.info(f"Created weapon {weapon.weapon_id} for user {weapon.user_id}")
    return WeaponRead.model_validate(weapon)


@router.get(
    "",
    response_model=list[WeaponRead],
    summary="List Weapons",
    description="Return every weapon. No pagination, filtering or ordering.",
)
async def list_weapons(repos: ReposDep) -> list[WeaponRead]:
    weapons = await repos.weapons.list()
    logger.debug(f"Retrieved {len(weapons)} weapons")
    return [WeaponRead.model_validate(weapon) for weapon in weapons]
