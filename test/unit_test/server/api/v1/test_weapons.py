"""
Unit tests for the weapons endpoints.

Tests cover the two creation preconditions (RFID present, owner exists), that
a rejected request never inserts a row, and listing.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from rfid_db.core.database.entities import Weapon

pytestmark = pytest.mark.asyncio


@pytest.fixture
def user_payload() -> dict:
    return {"name": "Alice", "age": 30, "rank": "Sgt", "address": "Base1", "rfid_number": "RFID001"}


async def _weapon_count(session: AsyncSession) -> int:
    result = await session.execute(select(Weapon))
    return len(result.scalars().all())


class TestCreateWeapon:
    """Test weapon creation endpoint."""

    async def test_create_weapon_success(self, client: AsyncClient, user_payload: dict):
        user = (await client.post("/users", json=user_payload)).json()

        response = await client.post("/weapons", json={"user_id": user["user_id"], "weapon_rfid": "W100"})
        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["weapon_id"], int)
        assert data["user_id"] == user["user_id"]
        assert data["weapon_rfid"] == "W100"

    async def test_create_weapon_inserts_exactly_one_row(
        self, client: AsyncClient, session: AsyncSession, user_payload: dict
    ):
        user = (await client.post("/users", json=user_payload)).json()
        await client.post("/weapons", json={"user_id": user["user_id"], "weapon_rfid": "W100"})
        assert await _weapon_count(session) == 1

    @pytest.mark.parametrize(
        "body",
        [
            {"user_id": 1},
            {"user_id": 1, "weapon_rfid": ""},
            {"user_id": 1, "weapon_rfid": None},
            {"user_id": 99999},
            {},
            {"user_id": "abc"},
            {"user_id": 1.5},
            {"user_id": {"x": 1}, "weapon_rfid": ""},
            {"user_id": 1, "weapon_rfid": 0},
            {"user_id": 1, "weapon_rfid": False},
        ],
    )
    async def test_missing_weapon_rfid(
        self, client: AsyncClient, session: AsyncSession, user_payload: dict, body: dict
    ):
        await client.post("/users", json=user_payload)

        response = await client.post("/weapons", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "weapon_rfid is required"}
        assert await _weapon_count(session) == 0

    async def test_missing_weapon_rfid_checked_before_storage(self, client: AsyncClient, app):
        """The RFID check must answer even when the database is unusable."""
        from rfid_db.server.services.deps import get_repos

        class UntouchableRepos:
            def __getattr__(self, name):
                raise AssertionError(f"storage must not be touched ({name})")

        app.dependency_overrides[get_repos] = UntouchableRepos
        response = await client.post("/weapons", json={"user_id": 1})
        assert response.status_code == 400
        assert response.json() == {"error": "weapon_rfid is required"}

    async def test_missing_weapon_rfid_without_body(self, client: AsyncClient):
        response = await client.post("/weapons")
        assert response.status_code == 400
        assert response.json() == {"error": "weapon_rfid is required"}

    async def test_numeric_weapon_rfid_stored_as_text(self, client: AsyncClient, user_payload: dict):
        user = (await client.post("/users", json=user_payload)).json()

        response = await client.post("/weapons", json={"user_id": user["user_id"], "weapon_rfid": 4242})
        assert response.status_code == 201
        assert response.json()["weapon_rfid"] == "4242"

    async def test_malformed_user_id_with_rfid_is_generic_server_error(
        self, client: AsyncClient, session: AsyncSession
    ):
        response = await client.post("/weapons", json={"user_id": "abc", "weapon_rfid": "W100"})
        assert response.status_code == 500
        assert response.text == "Server error"
        assert await _weapon_count(session) == 0

    async def test_unknown_user(self, client: AsyncClient, session: AsyncSession):
        response = await client.post("/weapons", json={"user_id": 99999, "weapon_rfid": "W200"})
        assert response.status_code == 400
        assert response.json() == {"error": "User not found"}
        assert await _weapon_count(session) == 0

    async def test_missing_user_id(self, client: AsyncClient, session: AsyncSession, user_payload: dict):
        await client.post("/users", json=user_payload)

        response = await client.post("/weapons", json={"weapon_rfid": "W300"})
        assert response.status_code == 400
        assert response.json() == {"error": "User not found"}
        assert await _weapon_count(session) == 0

    async def test_weapon_rfid_is_not_unique(self, client: AsyncClient, user_payload: dict):
        user = (await client.post("/users", json=user_payload)).json()
        body = {"user_id": user["user_id"], "weapon_rfid": "W100"}

        first = await client.post("/weapons", json=body)
        second = await client.post("/weapons", json=body)
        assert first.status_code == second.status_code == 201
        assert first.json()["weapon_id"] != second.json()["weapon_id"]


class TestListWeapons:
    """Test weapon listing endpoint."""

    async def test_list_weapons_empty(self, client: AsyncClient):
        response = await client.get("/weapons")
        assert response.status_code == 200
        assert response.json() == []

    async def test_list_weapons_returns_only_inserted_rows(self, client: AsyncClient, user_payload: dict):
        user = (await client.post("/users", json=user_payload)).json()
        ok = (await client.post("/weapons", json={"user_id": user["user_id"], "weapon_rfid": "W100"})).json()
        await client.post("/weapons", json={"user_id": 99999, "weapon_rfid": "W200"})
        await client.post("/weapons", json={"user_id": user["user_id"]})

        response = await client.get("/weapons")
        assert response.status_code == 200
        assert response.json() == [ok]
