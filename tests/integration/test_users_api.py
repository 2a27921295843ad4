"""Users API 통합 테스트 (PostgreSQL 컨테이너)"""

import pytest


async def _sync(client, api_key_header, payload):
    response = await client.post(
        "/api/v1/users/sync", json=payload, headers=api_key_header
    )
    assert response.status_code == 200
    return response.json()["data"]


class TestUserSyncAPI:
    """신뢰된 동기화 API 테스트"""

    @pytest.mark.asyncio
    async def test_upsert_creates_user(
        self, client, api_key_header, clerk_user_payload
    ):
        data = await _sync(
            client,
            api_key_header,
            clerk_user_payload("u_1", "a@example.com"),
        )

        assert data["clerk_user_id"] == "u_1"
        assert data["email"] == "a@example.com"
        assert data["first_name"] is None
        assert data["last_name"] is None
        assert data["image_url"] is None
        assert data["post_ids"] is None

    @pytest.mark.asyncio
    async def test_upsert_updates_same_record(
        self, client, api_key_header, clerk_user_payload
    ):
        created = await _sync(
            client, api_key_header, clerk_user_payload("u_1", "a@example.com")
        )
        updated = await _sync(
            client,
            api_key_header,
            clerk_user_payload("u_1", "a@example.com", first_name="Ann"),
        )

        assert updated["id"] == created["id"]
        assert updated["first_name"] == "Ann"

        response = await client.get("/api/v1/users")
        assert len(response.json()["data"]) == 1

    @pytest.mark.asyncio
    async def test_lookup_by_clerk_user_id(
        self, client, api_key_header, clerk_user_payload
    ):
        await _sync(
            client, api_key_header, clerk_user_payload("u_1", "a@example.com")
        )

        found = await client.get(
            "/api/v1/users/clerk/u_1", headers=api_key_header
        )
        missing = await client.get(
            "/api/v1/users/clerk/u_404", headers=api_key_header
        )

        assert found.json()["data"]["email"] == "a@example.com"
        assert missing.status_code == 200
        assert missing.json()["data"] is None

    @pytest.mark.asyncio
    async def test_delete_existing_and_unknown(
        self, client, api_key_header, clerk_user_payload
    ):
        await _sync(
            client, api_key_header, clerk_user_payload("u_1", "a@example.com")
        )

        deleted = await client.delete(
            "/api/v1/users/sync/u_1", headers=api_key_header
        )
        again = await client.delete(
            "/api/v1/users/sync/u_1", headers=api_key_header
        )

        assert deleted.json()["data"] == {"clerk_user_id": "u_1", "deleted": True}
        assert again.status_code == 200
        assert again.json()["data"]["deleted"] is False


class TestUserQueryAPI:
    """사용자 조회 API 테스트"""

    @pytest.mark.asyncio
    async def test_get_users_in_insertion_order(
        self, client, api_key_header, clerk_user_payload
    ):
        for i in range(3):
            await _sync(
                client,
                api_key_header,
                clerk_user_payload(f"u_{i}", f"{i}@example.com"),
            )

        response = await client.get("/api/v1/users")

        assert response.status_code == 200
        assert [u["clerk_user_id"] for u in response.json()["data"]] == [
            "u_0",
            "u_1",
            "u_2",
        ]

    @pytest.mark.asyncio
    async def test_recent_users_top_five_desc(
        self, client, api_key_header, clerk_user_payload
    ):
        for i in range(7):
            await _sync(
                client,
                api_key_header,
                clerk_user_payload(f"u_{i}", f"{i}@example.com"),
            )

        response = await client.get("/api/v1/users/recent")

        assert [u["clerk_user_id"] for u in response.json()["data"]] == [
            "u_6",
            "u_5",
            "u_4",
            "u_3",
            "u_2",
        ]

    @pytest.mark.asyncio
    async def test_me_returns_synced_user(
        self, client, api_key_header, clerk_user_payload, auth_header
    ):
        await _sync(
            client, api_key_header, clerk_user_payload("u_1", "a@example.com")
        )

        me = await client.get("/api/v1/users/me", headers=auth_header("u_1"))
        not_synced = await client.get(
            "/api/v1/users/me", headers=auth_header("u_2")
        )

        assert me.json()["data"]["clerk_user_id"] == "u_1"
        assert not_synced.json()["data"] is None
