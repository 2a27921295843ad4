"""Posts API 통합 테스트 (PostgreSQL 컨테이너)"""

import pytest


@pytest.fixture
def sync_author(client, api_key_header, clerk_user_payload):
    async def _sync(clerk_user_id: str) -> dict:
        response = await client.post(
            "/api/v1/users/sync",
            json=clerk_user_payload(clerk_user_id, f"{clerk_user_id}@example.com"),
            headers=api_key_header,
        )
        return response.json()["data"]

    return _sync


def _post_body(slug: str = "hello-world") -> dict:
    return {
        "title": "Hello World",
        "slug": slug,
        "excerpt": "A first post",
        "content": "Body",
    }


class TestPostsAPI:
    """게시글 API 테스트"""

    @pytest.mark.asyncio
    async def test_create_and_get_post(self, client, sync_author, auth_header):
        author = await sync_author("u_1")

        created = await client.post(
            "/api/v1/posts", json=_post_body(), headers=auth_header("u_1")
        )
        fetched = await client.get("/api/v1/posts/hello-world")

        assert created.status_code == 201
        post = created.json()["data"]
        assert post["author_id"] == author["id"]
        assert post["likes"] == 0
        assert fetched.json()["data"]["id"] == post["id"]

        me = await client.get("/api/v1/users/me", headers=auth_header("u_1"))
        assert me.json()["data"]["post_ids"] == [post["id"]]

    @pytest.mark.asyncio
    async def test_create_post_requires_synced_user(
        self, client, auth_header
    ):
        response = await client.post(
            "/api/v1/posts", json=_post_body(), headers=auth_header("u_ghost")
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "USER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_duplicate_slug_conflict(
        self, client, sync_author, auth_header
    ):
        await sync_author("u_1")
        await client.post(
            "/api/v1/posts", json=_post_body(), headers=auth_header("u_1")
        )

        response = await client.post(
            "/api/v1/posts", json=_post_body(), headers=auth_header("u_1")
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "POST_SLUG_ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_get_missing_post(self, client):
        response = await client.get("/api/v1/posts/nope")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "POST_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_like_post(self, client, sync_author, auth_header):
        await sync_author("u_1")
        await client.post(
            "/api/v1/posts", json=_post_body(), headers=auth_header("u_1")
        )

        await client.post("/api/v1/posts/hello-world/like")
        response = await client.post("/api/v1/posts/hello-world/like")

        assert response.json()["data"]["likes"] == 2

    @pytest.mark.asyncio
    async def test_list_posts_paginated(
        self, client, sync_author, auth_header
    ):
        author = await sync_author("u_1")
        for i in range(3):
            await client.post(
                "/api/v1/posts",
                json=_post_body(f"post-{i}"),
                headers=auth_header("u_1"),
            )

        page = await client.get("/api/v1/posts?page=1&size=2")
        by_author = await client.get(f"/api/v1/posts/authors/{author['id']}")

        body = page.json()
        assert [p["slug"] for p in body["data"]] == ["post-2", "post-1"]
        assert body["meta"]["total"] == 3
        assert body["meta"]["has_next"] is True
        assert len(by_author.json()["data"]) == 3

    @pytest.mark.asyncio
    async def test_only_author_can_delete(
        self, client, sync_author, auth_header
    ):
        await sync_author("u_1")
        await sync_author("u_2")
        await client.post(
            "/api/v1/posts", json=_post_body(), headers=auth_header("u_1")
        )

        forbidden = await client.delete(
            "/api/v1/posts/hello-world", headers=auth_header("u_2")
        )
        deleted = await client.delete(
            "/api/v1/posts/hello-world", headers=auth_header("u_1")
        )
        me = await client.get("/api/v1/users/me", headers=auth_header("u_1"))

        assert forbidden.status_code == 403
        assert deleted.status_code == 204
        assert me.json()["data"]["post_ids"] == []
