# tests/routes/test_users_api.py
"""HTTP tests for the /api/users, /api/login and /health routes."""

import pytest
from httpx import AsyncClient

from app.models import UserDB


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_fresh_username_is_created(self, client: AsyncClient, user_repo) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "mluukkai"
        assert body["blogIds"] == []
        assert "password" not in body
        assert "passwordHash" not in body
        assert len(user_repo.users) == 1

    @pytest.mark.asyncio
    async def test_duplicate_username_is_400(self, client: AsyncClient, root_user: UserDB, user_repo) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "root", "name": "Superuser", "password": "salainen"},
        )

        assert response.status_code == 400
        assert "expected `username` to be unique" in response.json()["detail"]
        assert len(user_repo.users) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            ({"username": "ro", "password": "salainen"}, "username must be at least 3 characters long"),
            ({"username": "rooty", "password": "sa"}, "password must be at least 3 characters long"),
        ],
    )
    async def test_short_credentials_are_400(
        self,
        client: AsyncClient,
        user_repo,
        payload: dict,
        message: str,
    ) -> None:
        response = await client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == message
        assert user_repo.users == {}


class TestListUsers:
    @pytest.mark.asyncio
    async def test_users_include_blogs(self, client: AsyncClient, root_user: UserDB, blog_repo) -> None:
        blog = blog_repo.add(root_user, "React patterns", author="Michael Chan")

        response = await client.get("/api/users")

        assert response.status_code == 200
        body = response.json()
        assert body[0]["id"] == str(root_user.uuid)
        assert body[0]["blogIds"] == [str(blog.id)]
        assert body[0]["blogs"][0]["title"] == "React patterns"
        assert "passwordHash" not in body[0]


class TestLogin:
    @pytest.mark.asyncio
    async def test_valid_credentials_return_token(self, client: AsyncClient, root_user: UserDB) -> None:
        response = await client.post("/api/login", json={"username": "root", "password": "salainen"})

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "root"
        assert body["name"] == "Superuser"
        assert body["token"]

    @pytest.mark.asyncio
    async def test_issued_token_can_create_blogs(self, client: AsyncClient, root_user: UserDB) -> None:
        token = (await client.post("/api/login", json={"username": "root", "password": "salainen"})).json()["token"]

        response = await client.post(
            "/api/blogs",
            json={"title": "t", "url": "https://u.test"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_wrong_password_is_401(self, client: AsyncClient, root_user: UserDB) -> None:
        response = await client.post("/api/login", json={"username": "root", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()["detail"] == "invalid username or password"


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["environment"] == "test"
        assert response.headers["x-content-type-options"] == "nosniff"
