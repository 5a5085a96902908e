"""Tests for bearer token verification on protected routes."""

from httpx import AsyncClient


class TestProtectedRoute:
    async def test_requires_auth(self, client: AsyncClient):
        response = await client.get("/api/protected")
        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    async def test_rejects_unknown_token(self, client: AsyncClient):
        response = await client.get("/api/protected", headers={"Authorization": "Bearer forged"})
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized"

    async def test_rejects_non_bearer_scheme(self, client: AsyncClient, identity):
        token = identity.issue_token("user-1")
        response = await client.get("/api/protected", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

    async def test_returns_claims(self, client: AsyncClient, identity):
        token = identity.issue_token("user-1", email="ann@example.com")
        response = await client.get("/api/protected", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "You have accessed a protected route!"
        assert data["user"]["uid"] == "user-1"
        assert data["user"]["email"] == "ann@example.com"


class TestGateOnWriteRoutes:
    async def test_join_requires_auth(self, client: AsyncClient, store):
        response = await client.post("/api/join-hackathon", json={"hackathonId": "h1"})
        assert response.status_code == 401
        assert store.writes == []

    async def test_update_status_requires_auth(self, client: AsyncClient, store):
        response = await client.post(
            "/api/update-project-status", json={"projectId": "p1", "newStatus": "draft"}
        )
        assert response.status_code == 401
        assert store.writes == []

    async def test_joined_list_requires_auth(self, client: AsyncClient):
        response = await client.get("/api/user-joined-hackathons/user-1")
        assert response.status_code == 401
