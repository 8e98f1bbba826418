"""
AeroSky - Authentication API Tests
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient

from aerosky.core.security import create_access_token
from aerosky.services.auth import AuthService


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test the health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert "X-Latency-Ms" in response.headers


@pytest.mark.asyncio
async def test_register_user(client: AsyncClient, sample_user_data):
    """Test user registration."""
    response = await client.post("/api/register", json=sample_user_data)
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["tokenType"] == "bearer"
    assert data["user"]["email"] == sample_user_data["email"]
    assert data["user"]["username"] == sample_user_data["username"]
    assert data["user"]["testsTaken"] == 0
    assert "password" not in data["user"]
    assert "hashedPassword" not in data["user"]


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, sample_user_data):
    """Test that duplicate email registration fails."""
    await client.post("/api/register", json=sample_user_data)
    
    response = await client.post(
        "/api/register", json={**sample_user_data, "username": "other"}
    )
    assert response.status_code == 400
    assert "already exists" in response.json()["detail"].lower()


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient, sample_user_data):
    await client.post("/api/register", json=sample_user_data)
    
    response = await client.post(
        "/api/register", json={**sample_user_data, "email": "other@example.com"}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_register_short_password(client: AsyncClient, sample_user_data):
    response = await client.post(
        "/api/register", json={**sample_user_data, "password": "abc"}
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, sample_user_data):
    """Test successful login."""
    await client.post("/api/register", json=sample_user_data)
    
    response = await client.post("/api/login", json={
        "email": sample_user_data["email"],
        "password": sample_user_data["password"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["user"]["username"] == sample_user_data["username"]


@pytest.mark.asyncio
async def test_login_invalid_credentials(client: AsyncClient, sample_user_data):
    """Test login with invalid credentials."""
    await client.post("/api/register", json=sample_user_data)
    
    response = await client.post("/api/login", json={
        "email": sample_user_data["email"],
        "password": "wrong-password",
    })
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_unknown_email(client: AsyncClient):
    response = await client.post("/api/login", json={
        "email": "nobody@example.com",
        "password": "whatever",
    })
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_profile(client: AsyncClient, auth_headers, sample_user_data):
    """Test getting current user profile."""
    response = await client.get("/api/profile", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["email"] == sample_user_data["email"]
    assert data["recentTests"] == []
    assert data["practiceStats"] == []


@pytest.mark.asyncio
async def test_missing_token_is_401(client: AsyncClient):
    response = await client.get("/api/analytics")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_is_403(client: AsyncClient):
    response = await client.get(
        "/api/analytics", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_expired_token_is_403(client: AsyncClient, sample_user_data):
    register = await client.post("/api/register", json=sample_user_data)
    user_id = register.json()["user"]["id"]
    token = create_access_token(user_id, expires_delta=timedelta(minutes=-1))
    
    response = await client.get(
        "/api/profile", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_token_for_unknown_user_is_403(client: AsyncClient):
    token = create_access_token("00000000-0000-0000-0000-000000000000")
    response = await client.get(
        "/api/profile", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_register_race_on_unique_constraint(
    client: AsyncClient, sample_user_data, monkeypatch
):
    """A registration that slips past the existence check still gets a 400."""
    await client.post("/api/register", json=sample_user_data)
    
    async def nothing_found(self, email, username):
        return None
    
    monkeypatch.setattr(AuthService, "find_existing_user", nothing_found)
    
    response = await client.post("/api/register", json=sample_user_data)
    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"
    
    login = await client.post("/api/login", json={
        "email": sample_user_data["email"],
        "password": sample_user_data["password"],
    })
    assert login.status_code == 200
