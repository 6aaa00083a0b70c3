"""Endpoint tests for /api/v1/auth and /api/v1/health."""

import pytest

REGISTER_URL = "/api/v1/auth/register"
LOGIN_URL = "/api/v1/auth/login"
LOGOUT_URL = "/api/v1/auth/logout"

ALICE = {"username": "alice01", "email": "alice@example.com", "password": "Passw0rd"}


@pytest.mark.asyncio
async def test_register_returns_201_with_token(async_client):
    response = await async_client.post(REGISTER_URL, json=ALICE)

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "alice01"
    assert body["message"] == "Registration successful"
    assert body["token"]
    assert "password" not in body


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides,detail,code",
    [
        ({"email": "alice"}, "Invalid email format", "invalid_email"),
        (
            {"password": "password"},
            "Password must be at least 8 characters with uppercase, lowercase, and digit",
            "invalid_password_format",
        ),
        ({"username": "ab"}, "Username must be 3-20 characters, alphanumeric only", "invalid_username"),
    ],
)
async def test_register_validation_errors(async_client, overrides, detail, code):
    response = await async_client.post(REGISTER_URL, json={**ALICE, **overrides})

    assert response.status_code == 422
    assert response.json() == {"detail": detail, "code": code}


@pytest.mark.asyncio
async def test_register_missing_field_is_unprocessable(async_client):
    response = await async_client.post(REGISTER_URL, json={"username": "alice01"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_register_duplicate_username_conflicts(async_client):
    await async_client.post(REGISTER_URL, json=ALICE)

    response = await async_client.post(REGISTER_URL, json={**ALICE, "email": "other@example.com"})

    assert response.status_code == 409
    assert response.json() == {"detail": "Username already exists", "code": "username_taken"}


@pytest.mark.asyncio
async def test_register_duplicate_email_conflicts(async_client):
    await async_client.post(REGISTER_URL, json=ALICE)

    response = await async_client.post(REGISTER_URL, json={**ALICE, "username": "bob02"})

    assert response.status_code == 409
    assert response.json()["detail"] == "Email already exists"


@pytest.mark.asyncio
async def test_login_success(async_client):
    await async_client.post(REGISTER_URL, json=ALICE)

    response = await async_client.post(LOGIN_URL, json={"username": "alice01", "password": "Passw0rd"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["username"] == "alice01"
    assert body["token"]


@pytest.mark.asyncio
async def test_login_unknown_user_is_not_found(async_client):
    response = await async_client.post(LOGIN_URL, json={"username": "ghost", "password": "Passw0rd"})

    assert response.status_code == 404
    assert response.json() == {"detail": "User not found", "code": "user_not_found"}


@pytest.mark.asyncio
async def test_login_wrong_password_is_unauthorized(async_client):
    await async_client.post(REGISTER_URL, json=ALICE)

    response = await async_client.post(LOGIN_URL, json={"username": "alice01", "password": "wrongpass"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid password", "code": "invalid_credentials"}


@pytest.mark.asyncio
async def test_logout_acknowledges(async_client):
    response = await async_client.post(LOGOUT_URL)

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully. Please discard your token."}


@pytest.mark.asyncio
async def test_health(async_client):
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
