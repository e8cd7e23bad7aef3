"""Authentication endpoint tests."""
import pytest


async def test_register_returns_user_without_hash(client):
    response = await client.post(
        "/register", json={"name": "Ann", "email": "ann@x.com", "password": "secret1"}
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Ann"
    assert body["email"] == "ann@x.com"
    assert "id" in body
    assert "password" not in body
    assert "password_hash" not in body


@pytest.mark.parametrize("payload", [
    {"email": "ann@x.com", "password": "secret1"},
    {"name": "", "email": "ann@x.com", "password": "secret1"},
    {"name": "Ann", "email": "not-an-email", "password": "secret1"},
    {"name": "Ann", "password": "secret1"},
    {"name": "Ann", "email": "ann@x.com", "password": "abc"},
])
async def test_register_validation(client, payload):
    response = await client.post("/register", json=payload)
    assert response.status_code == 422


async def test_register_duplicate_email(client):
    payload = {"name": "Ann", "email": "ann@x.com", "password": "secret1"}
    assert (await client.post("/register", json=payload)).status_code == 201

    response = await client.post("/register", json=payload)
    assert response.status_code == 422
    assert "taken" in response.json()["detail"]


async def test_login_wrong_password(client, register_and_login):
    await register_and_login("Ann", "ann@x.com")

    response = await client.post("/login", json={"email": "ann@x.com", "password": "nope"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


async def test_me(client, register_and_login):
    headers = await register_and_login("Ann", "ann@x.com")

    response = await client.get("/me", headers=headers)
    assert response.status_code == 200
    assert response.json()["email"] == "ann@x.com"


async def test_logout_revokes_token_and_is_repeatable(client, register_and_login):
    headers = await register_and_login("Ann", "ann@x.com")

    first = await client.post("/logout", headers=headers)
    second = await client.post("/logout", headers=headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert (await client.get("/goals", headers=headers)).status_code == 401


async def test_logout_requires_token(client):
    assert (await client.post("/logout")).status_code == 401
    response = await client.post("/logout", headers={"Authorization": "Bearer junk"})
    assert response.status_code == 401


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_service_errors_carry_a_detail_string(client):
    response = await client.post(
        "/register", json={"name": "Ann", "email": "ann@x.com", "password": "abc"}
    )
    assert response.status_code == 422
    assert isinstance(response.json()["detail"], str)


async def test_name_length_limit(client):
    response = await client.post(
        "/register", json={"name": "n" * 255, "email": "ann@x.com", "password": "secret1"}
    )
    assert response.status_code == 201

    response = await client.post(
        "/register", json={"name": "n" * 256, "email": "bob@x.com", "password": "secret1"}
    )
    assert response.status_code == 422
