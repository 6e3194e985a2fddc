"""Tests for registration, login and the current-user endpoint"""
import bcrypt
import pytest
from fastapi.testclient import TestClient

from authtoken import Role
from storefront.core.config import Settings
from storefront.database import user_db
from storefront.database.users import DEMO_USER_ID

REGISTRATION = {
    "name": "Ada Lovelace",
    "email": "Ada@Example.com",
    "password": "analytical-engine",
}


@pytest.fixture
def registered(client):
    """A user created through the register endpoint"""
    response = client.post("/api/users/register", json=REGISTRATION)
    assert response.status_code == 201
    return response.json()


def test_register_returns_user_and_token(registered, verifier):
    user = registered["user"]

    assert registered["message"] == "User created successfully"
    assert user["name"] == "ada lovelace"
    assert user["email"] == "ada@example.com"
    assert user["role"] == "user"
    assert "password" not in user

    identity = verifier.verify_identity(registered["token"])
    assert identity.user_id == user["id"]
    assert identity.role == Role.USER


def test_register_stores_only_a_bcrypt_hash(registered):
    password_hash = user_db.get_password_hash(registered["user"]["id"])

    assert password_hash != REGISTRATION["password"]
    assert bcrypt.checkpw(REGISTRATION["password"].encode(), password_hash.encode())


def test_registered_token_authenticates(client, registered):
    response = client.get(
        "/api/users/current-user",
        headers={"Authorization": f"Bearer {registered['token']}"},
    )

    assert response.status_code == 200
    assert response.json()["user"]["id"] == registered["user"]["id"]


def test_register_duplicate_email(client, registered):
    response = client.post("/api/users/register", json={**REGISTRATION, "email": "ADA@example.com"})

    assert response.status_code == 409
    assert response.json() == {"message": "User already exists"}


@pytest.mark.parametrize(
    "overrides",
    [
        {"email": "not-an-email"},
        {"password": "short"},
        {"name": ""},
    ],
)
def test_register_rejects_invalid_payload(client, overrides):
    response = client.post("/api/users/register", json={**REGISTRATION, **overrides})
    assert response.status_code == 400


def test_login(client, registered, verifier):
    response = client.post(
        "/api/users/login",
        json={"email": "ada@example.com", "password": REGISTRATION["password"]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User logged in successfully"
    assert body["user"]["id"] == registered["user"]["id"]

    result = verifier.verify(body["token"])
    assert result.is_valid
    assert result.claims.email == "ada@example.com"
    assert result.claims.exp - result.claims.iat == 30 * 24 * 60 * 60


def test_login_wrong_password(client, registered):
    response = client.post(
        "/api/users/login",
        json={"email": REGISTRATION["email"], "password": "difference-engine"},
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_login_unknown_email(client):
    response = client.post("/api/users/login", json={"email": "nobody@example.com", "password": "whatever"})

    assert response.status_code == 401
    assert response.json() == {"message": "User does not exist"}


def test_seeded_user_without_password_cannot_log_in(client):
    email = user_db.get_user(DEMO_USER_ID).email
    response = client.post("/api/users/login", json={"email": email, "password": "anything"})

    assert response.status_code == 401


def test_register_without_signing_key(key_pair):
    settings = Settings(_env_file=None, token_public_key=key_pair[1])

    from storefront.main import create_app

    client = TestClient(create_app(settings))
    response = client.post("/api/users/register", json=REGISTRATION)

    assert response.status_code == 503
    assert user_db.get_user_by_email(REGISTRATION["email"]) is None
