"""User service endpoints over in-memory SQLite."""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

ALICE = {"email": "alice@example.com", "password": "s3cret!", "full_name": "Alice Doe", "phone": "555-0100"}


def _register(client, **overrides):
    return client.post("/api/auth/register", json={**ALICE, **overrides})


class TestRegister:
    def test_register(self, user_client):
        response = _register(user_client)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["user"]["email"] == "alice@example.com"
        assert body["user"]["full_name"] == "Alice Doe"
        assert isinstance(body["user"]["id"], int)
        assert "password" not in response.text

    def test_password_is_hashed(self, user_client, engine):
        _register(user_client)

        with engine.connect() as conn:
            stored = conn.exec_driver_sql("SELECT password_hash FROM users").scalar_one()
        assert stored != ALICE["password"]
        assert stored.startswith("$2")

    def test_duplicate_email(self, user_client):
        _register(user_client)

        response = _register(user_client, full_name="Other Alice")

        assert response.status_code == 409
        assert response.json()["detail"] == "Email already registered"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "not-an-email"},
            {"password": "12345"},
            {"full_name": ""},
        ],
    )
    def test_invalid_payload(self, user_client, overrides):
        assert _register(user_client, **overrides).status_code == 400

    def test_missing_fields(self, user_client):
        response = user_client.post("/api/auth/register", json={"email": "bob@example.com"})

        assert response.status_code == 400


class TestLogin:
    def test_login(self, user_client):
        _register(user_client)

        response = user_client.post(
            "/api/auth/login", json={"email": ALICE["email"], "password": ALICE["password"]}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"]["phone"] == "555-0100"

    def test_wrong_password(self, user_client):
        _register(user_client)

        response = user_client.post(
            "/api/auth/login", json={"email": ALICE["email"], "password": "wrong-one"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_unknown_email(self, user_client):
        response = user_client.post(
            "/api/auth/login", json={"email": "nobody@example.com", "password": "whatever"}
        )

        assert response.status_code == 401

    def test_missing_password(self, user_client):
        response = user_client.post("/api/auth/login", json={"email": ALICE["email"]})

        assert response.status_code == 400


class TestProfile:
    def test_get_profile(self, user_client):
        user_id = _register(user_client).json()["user"]["id"]

        response = user_client.get(f"/api/users/{user_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == ALICE["email"]
        assert body["created_at"] is not None
        assert "password_hash" not in body

    def test_unknown_user(self, user_client):
        response = user_client.get("/api/users/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_database_error_is_generic_500(self, user_client, monkeypatch):
        def boom(self, *args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("secret dsn"))

        monkeypatch.setattr(Session, "get", boom)

        response = user_client.get("/api/users/1")

        assert response.status_code == 500
        assert "secret" not in response.text
