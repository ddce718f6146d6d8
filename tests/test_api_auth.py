"""Endpoint tests for authentication and the response envelope."""

import pytest
from fastapi.testclient import TestClient

from tests.conftest import InMemoryUserRepository, auth_headers


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_register_login_me(client: TestClient) -> None:
    registered = client.post(
        "/api/auth/register",
        json={"email": "Alice@Example.com", "password": "secret123", "name": "Alice"},
    )
    assert registered.status_code == 201
    body = registered.json()
    assert body["success"] is True
    assert body["data"]["email"] == "alice@example.com"
    assert body["data"]["token"]

    login = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "secret123"},
    )
    assert login.status_code == 200
    token = login.json()["data"]["token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    profile = me.json()["data"]
    assert profile["id"] == body["data"]["id"]
    assert profile["dailyCalorieGoal"] == 2000
    assert profile["gender"] == "other"
    assert "passwordHash" not in profile


def test_register_duplicate_email(client: TestClient) -> None:
    auth_headers(client)

    response = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "secret123", "name": "Al"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "User already exists with this email",
    }


def test_login_wrong_password(client: TestClient) -> None:
    auth_headers(client)

    response = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "wrong-one"},
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_register_validation_errors(client: TestClient) -> None:
    response = client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "123", "name": ""},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    fields = {error["field"] for error in body["errors"]}
    assert {"email", "password", "name"} <= fields


def test_protected_routes_require_token(client: TestClient) -> None:
    missing = client.get("/api/foods")
    garbage = client.get("/api/foods", headers={"Authorization": "Bearer garbage"})
    wrong_scheme = client.get("/api/logs", headers={"Authorization": "Token abc"})

    for response in (missing, garbage, wrong_scheme):
        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Not authorized to access this route",
        }


def test_register_race_reports_duplicate(
    client: TestClient,
    user_repository: InMemoryUserRepository,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    auth_headers(client)
    monkeypatch.setattr(user_repository, "get_credentials", lambda _email: None)

    response = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "secret123", "name": "Al"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "User already exists with this email"
