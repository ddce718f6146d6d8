"""Endpoint tests for profiles and TDEE."""

from fastapi.testclient import TestClient

from tests.conftest import auth_headers

METRICS = {
    "currentWeight": 80,
    "height": 180,
    "age": 30,
    "gender": "male",
    "activityLevel": "moderate",
}


def test_tdee_requires_metrics(client: TestClient) -> None:
    headers = auth_headers(client)

    response = client.get("/api/users/calculate-tdee", headers=headers)

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": (
            "Please update your weight, height, age and activity level "
            "to calculate TDEE"
        ),
    }


def test_profile_update_then_tdee(client: TestClient) -> None:
    headers = auth_headers(client)

    profile = client.put(
        "/api/users/profile",
        json={**METRICS, "email": "other@example.com", "proteinGoal": 180},
        headers=headers,
    )
    tdee = client.get("/api/users/calculate-tdee", headers=headers)

    assert profile.status_code == 200
    assert profile.json()["data"]["email"] == "alice@example.com"
    assert profile.json()["data"]["proteinGoal"] == 180
    assert tdee.json()["data"] == {
        "tdee": 2759,
        "bmr": 1780,
        "recommendation": {
            "maintain": 2759,
            "mildWeightLoss": 2509,
            "weightLoss": 2259,
            "extremeWeightLoss": 1759,
        },
    }


def test_profile_validation(client: TestClient) -> None:
    headers = auth_headers(client)

    response = client.put(
        "/api/users/profile",
        json={"activityLevel": "couch", "gender": "robot"},
        headers=headers,
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"activityLevel", "gender"}


def test_get_profile(client: TestClient) -> None:
    headers = auth_headers(client)

    response = client.get("/api/users/profile", headers=headers)

    data = response.json()["data"]
    assert data["name"] == "Alice"
    assert data["activityLevel"] is None
    assert data["fatsGoal"] == 65
