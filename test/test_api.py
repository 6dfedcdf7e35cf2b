import uuid

import pytest
from fastapi.testclient import TestClient

from taskia.api.v1.dependencies import get_user_service

MARIA = {
    "name": "Maria Silva",
    "email": "maria.silva@gmail.com",
    "cpf": "529.982.247-25",
    "birth_date": "1998-11-25",
    "phone": "11912345678",
}


@pytest.fixture()
def maria_id(client: TestClient) -> str:
    response = client.post("/api/users", json=MARIA)
    assert response.status_code == 200, response.text
    return response.json()["data"]["id"]


@pytest.fixture()
def project_id(client: TestClient, maria_id: str) -> str:
    response = client.post("/api/projects", json={"name": "Onboarding revamp", "user_id": maria_id})
    assert response.status_code == 200, response.text
    return response.json()["data"]["id"]


def test_create_user_returns_envelope(client, maria_id):
    response = client.get(f"/api/users/{maria_id}")

    body = response.json()
    assert response.status_code == 200
    assert body["is_success"] is True
    assert body["errors"] == []
    assert body["data"]["cpf"] == "52998224725"
    assert body["data"]["birth_date"] == "1998-11-25"
    assert "password_hash" not in body["data"]


def test_duplicate_user_is_400(client, maria_id):
    response = client.post("/api/users", json=MARIA)

    assert response.status_code == 400
    assert response.json()["is_success"] is False


def test_validation_errors_become_400_envelope(client):
    response = client.post("/api/users", json={**MARIA, "name": "Al", "cpf": "123"})

    body = response.json()
    assert response.status_code == 400
    assert body["is_success"] is False
    assert body["message"] == "Validation failed"
    assert "cpf: CPF must have 11 digits" in body["errors"]
    assert any(error.startswith("name: ") for error in body["errors"])


def test_model_level_validation_error_has_no_field_prefix(client):
    response = client.post(
        "/api/auth/change-password-first-access",
        json={
            "cpf": "52998224725",
            "current_password": "25111998",
            "new_password": "NewSecret1",
            "confirm_password": "NewSecret2",
        },
    )

    assert response.status_code == 400
    assert "Passwords do not match" in response.json()["errors"]


def test_malformed_path_id_is_400(client):
    assert client.get("/api/users/not-a-uuid").status_code == 400


def test_update_with_mismatched_body_id_is_400(client, maria_id):
    response = client.put(f"/api/users/{maria_id}", json={"id": str(uuid.uuid4()), "name": "Maria Souza"})

    assert response.status_code == 400
    assert response.json()["message"] == "URL ID differs from request body ID"


def test_update_and_delete_user(client, maria_id):
    updated = client.put(f"/api/users/{maria_id}", json={"id": maria_id, "name": "Maria Souza"})
    deleted = client.delete(f"/api/users/{maria_id}")
    deleted_again = client.delete(f"/api/users/{maria_id}")

    assert updated.status_code == 200
    assert updated.json()["data"]["name"] == "Maria Souza"
    assert deleted.status_code == 200
    assert deleted_again.status_code == 200
    assert client.get("/api/users").json()["data"] == []


def test_unknown_user_is_400(client):
    response = client.get(f"/api/users/{uuid.uuid4()}")

    assert response.status_code == 400
    assert "not found" in response.json()["message"]


def test_search_and_check_email(client, maria_id):
    found = client.get("/api/users/search", params={"email": "MARIA.SILVA@gmail.com"})
    taken = client.get("/api/users/check-email", params={"email": "maria.silva@gmail.com"})
    free = client.get("/api/users/check-email", params={"email": "nobody@gmail.com"})
    blank = client.get("/api/users/check-email", params={"email": " "})

    assert [user["id"] for user in found.json()["data"]] == [maria_id]
    assert taken.json() == {"exists": True, "message": "Email already registered"}
    assert free.json()["exists"] is False
    assert blank.status_code == 400


def test_login_and_first_access_flow(client, maria_id):
    first = client.post("/api/auth/login", json={"cpf": "52998224725", "password": "25111998"})
    assert first.status_code == 200
    assert first.json()["data"]["is_first_access"] is True
    assert first.json()["data"]["token"] is None

    changed = client.post(
        "/api/auth/change-password-first-access",
        json={
            "cpf": "52998224725",
            "current_password": "25111998",
            "new_password": "NewSecret1",
            "confirm_password": "NewSecret1",
        },
    )
    assert changed.status_code == 200
    assert changed.json()["data"]["is_first_access"] is False

    old = client.post("/api/auth/login", json={"cpf": "52998224725", "password": "25111998"})
    assert old.status_code == 400
    assert old.json()["message"] == "Invalid CPF or password"


def test_check_cpf(client, maria_id):
    assert client.get("/api/auth/check-cpf", params={"cpf": "529.982.247-25"}).json()["exists"] is True
    assert client.get("/api/auth/check-cpf").status_code == 400


def test_project_lifecycle(client, maria_id, project_id):
    fetched = client.get(f"/api/projects/{project_id}")
    assert fetched.json()["data"]["status"] == "Draft"
    assert fetched.json()["data"]["user_name"] == "Maria Silva"

    toggled = client.patch(f"/api/projects/{project_id}/status")
    assert toggled.json()["data"]["status"] == "Active"

    updated = client.put(
        f"/api/projects/{project_id}",
        json={"name": "Onboarding v2", "status": "Paused", "start_date": "2026-01-05", "end_date": "2026-03-31"},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["status"] == "Paused"

    by_user = client.get(f"/api/projects/by-user/{maria_id}")
    assert [project["id"] for project in by_user.json()["data"]] == [project_id]

    assert client.delete(f"/api/projects/{project_id}").status_code == 200
    assert client.get("/api/projects").json()["data"] == []


def test_project_for_unknown_user_is_400(client):
    response = client.post("/api/projects", json={"name": "Orphan", "user_id": str(uuid.uuid4())})

    assert response.status_code == 400
    assert response.json()["message"].startswith("User not found")


def test_project_search_and_check_name(client, project_id):
    by_name = client.get("/api/projects/search/name", params={"name": "revamp"})
    by_status = client.get("/api/projects/search/status", params={"status": "Draft"})
    blank = client.get("/api/projects/search/name")
    taken = client.get("/api/projects/check-name", params={"name": "ONBOARDING REVAMP"})

    assert [project["id"] for project in by_name.json()["data"]] == [project_id]
    assert [project["id"] for project in by_status.json()["data"]] == [project_id]
    assert blank.status_code == 400
    assert blank.json()["message"] == "Name is required"
    assert taken.json()["exists"] is True


def test_project_inactive_status_cannot_be_requested(client, maria_id):
    response = client.post("/api/projects", json={"name": "Alpha", "user_id": maria_id, "status": "Inactive"})

    assert response.status_code == 400


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "Healthy"


def test_database_health(client, mongo_client, monkeypatch):
    assert client.get("/api/health/database").status_code == 200

    def unreachable():
        raise RuntimeError("server selection timeout")

    monkeypatch.setattr(mongo_client, "ping", unreachable)
    response = client.get("/api/health/database")

    assert response.status_code == 503
    assert response.json()["status"] == "Unhealthy"


def test_unhandled_error_is_problem_details(app, settings):
    def broken_service():
        raise RuntimeError("wiring failed")

    app.dependency_overrides[get_user_service] = broken_service
    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/users")

    body = response.json()
    assert response.status_code == 500
    assert body["status"] == 500
    assert body["instance"] == "/api/users"
    assert "wiring failed" in body["detail"]


def test_problem_details_hide_errors_outside_development(app, settings):
    settings.environment = "production"

    def broken_service():
        raise RuntimeError("wiring failed")

    app.dependency_overrides[get_user_service] = broken_service
    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/users")

    assert response.status_code == 500
    assert "wiring failed" not in response.json()["detail"]
