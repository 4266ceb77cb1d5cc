# 📄 File: tests/test_reminders_api.py
# 🧭 Purpose (Layman Explanation):
# Calls the reminder web addresses the way the mobile app does and checks the answers.
# 🧪 Purpose (Technical Summary):
# FastAPI TestClient tests for /api/v1/reminders with the ReminderService dependency
# overridden by the in-memory fakes from conftest, covering status codes and the error envelope.
# 🔗 Dependencies:
# pytest, fastapi.testclient (httpx), app.main
# 🔄 Connected Modules / Calls From:
# pytest

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.modules.care_management.presentation.dependencies import get_reminder_service

BASE = "/api/v1/reminders"


@pytest.fixture
def client(service):
    app.dependency_overrides[get_reminder_service] = lambda: service
    # No context manager: the lifespan (database, event bus) stays down
    yield TestClient(app)
    app.dependency_overrides.clear()


def create_payload(**overrides):
    payload = {
        "plant_id": "plant-1",
        "plant_name": "Fern",
        "type": "watering",
        "frequency": "weekly",
        "start_date": "2024-06-01",
        "preferred_day_of_week": "wednesday",
        "preferred_time": "evening",
    }
    payload.update(overrides)
    return payload


def create(client, **overrides):
    response = client.post(f"{BASE}/", json=create_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


def test_create_reminder(client):
    body = create(client)

    reminder = body["reminder"]
    assert reminder["next_due"] == "2024-06-05"
    assert reminder["alert_time"] == "19:00"
    assert reminder["state"] == "scheduled"
    assert reminder["frequency_label"] == "Every week"
    assert body["alert_registered"] is True
    assert body["trigger"]["shape"] == "weekly"
    assert body["trigger"]["weekday"] == "wednesday"


def test_unknown_frequency_is_rejected(client, repository):
    response = client.post(f"{BASE}/", json=create_payload(frequency="fortnightly"))

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert repository.rows == {}


def test_malformed_preferred_time_is_rejected(client):
    response = client.post(f"{BASE}/", json=create_payload(preferred_time="25:00"))

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_get_missing_reminder_returns_error_envelope(client):
    response = client.get(f"{BASE}/does-not-exist")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["details"]["reminder_id"] == "does-not-exist"


def test_list_with_status_filter(client):
    overdue = create(client, plant_id="a", frequency="monthly", start_date="2024-05-20")
    create(client, plant_id="b", frequency="monthly", start_date="2024-06-20")

    response = client.get(f"{BASE}/", params={"status": "overdue"})

    assert response.status_code == 200
    body = response.json()
    assert body["status_filter"] == "overdue"
    assert body["total"] == 1
    assert body["items"][0]["id"] == overdue["reminder"]["id"]

    assert client.get(f"{BASE}/").json()["total"] == 2
    assert client.get(f"{BASE}/", params={"status": "soon"}).status_code == 422


def test_complete_advances_next_due(client):
    created = create(client, frequency="biweekly", preferred_day_of_week=None)
    reminder_id = created["reminder"]["id"]

    response = client.post(f"{BASE}/{reminder_id}/complete", json={"completion_date": "2024-06-01"})

    assert response.status_code == 200
    reminder = response.json()["reminder"]
    assert reminder["last_completed"] == "2024-06-01"
    assert reminder["next_due"] == "2024-06-15"


def test_complete_without_body_uses_today(client):
    reminder_id = create(client, frequency="daily")["reminder"]["id"]

    response = client.post(f"{BASE}/{reminder_id}/complete")

    assert response.status_code == 200
    assert response.json()["reminder"]["last_completed"] == "2024-06-01"


def test_toggle_and_snooze(client):
    reminder_id = create(client)["reminder"]["id"]

    snoozed = client.post(f"{BASE}/{reminder_id}/snooze", json={"minutes": 15})
    assert snoozed.status_code == 200
    assert snoozed.json()["trigger"]["shape"] == "one_shot"

    toggled = client.post(f"{BASE}/{reminder_id}/toggle")
    assert toggled.status_code == 200
    assert toggled.json()["reminder"]["enabled"] is False
    assert toggled.json()["reminder"]["state"] == "disabled"

    rejected = client.post(f"{BASE}/{reminder_id}/snooze")
    assert rejected.status_code == 422
    assert rejected.json()["error"]["code"] == "BUSINESS_RULE_VIOLATION"


def test_update_reminder(client):
    reminder_id = create(client)["reminder"]["id"]

    response = client.put(
        f"{BASE}/{reminder_id}",
        json=create_payload(frequency="daily", preferred_day_of_week=None, start_date="2024-06-03"),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["reminder"]["id"] == reminder_id
    assert body["reminder"]["next_due"] == "2024-06-03"
    assert body["trigger"]["shape"] == "daily"


def test_delete_reminder(client, registrar):
    created = create(client)
    reminder_id = created["reminder"]["id"]

    response = client.delete(f"{BASE}/{reminder_id}")

    assert response.status_code == 204
    assert registrar.alerts == {}
    assert client.get(f"{BASE}/{reminder_id}").status_code == 404
    assert client.delete(f"{BASE}/{reminder_id}").status_code == 404


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
