"""
Tests for expense endpoints.
"""
from datetime import datetime, timedelta

import pytest

from expense_tracker.core.config import Settings
from expense_tracker.main import create_app
from fastapi.testclient import TestClient

UNKNOWN_ID = "000000000000000000000000"


def test_expense_form_context(client, user_id):
    """Form view carries the resolved user."""
    response = client.get(f"/api/users/{user_id}/expenses")
    assert response.status_code == 200
    assert response.json() == {"userId": user_id, "message": None, "showHistoryChoice": False}


def test_expense_form_with_placeholder_colon(client, user_id):
    response = client.get(f"/api/users/:{user_id}/expenses")
    assert response.json()["userId"] == user_id


def test_expense_form_malformed_user(client):
    response = client.get("/api/users/abc/expenses")
    assert response.status_code == 200
    assert response.json()["userId"] is None


def test_create_expense_and_view_history(client, user_id):
    """Register, submit, then read back the history."""
    before = datetime.utcnow() - timedelta(seconds=1)
    response = client.post(
        f"/api/users/{user_id}/expenses",
        json={"title": "Coffee", "amount": 4.5, "category": "Food"}
    )
    assert response.status_code == 201
    assert response.json() == {
        "userId": user_id,
        "message": "Expense saved successfully.",
        "showHistoryChoice": True
    }

    response = client.get(f"/api/users/{user_id}/expenses/history")
    assert response.status_code == 200
    data = response.json()
    assert data["userId"] == user_id
    assert len(data["expenses"]) == 1

    expense = data["expenses"][0]
    assert expense["title"] == "Coffee"
    assert expense["amount"] == 4.5
    assert expense["category"] == "Food"
    assert expense["userId"] == user_id
    assert expense["description"] is None
    assert datetime.fromisoformat(expense["date"]) >= before
    assert expense["formattedDate"]


def test_create_expense_unknown_user(client):
    response = client.post(
        f"/api/users/{UNKNOWN_ID}/expenses",
        json={"title": "Coffee", "amount": 4.5, "category": "Food"}
    )
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"

    history = client.get(f"/api/users/{UNKNOWN_ID}/expenses/history")
    assert history.json()["expenses"] == []


def test_create_expense_malformed_user(client):
    response = client.post(
        "/api/users/abc/expenses",
        json={"title": "Coffee", "amount": 4.5, "category": "Food"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "User ID required"


def test_body_user_id_overrides_url(client, user_id):
    other = client.post("/api/users", json={"username": "bob", "email": "b@x.com"}).json()["id"]

    response = client.post(
        f"/api/users/{user_id}/expenses",
        json={"title": "Taxi", "amount": 12, "category": "Transport", "userId": other}
    )
    assert response.status_code == 201
    assert response.json()["userId"] == other
    assert client.get(f"/api/users/{user_id}/expenses/history").json()["expenses"] == []


def test_body_user_id_rescues_malformed_url(client, user_id):
    response = client.post(
        "/api/users/abc/expenses",
        json={"title": "Taxi", "amount": 12, "category": "Transport", "userId": user_id}
    )
    assert response.status_code == 201
    assert response.json()["userId"] == user_id


def test_create_expense_missing_fields(client, user_id):
    response = client.post(
        f"/api/users/{user_id}/expenses",
        json={"title": "Coffee"}
    )
    assert response.status_code == 400
    assert set(response.json()["details"]["missing"]) == {"amount", "category"}


def test_create_expense_invalid_amount(client, user_id):
    response = client.post(
        f"/api/users/{user_id}/expenses",
        json={"title": "Coffee", "amount": "a lot", "category": "Food"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"


def test_history_ordered_most_recent_first(client, user_id):
    for day in ("2024-01-15T08:00:00", "2024-03-02T19:45:00", "2023-12-31T23:59:00"):
        response = client.post(
            f"/api/users/{user_id}/expenses",
            json={"title": day, "amount": 1, "category": "Misc", "date": day}
        )
        assert response.status_code == 201

    expenses = client.get(f"/api/users/{user_id}/expenses/history").json()["expenses"]

    assert [e["title"][:10] for e in expenses] == ["2024-03-02", "2024-01-15", "2023-12-31"]
    assert [e["formattedDate"] for e in expenses] == ["3/2/2024", "1/15/2024", "12/31/2023"]


def test_history_malformed_user(client):
    response = client.get("/api/users/abc/expenses/history")
    assert response.status_code == 400
    assert response.json()["error"] == "User ID required"


def test_memory_backend():
    """Same flow without a database."""
    app = create_app(Settings(STORE_BACKEND="memory", STATIC_DIR="does-not-exist"))
    with TestClient(app) as client:
        user_id = client.post(
            "/api/users",
            json={"username": "alice", "email": "a@x.com"}
        ).json()["id"]
        response = client.post(
            f"/api/users/{user_id}/expenses",
            json={"title": "Coffee", "amount": 4.5, "category": "Food", "description": "flat white"}
        )
        assert response.status_code == 201

        expenses = client.get(f"/api/users/{user_id}/expenses/history").json()["expenses"]
        assert [e["description"] for e in expenses] == ["flat white"]


@pytest.mark.parametrize("override", [["abc"], {"id": 1}, 1.5, "abc", ":userId"])
def test_malformed_body_user_id_falls_back_to_url(client, user_id, override):
    """An unusable userId in the body is ignored, not rejected."""
    response = client.post(
        f"/api/users/{user_id}/expenses",
        json={"title": "Coffee", "amount": 4.5, "category": "Food", "userId": override}
    )
    assert response.status_code == 201
    assert response.json()["userId"] == user_id
    assert len(client.get(f"/api/users/{user_id}/expenses/history").json()["expenses"]) == 1


def test_blank_date_defaults_to_now(client, user_id):
    before = datetime.utcnow() - timedelta(seconds=1)
    response = client.post(
        f"/api/users/{user_id}/expenses",
        json={"title": "Coffee", "amount": 4.5, "category": "Food", "date": ""}
    )
    assert response.status_code == 201

    [expense] = client.get(f"/api/users/{user_id}/expenses/history").json()["expenses"]
    assert datetime.fromisoformat(expense["date"]) >= before
