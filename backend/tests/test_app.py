"""Tests for app-wide handlers in main.py."""

import pytest

from todo_scheduler.api.routes import tasks as tasks_routes

from tests.utils import signup


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "OK"}


def test_unexpected_error_returns_generic_500(client_factory, monkeypatch, caplog):
    client = client_factory(raise_server_exceptions=False)
    signup(client, "alice")

    def broken_summarize(tasks):
        raise RuntimeError("stats backend exploded")

    monkeypatch.setattr(tasks_routes, "summarize", broken_summarize)

    with caplog.at_level("ERROR"):
        response = client.get("/api/tasks/stats")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    assert "stats backend exploded" not in response.text
    assert any("GET /api/tasks/stats" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize(
    "body",
    [
        {"title": "x"},
        {"date": "2030-01-01"},
    ],
)
def test_validation_errors_are_400_with_detail_list(alice, body):
    response = alice.post("/api/tasks", json=body)
    assert response.status_code == 400
    assert isinstance(response.json()["detail"], list)
