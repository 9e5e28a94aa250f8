"""Routing tests for operational endpoints and app startup."""

import logging

from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app


client = TestClient(app)


def test_healthz_reports_ok() -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": settings.app_name}


def test_api_root_returns_json_metadata() -> None:
    response = client.get("/api")

    assert response.status_code == 200
    payload = response.json()
    assert payload["docs"] == "/docs"
    assert payload["name"] == settings.app_name
    assert payload["version"] == settings.app_version


def test_docs_is_available() -> None:
    response = client.get("/docs")

    assert response.status_code == 200
    assert "Swagger UI" in response.text


def test_openapi_lists_users_route() -> None:
    schema = client.get("/openapi.json").json()

    assert "get" in schema["paths"]["/users"]
    assert set(schema["paths"]["/users"]) == {"get"}


def test_startup_logs_bootstrap_summary(monkeypatch, caplog) -> None:
    """Startup should log the service name and user count."""
    monkeypatch.setattr(settings, "log_level", "INFO")
    monkeypatch.setattr(settings, "debug", False)
    caplog.set_level(logging.INFO, logger="app.main")

    with TestClient(app) as startup_client:
        assert startup_client.get("/users").status_code == 200

    messages = [record.getMessage() for record in caplog.records if record.name == "app.main"]
    assert any(settings.app_name in message for message in messages)
    assert any("3 users" in message for message in messages)


def test_startup_warns_when_debug_outside_dev(monkeypatch, caplog) -> None:
    monkeypatch.setattr(settings, "debug", True)
    monkeypatch.setattr(settings, "app_env", "prod")
    caplog.set_level(logging.INFO, logger="app.main")

    with TestClient(app):
        pass

    assert any(
        record.levelno == logging.WARNING and "DEBUG enabled" in record.getMessage()
        for record in caplog.records
    )
