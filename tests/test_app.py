import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError as PydanticValidationError

from .conftest import VALID_TOKEN, build_app, make_settings

AUTH = {"Authorization": f"Bearer {VALID_TOKEN}"}


def test_diagnostics_available_when_enabled(repository, catalog):
    repository.add(name="Orchid")
    client = TestClient(build_app(repository, catalog, make_settings(ENABLE_DIAGNOSTICS=True)))

    response = client.get("/api/v1/diagnostics/plants", headers=AUTH)

    assert response.status_code == 200
    body = response.json()
    assert body["plant_count"] == 1
    assert len(body["unscheduled_ids"]) == 1
    assert "watering_frequency_days" in body["columns"]
    assert repository.update_calls == []


def test_diagnostics_hidden_when_disabled(repository, catalog):
    client = TestClient(build_app(repository, catalog, make_settings(ENABLE_DIAGNOSTICS=False)))
    assert client.get("/api/v1/diagnostics/plants", headers=AUTH).status_code == 404


def test_diagnostics_never_mounted_in_production(repository, catalog):
    settings = make_settings(ENVIRONMENT="production", ENABLE_DIAGNOSTICS=True)
    assert not settings.diagnostics_enabled

    client = TestClient(build_app(repository, catalog, settings))
    assert client.get("/api/v1/diagnostics/plants", headers=AUTH).status_code == 404


def test_health(client):
    body = client.get("/api/v1/health").json()
    assert body["status"] == "healthy"


def test_detailed_health_without_database(client):
    response = client.get("/api/v1/health/detailed")

    assert response.status_code == 503
    body = response.json()
    assert body["components"]["database"]["status"] == "unhealthy"
    assert body["components"]["plant_catalog"]["status"] == "configured"


def test_settings_validation():
    assert make_settings(PERENUAL_API_URL="https://perenual.com/api/v2/").PERENUAL_API_URL == (
        "https://perenual.com/api/v2"
    )
    assert make_settings(ENVIRONMENT="Staging").ENVIRONMENT == "staging"
    assert make_settings(CORS_ORIGINS="http://a.test, https://b.test").cors_origins_list == [
        "http://a.test",
        "https://b.test",
    ]

    with pytest.raises(PydanticValidationError):
        make_settings(ENVIRONMENT="moon")
    with pytest.raises(PydanticValidationError):
        make_settings(LOG_FORMAT="xml")


def test_catalog_reported_unconfigured_without_key(repository, catalog):
    client = TestClient(build_app(repository, catalog, make_settings(PERENUAL_API_KEY=None)))
    body = client.get("/api/v1/health/detailed").json()
    assert body["components"]["plant_catalog"]["status"] == "not_configured"
