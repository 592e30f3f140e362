from garden_tracker.modules.plant_catalog.infrastructure.external.perenual_client import (
    PerenualClient,
)
from garden_tracker.modules.plant_catalog.presentation.dependencies import get_catalog_client
from garden_tracker.shared.core.exceptions import APITimeoutError, ExternalAPIError

CATALOG_URL = "/api/v1/catalog/species"


def test_search_species(client, catalog):
    response = client.get(CATALOG_URL, params={"q": "basil"})

    assert response.status_code == 200
    body = response.json()
    assert [hit["common_name"] for hit in body["results"]] == ["Sweet basil"]
    assert body["page"] == 1
    assert catalog.search_calls == [("basil", 1)]


def test_search_requires_query(client):
    assert client.get(CATALOG_URL).status_code == 422
    assert client.get(CATALOG_URL, params={"q": "basil", "page": 0}).status_code == 422


def test_species_details_include_estimate(client):
    body = client.get(f"{CATALOG_URL}/728").json()

    assert body["common_name"] == "Sweet basil"
    assert body["estimated_watering_frequency_days"] == 5
    assert body["maintenance"] == "Low"
    assert body["hardiness"] == {"min": "10", "max": "11"}
    assert body["default_image"]["thumbnail"] == "https://img.test/basil-thumb.jpg"
    assert body["default_image"]["original_url"] is None


def test_import_creates_unscheduled_plant(client, repository):
    response = client.post(f"{CATALOG_URL}/728/import")

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Sweet basil added to your garden! Watering schedule (est.): every 5 days."
    assert body["plant"]["watering_frequency_days"] == 5
    assert body["plant"]["next_watering_date"] is None
    assert body["plant"]["is_overdue"] is False

    (stored,) = repository.plants.values()
    assert stored.name == "Sweet basil"
    assert stored.sunlight_needs == "full sun, part shade"


def test_import_uses_label_when_benchmark_is_empty(client, repository):
    body = client.post(f"{CATALOG_URL}/1234/import").json()

    assert body["plant"]["watering_frequency_days"] == 14
    assert body["plant"]["notes"] == "Imported from the plant catalog. No description available."


def test_import_of_unknown_species_writes_nothing(client, repository):
    response = client.post(f"{CATALOG_URL}/4242/import")

    assert response.status_code == 404
    assert repository.plants == {}


def test_catalog_failure_is_retryable_and_writes_nothing(client, catalog, repository):
    catalog.error = ExternalAPIError("Perenual request failed with status 500", api_name="Perenual")

    response = client.post(f"{CATALOG_URL}/728/import")

    assert response.status_code == 502
    error = response.json()["error"]
    assert error["code"] == "EXTERNAL_API_ERROR"
    assert error["details"]["retryable"] is True
    assert repository.plants == {}


def test_catalog_timeout(client, catalog):
    catalog.error = APITimeoutError("Perenual", 15)

    response = client.get(CATALOG_URL, params={"q": "basil"})

    assert response.status_code == 504
    assert response.json()["error"]["details"]["retryable"] is True


def test_missing_api_key_is_reported(client, repository):
    client.app.dependency_overrides[get_catalog_client] = lambda: PerenualClient(api_key=None)

    response = client.post(f"{CATALOG_URL}/728/import")

    assert response.status_code == 503
    assert response.json()["error"]["message"] == "Perenual API Key not configured."
    assert repository.plants == {}


def test_catalog_requires_session(anonymous_client, catalog):
    assert anonymous_client.get(CATALOG_URL, params={"q": "basil"}).status_code == 401
    assert catalog.search_calls == []
