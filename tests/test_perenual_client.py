import asyncio
from typing import Any, List, Optional

import aiohttp
import pytest

from garden_tracker.modules.plant_catalog.infrastructure.external.perenual_client import (
    PerenualClient,
)
from garden_tracker.shared.core.exceptions import (
    APITimeoutError,
    ExternalAPIError,
    NotFoundError,
    ServiceNotConfiguredError,
    ValidationError,
)

from .conftest import BASIL


class FakeResponse:
    def __init__(self, status: int, payload: Any = None, text: str = ""):
        self.status = status
        self._payload = payload
        self._text = text

    async def json(self, content_type=None):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    async def text(self):
        return self._text


class FakeRequest:
    def __init__(self, outcome):
        self._outcome = outcome

    async def __aenter__(self):
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Minimal aiohttp.ClientSession stand-in recording every request."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.requests: List[dict] = []
        self.closed = False

    def request(self, method: str, url: str, params: Optional[dict] = None):
        self.requests.append({"method": method, "url": url, "params": params})
        return FakeRequest(self.outcome)

    async def close(self):
        self.closed = True


def make_client(outcome, api_key: Optional[str] = "secret-key") -> tuple:
    session = FakeSession(outcome)
    client = PerenualClient(
        api_key=api_key,
        base_url="https://perenual.test/api/v2/",
        timeout=5,
        session=session,
    )
    return client, session


SEARCH_PAYLOAD = {
    "data": [
        {
            "id": 728,
            "common_name": "Sweet basil",
            "scientific_name": ["Ocimum basilicum"],
            "watering": "Frequent",
            "default_image": {"thumbnail": "https://img.test/basil.jpg"},
        },
        {"id": 729, "common_name": "Thai basil", "scientific_name": "Ocimum thyrsiflorum"},
    ],
    "current_page": 1,
    "last_page": 3,
    "per_page": 30,
    "total": 62,
}


async def test_search_sends_key_query_and_page():
    client, session = make_client(FakeResponse(200, SEARCH_PAYLOAD))

    page = await client.search_species(" basil ", page=1)

    request = session.requests[0]
    assert request["method"] == "GET"
    assert request["url"] == "https://perenual.test/api/v2/species-list"
    assert request["params"] == {"key": "secret-key", "q": "basil", "page": 1}
    assert [hit.id for hit in page.results] == [728, 729]
    assert page.results[0].thumbnail_url == "https://img.test/basil.jpg"
    assert page.results[1].scientific_name == ["Ocimum thyrsiflorum"]
    assert page.has_next
    assert page.total == 62


async def test_details_parses_species():
    client, session = make_client(FakeResponse(200, {**BASIL, "other_name": None, "indoor": 1}))

    details = await client.get_species_details(728)

    assert session.requests[0]["url"] == "https://perenual.test/api/v2/species/details/728"
    assert session.requests[0]["params"] == {"key": "secret-key"}
    assert details.common_name == "Sweet basil"
    assert details.watering_general_benchmark.value == "5-7"
    assert details.other_name == []
    assert details.indoor is True


async def test_details_keep_image_hardiness_and_maintenance():
    payload = {
        **BASIL,
        "maintenance": "Low",
        "hardiness": {"min": 10, "max": "11"},
        "default_image": {
            "license": 45,
            "thumbnail": "https://img.test/basil-thumb.jpg",
            "regular_url": "https://img.test/basil.jpg",
            "original_url": "https://img.test/basil-full.jpg",
        },
    }
    client, _ = make_client(FakeResponse(200, payload))

    details = await client.get_species_details(728)

    assert details.maintenance == "Low"
    assert (details.hardiness.min, details.hardiness.max) == ("10", "11")
    assert details.default_image.original_url == "https://img.test/basil-full.jpg"
    assert details.default_image.thumbnail == "https://img.test/basil-thumb.jpg"


@pytest.mark.parametrize("empty", [None, {}, [], {"min": None, "max": None}])
async def test_details_treat_empty_objects_as_missing(empty):
    client, _ = make_client(FakeResponse(200, {**BASIL, "hardiness": empty, "default_image": empty}))

    details = await client.get_species_details(728)

    assert details.hardiness is None
    assert details.default_image is None


async def test_missing_key_fails_before_any_request():
    client, session = make_client(FakeResponse(200, SEARCH_PAYLOAD), api_key=None)

    with pytest.raises(ServiceNotConfiguredError) as exc_info:
        await client.search_species("basil")
    with pytest.raises(ServiceNotConfiguredError):
        await client.get_species_details(728)

    assert exc_info.value.message == "Perenual API Key not configured."
    assert exc_info.value.status_code == 503
    assert session.requests == []


async def test_blank_query_is_rejected():
    client, session = make_client(FakeResponse(200, SEARCH_PAYLOAD))

    with pytest.raises(ValidationError):
        await client.search_species("   ")
    assert session.requests == []


async def test_server_error_is_retryable_external_error():
    client, _ = make_client(FakeResponse(500, text="upstream exploded"))

    with pytest.raises(ExternalAPIError) as exc_info:
        await client.search_species("basil")

    error = exc_info.value
    assert error.status_code == 502
    assert error.details["retryable"] is True
    assert error.details["api_status_code"] == 500


async def test_rejected_key_is_not_retryable():
    client, _ = make_client(FakeResponse(401, text="bad key"))

    with pytest.raises(ExternalAPIError) as exc_info:
        await client.get_species_details(728)

    assert exc_info.value.details["retryable"] is False


async def test_unknown_species_is_not_found():
    client, _ = make_client(FakeResponse(404, text="not found"))

    with pytest.raises(NotFoundError) as exc_info:
        await client.get_species_details(999999)

    assert exc_info.value.details["resource_type"] == "catalog_species"
    assert exc_info.value.details["resource_id"] == "999999"


async def test_timeout_becomes_api_timeout_error():
    client, _ = make_client(asyncio.TimeoutError())

    with pytest.raises(APITimeoutError) as exc_info:
        await client.search_species("basil")

    assert exc_info.value.status_code == 504
    assert exc_info.value.details["retryable"] is True


async def test_network_failure_becomes_external_error():
    client, _ = make_client(aiohttp.ClientConnectionError("connection refused"))

    with pytest.raises(ExternalAPIError) as exc_info:
        await client.get_species_details(728)

    assert exc_info.value.status_code == 502


async def test_malformed_payloads_are_external_errors():
    client, _ = make_client(FakeResponse(200, {"message": "upgrade your plan"}))
    with pytest.raises(ExternalAPIError):
        await client.search_species("basil")

    client, _ = make_client(FakeResponse(200, ValueError("not json")))
    with pytest.raises(ExternalAPIError):
        await client.get_species_details(728)


async def test_stats_count_failures_and_close_leaves_caller_session_open():
    client, session = make_client(FakeResponse(503, text="busy"))

    with pytest.raises(ExternalAPIError):
        await client.search_species("basil")

    stats = client.get_stats()
    assert stats["total_requests"] == 1
    assert stats["failed_requests"] == 1

    await client.close()
    assert not session.closed
    assert client._http.session is None


async def test_close_releases_session_the_client_created():
    client = PerenualClient(api_key="secret-key", base_url="https://perenual.test/api/v2")
    await client._http.initialize()
    created = client._http.session

    await client.close()

    assert created.closed
