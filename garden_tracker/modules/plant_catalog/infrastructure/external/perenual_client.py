# 📄 File: garden_tracker/modules/plant_catalog/infrastructure/external/perenual_client.py

# 🧭 Purpose (Layman Explanation):
# Talks to the Perenual plant encyclopedia: searches species by name and fetches
# the full entry for one species.

# 🧪 Purpose (Technical Summary):
# Perenual v2 client built on the shared APIClient. Adds the API key as a query
# parameter, checks configuration before any network call and validates the
# payloads into catalog domain models.

# 🔗 Dependencies:
# - APIClient (aiohttp)
# - pydantic (payload validation)
# - garden_tracker.shared.config.settings

# 🔄 Connected Modules / Calls From:
# - plant_catalog.presentation.dependencies
# - ImportSpeciesCommandHandler, catalog query handlers

from typing import Any, Optional

from aiohttp import ClientSession
from pydantic import ValidationError as PydanticValidationError

from garden_tracker.shared.config.settings import Settings, get_settings
from garden_tracker.shared.core.exceptions import (
    ExternalAPIError,
    NotFoundError,
    ServiceNotConfiguredError,
    ValidationError,
)
from garden_tracker.shared.infrastructure.external_apis.api_client import APIClient
from garden_tracker.shared.utils.logging import get_logger

from ...domain.models.species import CatalogSearchPage, CatalogSpeciesDetails, CatalogSpeciesSummary

logger = get_logger(__name__)

API_NAME = "Perenual"


class PerenualClient:
    """
    Perenual species catalog client.

    Endpoints:
    - species-list: search with paging
    - species/details/{id}: one species
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://perenual.com/api/v2",
        timeout: int = 15,
        session: Optional[ClientSession] = None,
    ):
        self.api_key = api_key
        self._http = APIClient(
            base_url=base_url,
            api_name=API_NAME,
            timeout=timeout,
            default_params={"key": api_key} if api_key else {},
            session=session,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PerenualClient":
        settings = settings or get_settings()
        return cls(
            api_key=settings.PERENUAL_API_KEY,
            base_url=settings.PERENUAL_API_URL,
            timeout=settings.PERENUAL_TIMEOUT,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _require_key(self):
        if not self.is_configured:
            raise ServiceNotConfiguredError(API_NAME, "PERENUAL_API_KEY")

    def _unexpected_payload(self, endpoint: str, error: Optional[Exception] = None) -> ExternalAPIError:
        logger.warning(
            f"Unexpected {API_NAME} payload from {endpoint}",
            extra={"endpoint": endpoint, "error": str(error) if error else None},
        )
        return ExternalAPIError(
            f"{API_NAME} returned an unexpected response",
            api_name=API_NAME,
        )

    # =========================================================================
    # CATALOG OPERATIONS
    # =========================================================================

    async def search_species(self, query: str, page: int = 1) -> CatalogSearchPage:
        """
        Search species by name.

        Args:
            query: Free-text name query (common or scientific)
            page: 1-based result page

        Returns:
            CatalogSearchPage with the hits and paging info
        """
        self._require_key()

        query = (query or "").strip()
        if not query:
            raise ValidationError("Search query is required", field="q")
        if page < 1:
            raise ValidationError("Page must be 1 or greater", field="page", value=page)

        endpoint = "species-list"
        payload = await self._http.get(endpoint, params={"q": query, "page": page})
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
            raise self._unexpected_payload(endpoint)

        try:
            results = [
                CatalogSpeciesSummary.from_api(item)
                for item in payload["data"]
                if isinstance(item, dict)
            ]
            search_page = CatalogSearchPage(
                results=results,
                page=payload.get("current_page") or page,
                last_page=payload.get("last_page") or page,
                per_page=payload.get("per_page"),
                total=payload.get("total"),
            )
        except PydanticValidationError as e:
            raise self._unexpected_payload(endpoint, e) from e

        logger.debug(
            f"{API_NAME} search returned {len(results)} species",
            extra={"query": query, "page": page, "total": search_page.total},
        )
        return search_page

    async def get_species_details(self, species_id: int) -> CatalogSpeciesDetails:
        """Fetch the full catalog entry for one species."""
        self._require_key()

        endpoint = f"species/details/{species_id}"
        try:
            payload: Any = await self._http.get(endpoint)
        except NotFoundError as e:
            raise NotFoundError(
                f"Species {species_id} was not found in the plant catalog",
                resource_type="catalog_species",
                resource_id=str(species_id),
            ) from e

        if not isinstance(payload, dict) or "id" not in payload:
            raise self._unexpected_payload(endpoint)

        try:
            return CatalogSpeciesDetails.model_validate(payload)
        except PydanticValidationError as e:
            raise self._unexpected_payload(endpoint, e) from e

    def get_stats(self):
        return self._http.get_stats()

    async def close(self):
        await self._http.close()
