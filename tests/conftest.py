import os

os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Set
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from garden_tracker.main import create_application
from garden_tracker.modules.plant_catalog.domain.models.species import (
    CatalogSearchPage,
    CatalogSpeciesDetails,
    CatalogSpeciesSummary,
)
from garden_tracker.modules.plant_catalog.presentation.dependencies import get_catalog_client
from garden_tracker.modules.plant_management.domain.models.plant import Plant
from garden_tracker.modules.plant_management.domain.repositories.plant_repository import (
    PlantRepository,
)
from garden_tracker.modules.plant_management.presentation.dependencies import get_plant_repository
from garden_tracker.shared.config.settings import Settings, get_settings
from garden_tracker.shared.config.supabase import get_supabase_manager
from garden_tracker.shared.core.exceptions import NotFoundError, RepositoryError

OWNER_ID = UUID("11111111-1111-4111-8111-111111111111")
OTHER_OWNER_ID = UUID("22222222-2222-4222-8222-222222222222")
VALID_TOKEN = "valid-session-token"
NOW = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)

PLANT_COLUMNS = [
    "id", "owner_id", "name", "species", "notes", "sunlight_needs", "date_planted",
    "last_watered_date", "watering_frequency_days", "next_watering_date",
    "created_at", "updated_at",
]


class InMemoryPlantRepository(PlantRepository):
    """Dict-backed PlantRepository; ``fail_update_ids`` makes updates of those plants fail."""

    def __init__(self):
        self.plants: Dict[UUID, Plant] = {}
        self.fail_update_ids: Set[UUID] = set()
        self.update_calls: List[UUID] = []

    async def create(self, plant: Plant) -> Plant:
        stamp = datetime.now(timezone.utc)
        stored = plant.model_copy(update={"id": uuid4(), "created_at": stamp, "updated_at": stamp})
        self.plants[stored.id] = stored
        return stored.model_copy()

    async def get_by_id(self, plant_id: UUID, owner_id: UUID) -> Optional[Plant]:
        plant = self.plants.get(plant_id)
        if plant is None or plant.owner_id != owner_id:
            return None
        return plant.model_copy()

    async def list_by_owner(self, owner_id: UUID) -> List[Plant]:
        owned = [p for p in self.plants.values() if p.owner_id == owner_id]
        return [p.model_copy() for p in sorted(owned, key=lambda p: p.name)]

    async def update(self, plant_id: UUID, owner_id: UUID, fields: Dict[str, Any]) -> Optional[Plant]:
        self.update_calls.append(plant_id)
        if plant_id in self.fail_update_ids:
            raise RepositoryError("Failed to update plant", operation="update", entity="plant")
        plant = self.plants.get(plant_id)
        if plant is None or plant.owner_id != owner_id:
            return None
        updated = plant.model_copy(update={**fields, "updated_at": datetime.now(timezone.utc)})
        self.plants[plant_id] = updated
        return updated.model_copy()

    async def delete(self, plant_id: UUID, owner_id: UUID) -> bool:
        plant = self.plants.get(plant_id)
        if plant is None or plant.owner_id != owner_id:
            return False
        del self.plants[plant_id]
        return True

    async def get_column_names(self) -> List[str]:
        return list(PLANT_COLUMNS)

    def add(self, owner_id: UUID = OWNER_ID, **fields) -> Plant:
        """Seed a stored plant directly."""
        plant = Plant(owner_id=owner_id, **{"name": "Plant", **fields})
        plant = plant.model_copy(update={"id": uuid4(), "created_at": NOW, "updated_at": NOW})
        self.plants[plant.id] = plant
        return plant


class FakeCatalogClient:
    """Stands in for PerenualClient; set ``error`` to make every call raise it."""

    def __init__(self, species: Optional[Dict[int, dict]] = None):
        self.species = species or {}
        self.error: Optional[Exception] = None
        self.detail_calls: List[int] = []
        self.search_calls: List[tuple] = []

    async def search_species(self, query: str, page: int = 1) -> CatalogSearchPage:
        self.search_calls.append((query, page))
        if self.error:
            raise self.error
        hits = [
            CatalogSpeciesSummary.from_api(payload)
            for payload in self.species.values()
            if query.lower() in (payload.get("common_name") or "").lower()
        ]
        return CatalogSearchPage(results=hits, page=page, last_page=max(page, 1), total=len(hits))

    async def get_species_details(self, species_id: int) -> CatalogSpeciesDetails:
        self.detail_calls.append(species_id)
        if self.error:
            raise self.error
        if species_id not in self.species:
            raise NotFoundError(
                f"Species {species_id} was not found in the plant catalog",
                resource_type="catalog_species",
                resource_id=str(species_id),
            )
        return CatalogSpeciesDetails.model_validate(self.species[species_id])

    async def close(self):
        pass


class FakeAuth:
    def get_user(self, token: str):
        if token != VALID_TOKEN:
            raise Exception("invalid JWT")
        return SimpleNamespace(
            user=SimpleNamespace(id=str(OWNER_ID), email="gardener@example.com", aud="authenticated")
        )


class FakeSupabaseManager:
    def get_auth_client(self):
        return FakeAuth()


BASIL = {
    "id": 728,
    "common_name": "Sweet basil",
    "scientific_name": ["Ocimum basilicum"],
    "description": "A fragrant culinary herb.",
    "sunlight": ["full sun", "part shade"],
    "watering": "Frequent",
    "watering_general_benchmark": {"value": "5-7", "unit": "days"},
    "maintenance": "Low",
    "hardiness": {"min": "10", "max": "11"},
    "default_image": {"thumbnail": "https://img.test/basil-thumb.jpg"},
}

CACTUS = {
    "id": 1234,
    "common_name": "Golden barrel cactus",
    "scientific_name": ["Echinocactus grusonii"],
    "description": None,
    "sunlight": "full sun",
    "watering": "Minimum",
    "watering_general_benchmark": {"value": None, "unit": None},
}


@pytest.fixture
def repository() -> InMemoryPlantRepository:
    return InMemoryPlantRepository()


@pytest.fixture
def catalog() -> FakeCatalogClient:
    return FakeCatalogClient({BASIL["id"]: BASIL, CACTUS["id"]: CACTUS})


def make_settings(**overrides) -> Settings:
    values = {
        "SUPABASE_URL": "https://example.supabase.co",
        "SUPABASE_ANON_KEY": "test-anon-key",
        "ENVIRONMENT": "test",
        "ENABLE_DIAGNOSTICS": True,
        "PERENUAL_API_KEY": "test-perenual-key",
        **overrides,
    }
    return Settings(**values)


def build_app(repository, catalog, settings: Optional[Settings] = None):
    settings = settings or make_settings()
    app = create_application(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_plant_repository] = lambda: repository
    app.dependency_overrides[get_catalog_client] = lambda: catalog
    app.dependency_overrides[get_supabase_manager] = lambda: FakeSupabaseManager()
    return app


@pytest.fixture
def client(repository, catalog) -> TestClient:
    test_client = TestClient(build_app(repository, catalog))
    test_client.headers.update({"Authorization": f"Bearer {VALID_TOKEN}"})
    return test_client


@pytest.fixture
def anonymous_client(repository, catalog) -> TestClient:
    return TestClient(build_app(repository, catalog))


def days_ago(days: float) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)
