# 📄 File: garden_tracker/modules/plant_catalog/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each plant-search request a connection to the plant encyclopedia and
# hangs up when the request is done.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the catalog client and catalog handlers.
# get_catalog_client is a yield dependency so the aiohttp session is always
# closed; tests override it with a fake client.
# 🔗 Dependencies:
# FastAPI, PerenualClient, plant_management.presentation.dependencies
# 🔄 Connected Modules / Calls From:
# plant_catalog.presentation.api.v1.catalog

from typing import AsyncIterator

from fastapi import Depends

from garden_tracker.modules.plant_management.domain.repositories.plant_repository import (
    PlantRepository,
)
from garden_tracker.modules.plant_management.presentation.dependencies import get_plant_repository
from garden_tracker.shared.config.settings import Settings, get_settings

from ..application.handlers.catalog_handlers import (
    GetSpeciesDetailsQueryHandler,
    ImportSpeciesCommandHandler,
    SearchSpeciesQueryHandler,
)
from ..infrastructure.external.perenual_client import PerenualClient


async def get_catalog_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[PerenualClient]:
    client = PerenualClient.from_settings(settings)
    try:
        yield client
    finally:
        await client.close()


def get_search_species_handler(
    client: PerenualClient = Depends(get_catalog_client),
) -> SearchSpeciesQueryHandler:
    return SearchSpeciesQueryHandler(client)


def get_species_details_handler(
    client: PerenualClient = Depends(get_catalog_client),
) -> GetSpeciesDetailsQueryHandler:
    return GetSpeciesDetailsQueryHandler(client)


def get_import_species_handler(
    client: PerenualClient = Depends(get_catalog_client),
    repository: PlantRepository = Depends(get_plant_repository),
) -> ImportSpeciesCommandHandler:
    return ImportSpeciesCommandHandler(client, repository)
