# 📄 File: garden_tracker/modules/plant_catalog/application/handlers/catalog_handlers.py
# 🧭 Purpose (Layman Explanation):
# The workers behind the plant search page: they look species up and, when the
# user picks one, add it to the garden with an estimated watering schedule.
#
# 🧪 Purpose (Technical Summary):
# CQRS handlers for the catalog. The import handler fetches species details
# first and only then writes, so a catalog failure leaves the store untouched.
#
# 🔗 Dependencies:
# - PerenualClient (catalog access)
# - plant_management PlantRepository (plant creation)
# - import_mapper (catalog -> Plant)
#
# 🔄 Connected Modules / Calls From:
# - plant_catalog.presentation.dependencies

from dataclasses import dataclass
from typing import Optional

from garden_tracker.modules.plant_management.domain.models.plant import Plant
from garden_tracker.modules.plant_management.domain.repositories.plant_repository import (
    PlantRepository,
)
from garden_tracker.shared.utils.logging import get_logger

from ...domain.models.species import CatalogSearchPage, CatalogSpeciesDetails
from ...domain.services.import_mapper import map_species_to_plant
from ...infrastructure.external.perenual_client import PerenualClient
from ..commands.import_species import ImportSpeciesCommand
from ..queries.catalog_queries import GetSpeciesDetailsQuery, SearchSpeciesQuery

logger = get_logger(__name__)


def describe_estimated_schedule(frequency_days: Optional[int]) -> str:
    if frequency_days:
        return f"every {frequency_days} days"
    return "Not set"


@dataclass
class ImportResult:
    plant: Plant
    species_id: int
    message: str


# =============================================================================
# QUERY HANDLERS
# =============================================================================

class SearchSpeciesQueryHandler:
    """Handler for catalog search."""

    def __init__(self, catalog_client: PerenualClient):
        self.catalog_client = catalog_client

    async def handle(self, query: SearchSpeciesQuery) -> CatalogSearchPage:
        return await self.catalog_client.search_species(query.query, page=query.page)


class GetSpeciesDetailsQueryHandler:
    """Handler for one catalog species."""

    def __init__(self, catalog_client: PerenualClient):
        self.catalog_client = catalog_client

    async def handle(self, query: GetSpeciesDetailsQuery) -> CatalogSpeciesDetails:
        return await self.catalog_client.get_species_details(query.species_id)


# =============================================================================
# COMMAND HANDLERS
# =============================================================================

class ImportSpeciesCommandHandler:
    """
    Handler for importing a catalog species as a new plant.

    The new plant has an estimated watering frequency but no last watering,
    so it has no next watering date and is never overdue on arrival.
    """

    def __init__(self, catalog_client: PerenualClient, plant_repository: PlantRepository):
        self.catalog_client = catalog_client
        self.plant_repository = plant_repository

    async def handle(self, command: ImportSpeciesCommand) -> ImportResult:
        details = await self.catalog_client.get_species_details(command.species_id)

        plant = map_species_to_plant(details, command.owner_id)
        created = await self.plant_repository.create(plant)

        message = (
            f"{created.name} added to your garden! Watering schedule (est.): "
            f"{describe_estimated_schedule(created.watering_frequency_days)}."
        )

        logger.log_user_action(
            action="import_species",
            user_id=str(command.owner_id),
            resource=f"plant:{created.id}",
            extra={
                "species_id": command.species_id,
                "estimated_frequency_days": created.watering_frequency_days,
            },
        )
        return ImportResult(plant=created, species_id=command.species_id, message=message)
