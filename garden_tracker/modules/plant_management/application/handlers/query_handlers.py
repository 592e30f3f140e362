# 📄 File: garden_tracker/modules/plant_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Reads the garden for display: the list of plants with the thirsty ones marked,
# a single plant, and a read-only health summary for developers.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers. None of them write: overdue state is computed on read
# and reported, never acted on.
#
# 🔗 Dependencies:
# - plant_management.application.queries
# - plant_management.domain.services.watering_service (overdue detection)
# - plant_management.domain.repositories
#
# 🔄 Connected Modules / Calls From:
# - plant_management.presentation.dependencies (handler wiring)
# - plants API and diagnostics API

__all__ = [
    "GardenOverview",
    "GetPlantQueryHandler",
    "ListPlantsQueryHandler",
    "PlantDiagnosticsQueryHandler",
    "PlantView",
]

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List
from uuid import UUID

from garden_tracker.shared.core.exceptions import PlantNotFoundError
from garden_tracker.shared.utils.helpers import utc_now

from ...domain.models.plant import Plant
from ...domain.repositories.plant_repository import PlantRepository
from ...domain.services.watering_service import count_overdue, is_overdue
from ..queries.get_plant import GetPlantQuery
from ..queries.list_plants import ListPlantsQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlantView:
    """A plant together with its overdue flag at the time of reading."""

    plant: Plant
    is_overdue: bool


@dataclass
class GardenOverview:
    """
    The garden view. The counts cover every plant of the owner, also when
    ``plants`` is filtered down to the overdue ones.
    """

    plants: List[PlantView]
    total_count: int
    overdue_count: int
    checked_at: datetime = field(default_factory=utc_now)


class ListPlantsQueryHandler:
    """
    Builds the garden view.
    """

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, query: ListPlantsQuery) -> GardenOverview:
        now = query.now or utc_now()
        plants = await self._plant_repository.list_by_owner(query.owner_id)

        views = [PlantView(plant=plant, is_overdue=is_overdue(plant, now)) for plant in plants]
        if query.overdue_only:
            views = [view for view in views if view.is_overdue]

        overview = GardenOverview(
            plants=views,
            total_count=len(plants),
            overdue_count=count_overdue(plants, now),
            checked_at=now,
        )
        logger.debug(
            f"Listed {overview.total_count} plants for {query.owner_id} "
            f"({overview.overdue_count} overdue)"
        )
        return overview


class GetPlantQueryHandler:
    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, query: GetPlantQuery) -> PlantView:
        plant = await self._plant_repository.get_by_id(query.plant_id, query.owner_id)
        if plant is None:
            raise PlantNotFoundError(str(query.plant_id))
        return PlantView(plant=plant, is_overdue=is_overdue(plant, query.now or utc_now()))


class PlantDiagnosticsQueryHandler:
    """
    Read-only summary of the owner's plant records for development builds.

    Reports the records a watering run would skip or act on; it never fills
    in missing values or moves dates.
    """

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, owner_id: UUID) -> Dict[str, Any]:
        now = utc_now()
        plants = await self._plant_repository.list_by_owner(owner_id)
        columns = await self._plant_repository.get_column_names()

        return {
            "checked_at": now,
            "plant_count": len(plants),
            "overdue_count": count_overdue(plants, now),
            "missing_frequency_ids": [
                str(plant.id) for plant in plants if plant.watering_frequency_days is None
            ],
            "missing_last_watered_ids": [
                str(plant.id) for plant in plants if plant.last_watered_date is None
            ],
            "unscheduled_ids": [
                str(plant.id) for plant in plants if plant.next_watering_date is None
            ],
            "columns": columns,
        }
