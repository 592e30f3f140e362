# 📄 File: garden_tracker/modules/plant_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each garden request the tools it needs: a database-backed plant store
# and the right worker for the job.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers wiring a request-scoped PlantRepositoryImpl into
# the command and query handlers. Tests override get_plant_repository.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy AsyncSession, plant_management.application.handlers
# 🔄 Connected Modules / Calls From:
# plant_management.presentation.api.v1.*, plant_catalog.presentation.dependencies

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from garden_tracker.shared.infrastructure.database.session import get_db_session

from ..application.handlers.command_handlers import (
    CreatePlantCommandHandler,
    DeletePlantCommandHandler,
    UpdatePlantCommandHandler,
    WaterOverduePlantsCommandHandler,
    WaterPlantCommandHandler,
)
from ..application.handlers.query_handlers import (
    GetPlantQueryHandler,
    ListPlantsQueryHandler,
    PlantDiagnosticsQueryHandler,
)
from ..domain.repositories.plant_repository import PlantRepository
from ..infrastructure.database.plant_repository_impl import PlantRepositoryImpl


def get_plant_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PlantRepository:
    return PlantRepositoryImpl(session)


# =========================================================================
# COMMAND HANDLERS
# =========================================================================

def get_create_plant_handler(
    repository: PlantRepository = Depends(get_plant_repository),
) -> CreatePlantCommandHandler:
    return CreatePlantCommandHandler(repository)


def get_update_plant_handler(
    repository: PlantRepository = Depends(get_plant_repository),
) -> UpdatePlantCommandHandler:
    return UpdatePlantCommandHandler(repository)


def get_delete_plant_handler(
    repository: PlantRepository = Depends(get_plant_repository),
) -> DeletePlantCommandHandler:
    return DeletePlantCommandHandler(repository)


def get_water_plant_handler(
    repository: PlantRepository = Depends(get_plant_repository),
) -> WaterPlantCommandHandler:
    return WaterPlantCommandHandler(repository)


def get_water_overdue_handler(
    repository: PlantRepository = Depends(get_plant_repository),
) -> WaterOverduePlantsCommandHandler:
    return WaterOverduePlantsCommandHandler(repository)


# =========================================================================
# QUERY HANDLERS
# =========================================================================

def get_list_plants_handler(
    repository: PlantRepository = Depends(get_plant_repository),
) -> ListPlantsQueryHandler:
    return ListPlantsQueryHandler(repository)


def get_get_plant_handler(
    repository: PlantRepository = Depends(get_plant_repository),
) -> GetPlantQueryHandler:
    return GetPlantQueryHandler(repository)


def get_diagnostics_handler(
    repository: PlantRepository = Depends(get_plant_repository),
) -> PlantDiagnosticsQueryHandler:
    return PlantDiagnosticsQueryHandler(repository)
