from .command_handlers import (
    CreatePlantCommandHandler,
    DeletePlantCommandHandler,
    UpdatePlantCommandHandler,
    WaterOverduePlantsCommandHandler,
    WaterPlantCommandHandler,
    WateringBatchResult,
)
from .query_handlers import (
    GardenOverview,
    GetPlantQueryHandler,
    ListPlantsQueryHandler,
    PlantDiagnosticsQueryHandler,
    PlantView,
)

__all__ = [
    "CreatePlantCommandHandler",
    "DeletePlantCommandHandler",
    "GardenOverview",
    "GetPlantQueryHandler",
    "ListPlantsQueryHandler",
    "PlantDiagnosticsQueryHandler",
    "PlantView",
    "UpdatePlantCommandHandler",
    "WaterOverduePlantsCommandHandler",
    "WaterPlantCommandHandler",
    "WateringBatchResult",
]
