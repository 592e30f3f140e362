from .plant_schemas import (
    PlantCreateRequest,
    PlantDiagnosticsResponse,
    PlantListResponse,
    PlantResponse,
    PlantUpdateRequest,
    WateringBatchResponse,
)

__all__ = [
    "PlantCreateRequest",
    "PlantDiagnosticsResponse",
    "PlantListResponse",
    "PlantResponse",
    "PlantUpdateRequest",
    "WateringBatchResponse",
]
