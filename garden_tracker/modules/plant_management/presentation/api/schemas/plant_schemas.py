# 📄 File: garden_tracker/modules/plant_management/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the data the garden pages send and receive: the add/edit plant
# forms, a plant card, the garden list and the watering summary.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the plants API. Request models forbid
# unknown fields, so clients cannot write next_watering_date directly.
#
# 🔗 Dependencies:
# - pydantic
# - plant_management.application.handlers (views and results to convert from)
#
# 🔄 Connected Modules / Calls From:
# - plant_management.presentation.api.v1.plants
# - plant_management.presentation.api.v1.diagnostics
# - plant_catalog.presentation (import response embeds PlantResponse)

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ....application.handlers.command_handlers import WateringBatchResult
from ....application.handlers.query_handlers import GardenOverview, PlantView
from ....domain.models.plant import Plant
from ....domain.services import watering_service


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class PlantCreateRequest(BaseModel):
    """Body of the "add plant" form."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=200, examples=["Kitchen basil"])
    species: Optional[str] = Field(None, max_length=500, examples=["Ocimum basilicum"])
    notes: Optional[str] = Field(None, max_length=5000)
    sunlight_needs: Optional[str] = Field(None, max_length=200, examples=["Full sun"])
    date_planted: Optional[datetime] = None
    last_watered_date: Optional[datetime] = None
    watering_frequency_days: Optional[int] = Field(None, ge=1, le=365, examples=[3])


class PlantUpdateRequest(BaseModel):
    """
    Body of the plant edit form.

    Only the fields present in the body are changed; an explicit null clears
    an optional field.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    species: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = Field(None, max_length=5000)
    sunlight_needs: Optional[str] = Field(None, max_length=200)
    date_planted: Optional[datetime] = None
    last_watered_date: Optional[datetime] = None
    watering_frequency_days: Optional[int] = Field(None, ge=1, le=365)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class PlantResponse(BaseModel):
    """A plant as shown on a plant card."""

    id: UUID
    name: str
    species: Optional[str] = None
    notes: Optional[str] = None
    sunlight_needs: Optional[str] = None
    date_planted: Optional[datetime] = None
    last_watered_date: Optional[datetime] = None
    watering_frequency_days: Optional[int] = None
    next_watering_date: Optional[datetime] = None
    is_overdue: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, plant: Plant, now: datetime) -> "PlantResponse":
        """Plant card with the overdue flag evaluated at ``now``."""
        return cls(
            **plant.model_dump(exclude={"owner_id"}),
            is_overdue=watering_service.is_overdue(plant, now),
        )

    @classmethod
    def from_view(cls, view: PlantView) -> "PlantResponse":
        return cls(**view.plant.model_dump(exclude={"owner_id"}), is_overdue=view.is_overdue)


class PlantListResponse(BaseModel):
    """The garden view."""

    plants: List[PlantResponse]
    total_count: int
    overdue_count: int
    checked_at: datetime

    @classmethod
    def from_overview(cls, overview: GardenOverview) -> "PlantListResponse":
        return cls(
            plants=[PlantResponse.from_view(view) for view in overview.plants],
            total_count=overview.total_count,
            overdue_count=overview.overdue_count,
            checked_at=overview.checked_at,
        )


class WateringFailure(BaseModel):
    plant_id: str
    error: str


class WateringBatchResponse(BaseModel):
    """Summary of "water all overdue"; failures are listed, not raised."""

    watered_count: int
    failed_count: int
    watered: List[PlantResponse]
    failed: List[WateringFailure]
    message: str

    @classmethod
    def from_result(cls, result: WateringBatchResult, now: datetime) -> "WateringBatchResponse":
        if result.attempted_count == 0:
            message = "No plants are overdue for watering."
        elif not result.failed:
            message = f"Watered {len(result.watered)} plant(s)."
        else:
            message = (
                f"Watered {len(result.watered)} plant(s); "
                f"{len(result.failed)} could not be updated."
            )
        return cls(
            watered_count=len(result.watered),
            failed_count=len(result.failed),
            watered=[PlantResponse.from_domain(plant, now) for plant in result.watered],
            failed=[WateringFailure(**item) for item in result.failed],
            message=message,
        )


class PlantDiagnosticsResponse(BaseModel):
    """Read-only data health summary (development builds only)."""

    checked_at: datetime
    plant_count: int
    overdue_count: int
    missing_frequency_ids: List[str]
    missing_last_watered_ids: List[str]
    unscheduled_ids: List[str]
    columns: List[str]
