# 📄 File: garden_tracker/modules/plant_management/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints behind the garden pages: list plants, add one, edit one,
# water one or all overdue plants, and delete a plant after confirmation.
#
# 🧪 Purpose (Technical Summary):
# FastAPI plant endpoints. Each route depends on the session gate for the
# current user and delegates to a CQRS handler; domain exceptions propagate to
# the application-wide exception handler.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters, status codes
# - plant_management.application (commands, queries, handlers)
# - plant_management.presentation.api.schemas.plant_schemas
# - garden_tracker.shared.core.dependencies (session gate)
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.api.v1.router (mounted under /plants)

"""
Plants API Endpoints

Endpoints:
- GET /: Garden view (plants with overdue flags; never writes)
- POST /: Add a plant
- POST /water-overdue: Water every overdue plant
- GET /{plant_id}: Get one plant
- PATCH /{plant_id}: Edit a plant (next watering date recomputed)
- DELETE /{plant_id}?confirm=true: Delete a plant
- POST /{plant_id}/water: Water one plant now
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from garden_tracker.shared.core.dependencies import CurrentUser, get_current_user
from garden_tracker.shared.utils.helpers import utc_now

from ....application.commands.create_plant import CreatePlantCommand
from ....application.commands.delete_plant import DeletePlantCommand
from ....application.commands.update_plant import UpdatePlantCommand
from ....application.commands.water_plants import WaterOverduePlantsCommand, WaterPlantCommand
from ....application.handlers.command_handlers import (
    CreatePlantCommandHandler,
    DeletePlantCommandHandler,
    UpdatePlantCommandHandler,
    WaterOverduePlantsCommandHandler,
    WaterPlantCommandHandler,
)
from ....application.handlers.query_handlers import GetPlantQueryHandler, ListPlantsQueryHandler
from ....application.queries.get_plant import GetPlantQuery
from ....application.queries.list_plants import ListPlantsQuery
from ...dependencies import (
    get_create_plant_handler,
    get_delete_plant_handler,
    get_get_plant_handler,
    get_list_plants_handler,
    get_update_plant_handler,
    get_water_overdue_handler,
    get_water_plant_handler,
)
from ..schemas.plant_schemas import (
    PlantCreateRequest,
    PlantListResponse,
    PlantResponse,
    PlantUpdateRequest,
    WateringBatchResponse,
)

logger = logging.getLogger(__name__)

plants_router = APIRouter()

COMMON_RESPONSES = {
    401: {"description": "Authentication required"},
    500: {"description": "Plant store error"},
}


@plants_router.get(
    "",
    response_model=PlantListResponse,
    summary="List plants",
    description="Garden view: every plant with its overdue flag and the overdue count",
    responses=COMMON_RESPONSES,
)
async def list_plants(
    overdue_only: bool = Query(False, description="Only return overdue plants"),
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListPlantsQueryHandler = Depends(get_list_plants_handler),
) -> PlantListResponse:
    overview = await handler.handle(
        ListPlantsQuery(owner_id=current_user.user_id, overdue_only=overdue_only)
    )
    return PlantListResponse.from_overview(overview)


@plants_router.post(
    "",
    response_model=PlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant",
    responses={**COMMON_RESPONSES, 422: {"description": "Invalid plant data"}},
)
async def create_plant(
    request: PlantCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: CreatePlantCommandHandler = Depends(get_create_plant_handler),
) -> PlantResponse:
    """
    Add a plant to the current user's garden.

    When both a last watered date and a frequency are given, the next
    watering date is derived from them.
    """
    plant = await handler.handle(
        CreatePlantCommand(owner_id=current_user.user_id, **request.model_dump())
    )
    return PlantResponse.from_domain(plant, utc_now())


@plants_router.post(
    "/water-overdue",
    response_model=WateringBatchResponse,
    summary="Water all overdue plants",
    description=(
        "Waters every overdue plant. Each plant is updated independently; "
        "plants that could not be updated are listed in the response."
    ),
    responses=COMMON_RESPONSES,
)
async def water_overdue_plants(
    current_user: CurrentUser = Depends(get_current_user),
    handler: WaterOverduePlantsCommandHandler = Depends(get_water_overdue_handler),
) -> WateringBatchResponse:
    result = await handler.handle(WaterOverduePlantsCommand(owner_id=current_user.user_id))
    return WateringBatchResponse.from_result(result, utc_now())


@plants_router.get(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Get a plant",
    responses={**COMMON_RESPONSES, 404: {"description": "Plant not found"}},
)
async def get_plant(
    plant_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetPlantQueryHandler = Depends(get_get_plant_handler),
) -> PlantResponse:
    view = await handler.handle(GetPlantQuery(plant_id=plant_id, owner_id=current_user.user_id))
    return PlantResponse.from_view(view)


@plants_router.patch(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Edit a plant",
    responses={
        **COMMON_RESPONSES,
        404: {"description": "Plant not found"},
        422: {"description": "Invalid plant data"},
    },
)
async def update_plant(
    plant_id: UUID,
    request: PlantUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: UpdatePlantCommandHandler = Depends(get_update_plant_handler),
) -> PlantResponse:
    """
    Apply the edited fields and recompute the next watering date.
    """
    plant = await handler.handle(
        UpdatePlantCommand(
            plant_id=plant_id,
            owner_id=current_user.user_id,
            changes=request.changes(),
        )
    )
    return PlantResponse.from_domain(plant, utc_now())


@plants_router.delete(
    "/{plant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a plant",
    responses={
        **COMMON_RESPONSES,
        404: {"description": "Plant not found"},
        422: {"description": "Deletion not confirmed"},
    },
)
async def delete_plant(
    plant_id: UUID,
    confirm: bool = Query(False, description="Must be true to delete"),
    current_user: CurrentUser = Depends(get_current_user),
    handler: DeletePlantCommandHandler = Depends(get_delete_plant_handler),
) -> Response:
    await handler.handle(
        DeletePlantCommand(plant_id=plant_id, owner_id=current_user.user_id, confirm=confirm)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@plants_router.post(
    "/{plant_id}/water",
    response_model=PlantResponse,
    summary="Water a plant now",
    responses={**COMMON_RESPONSES, 404: {"description": "Plant not found"}},
)
async def water_plant(
    plant_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    handler: WaterPlantCommandHandler = Depends(get_water_plant_handler),
) -> PlantResponse:
    plant = await handler.handle(WaterPlantCommand(plant_id=plant_id, owner_id=current_user.user_id))
    return PlantResponse.from_domain(plant, utc_now())
