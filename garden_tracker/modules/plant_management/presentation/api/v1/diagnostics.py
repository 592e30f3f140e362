# 📄 File: garden_tracker/modules/plant_management/presentation/api/v1/diagnostics.py
# 🧭 Purpose (Layman Explanation):
# A developer-only page that reports on the health of the plant records
# without changing any of them.
#
# 🧪 Purpose (Technical Summary):
# Read-only diagnostics endpoint. The router is only mounted when
# ENABLE_DIAGNOSTICS is set and the environment is not production
# (see garden_tracker.api.v1.router).
#
# 🔗 Dependencies:
# - FastAPI router
# - PlantDiagnosticsQueryHandler
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.api.v1.router (mounted under /diagnostics)

from fastapi import APIRouter, Depends

from garden_tracker.shared.core.dependencies import CurrentUser, get_current_user

from ....application.handlers.query_handlers import PlantDiagnosticsQueryHandler
from ...dependencies import get_diagnostics_handler
from ..schemas.plant_schemas import PlantDiagnosticsResponse

diagnostics_router = APIRouter()


@diagnostics_router.get(
    "/plants",
    response_model=PlantDiagnosticsResponse,
    summary="Plant data diagnostics",
    description="Counts and column listing for the current user's plants. Never writes.",
)
async def plant_diagnostics(
    current_user: CurrentUser = Depends(get_current_user),
    handler: PlantDiagnosticsQueryHandler = Depends(get_diagnostics_handler),
) -> PlantDiagnosticsResponse:
    return PlantDiagnosticsResponse(**await handler.handle(current_user.user_id))
