# 📄 File: garden_tracker/modules/plant_catalog/presentation/api/v1/catalog.py
# 🧭 Purpose (Layman Explanation):
# The plant search page's endpoints: search the encyclopedia, open a species,
# and add it to the garden.
#
# 🧪 Purpose (Technical Summary):
# FastAPI catalog endpoints. Catalog failures surface as retryable
# ExternalAPIError/APITimeoutError responses through the application-wide
# exception handler; an import never writes when the catalog fails.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - plant_catalog.application (queries, commands, handlers)
# - garden_tracker.shared.core.dependencies (session gate)
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.api.v1.router (mounted under /catalog)

"""
Catalog API Endpoints

Endpoints:
- GET /species?q=&page=: Search species by name
- GET /species/{species_id}: Species details with the estimated frequency
- POST /species/{species_id}/import: Add the species to the garden
"""

from fastapi import APIRouter, Depends, Path, Query, status

from garden_tracker.shared.core.dependencies import CurrentUser, get_current_user
from garden_tracker.shared.utils.helpers import utc_now

from ....application.commands.import_species import ImportSpeciesCommand
from ....application.handlers.catalog_handlers import (
    GetSpeciesDetailsQueryHandler,
    ImportSpeciesCommandHandler,
    SearchSpeciesQueryHandler,
)
from ....application.queries.catalog_queries import GetSpeciesDetailsQuery, SearchSpeciesQuery
from ...dependencies import (
    get_import_species_handler,
    get_search_species_handler,
    get_species_details_handler,
)
from ..schemas.catalog_schemas import (
    ImportSpeciesResponse,
    SpeciesDetailsResponse,
    SpeciesSearchResponse,
)

catalog_router = APIRouter()

CATALOG_RESPONSES = {
    401: {"description": "Authentication required"},
    502: {"description": "Plant catalog unavailable (retryable)"},
    503: {"description": "Plant catalog not configured"},
    504: {"description": "Plant catalog timed out (retryable)"},
}


@catalog_router.get(
    "/species",
    response_model=SpeciesSearchResponse,
    summary="Search the plant catalog",
    responses=CATALOG_RESPONSES,
)
async def search_species(
    q: str = Query(..., min_length=1, max_length=100, description="Common or scientific name"),
    page: int = Query(1, ge=1),
    current_user: CurrentUser = Depends(get_current_user),
    handler: SearchSpeciesQueryHandler = Depends(get_search_species_handler),
) -> SpeciesSearchResponse:
    search_page = await handler.handle(SearchSpeciesQuery(query=q, page=page))
    return SpeciesSearchResponse.from_domain(search_page)


@catalog_router.get(
    "/species/{species_id}",
    response_model=SpeciesDetailsResponse,
    summary="Get a catalog species",
    responses={**CATALOG_RESPONSES, 404: {"description": "Species not found"}},
)
async def get_species(
    species_id: int = Path(..., gt=0),
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetSpeciesDetailsQueryHandler = Depends(get_species_details_handler),
) -> SpeciesDetailsResponse:
    details = await handler.handle(GetSpeciesDetailsQuery(species_id=species_id))
    return SpeciesDetailsResponse.from_domain(details)


@catalog_router.post(
    "/species/{species_id}/import",
    response_model=ImportSpeciesResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a catalog species to the garden",
    responses={**CATALOG_RESPONSES, 404: {"description": "Species not found"}},
)
async def import_species(
    species_id: int = Path(..., gt=0),
    current_user: CurrentUser = Depends(get_current_user),
    handler: ImportSpeciesCommandHandler = Depends(get_import_species_handler),
) -> ImportSpeciesResponse:
    """
    Create a plant from the species entry.

    The watering frequency is an estimate from the catalog's hints; the plant
    has no next watering date until it is first watered.
    """
    result = await handler.handle(
        ImportSpeciesCommand(species_id=species_id, owner_id=current_user.user_id)
    )
    return ImportSpeciesResponse.from_result(result, utc_now())
