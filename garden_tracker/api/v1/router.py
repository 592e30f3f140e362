# 📄 File: garden_tracker/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Sends each API request to the right part of the app: plant requests to the
# garden, search requests to the plant catalog.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation. The diagnostics router is only included when
# the settings allow it (never in production).
# 🔗 Dependencies:
# FastAPI, module routers
# 🔄 Connected Modules / Calls From:
# garden_tracker.main

import logging

from fastapi import APIRouter

from garden_tracker.modules.plant_catalog.presentation.api.v1.catalog import catalog_router
from garden_tracker.modules.plant_management.presentation.api.v1.diagnostics import diagnostics_router
from garden_tracker.modules.plant_management.presentation.api.v1.plants import plants_router
from garden_tracker.shared.config.settings import Settings

from . import API_TAGS, ROUTE_PREFIXES
from .health import health_router

logger = logging.getLogger(__name__)


def build_api_v1_router(settings: Settings) -> APIRouter:
    """Assemble the v1 router for the given settings."""
    router = APIRouter()

    router.include_router(health_router, tags=[API_TAGS["health"]])
    router.include_router(
        plants_router,
        prefix=ROUTE_PREFIXES["plants"],
        tags=[API_TAGS["plants"]],
    )
    router.include_router(
        catalog_router,
        prefix=ROUTE_PREFIXES["catalog"],
        tags=[API_TAGS["catalog"]],
    )

    if settings.diagnostics_enabled:
        router.include_router(
            diagnostics_router,
            prefix=ROUTE_PREFIXES["diagnostics"],
            tags=[API_TAGS["diagnostics"]],
        )
        logger.info("Diagnostics endpoints enabled")

    return router
