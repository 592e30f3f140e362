# 📄 File: garden_tracker/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick "are you alive?" check for the garden tracker, plus a deeper check
# that the plant database can be reached.
# 🧪 Purpose (Technical Summary):
# Liveness and database health endpoints. Catalog configuration is reported
# but never probed, so the health check makes no external calls.
# 🔗 Dependencies:
# FastAPI, garden_tracker.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# garden_tracker.api.v1.router, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from garden_tracker.shared.config.settings import Settings, get_settings
from garden_tracker.shared.infrastructure.database.connection import database_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter()

_app_start_time = datetime.now(timezone.utc)


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Liveness check for load balancers")
async def health_check(settings: Settings = Depends(get_settings)) -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }
    )


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Database connectivity and integration configuration")
async def detailed_health_check(settings: Settings = Depends(get_settings)) -> JSONResponse:
    """
    Check the database and report catalog configuration.

    Returns 503 when the database is unreachable so orchestrators can
    take the instance out of rotation.
    """
    now = datetime.now(timezone.utc)

    database = await database_health_check()
    overall_status = "healthy" if database.get("status") == "healthy" else "unhealthy"
    if overall_status != "healthy":
        logger.warning(f"Detailed health check failed: {database.get('error')}")

    return JSONResponse(
        status_code=200 if overall_status == "healthy" else 503,
        content={
            "status": overall_status,
            "timestamp": now.isoformat(),
            "uptime_seconds": int((now - _app_start_time).total_seconds()),
            "environment": settings.ENVIRONMENT,
            "version": settings.APP_VERSION,
            "components": {
                "database": database,
                "plant_catalog": {
                    "status": "configured" if settings.perenual_configured else "not_configured",
                },
            },
        }
    )
