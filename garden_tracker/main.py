# 📄 File: garden_tracker/main.py
#
# 🧭 Purpose (Layman Explanation):
# Starts the garden tracker, connects all its parts together and makes sure
# everything is ready before the first request arrives.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan (database and Supabase
# setup/teardown), middleware, router registration and the exception handlers
# that render every error as {"error": {code, message, details, timestamp, request_id}}.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - garden_tracker.shared.config.settings
# - garden_tracker.shared.infrastructure.database.connection
# - garden_tracker.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - garden-tracker console script

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from garden_tracker.api.middleware.logging import REQUEST_ID_HEADER, RequestLoggingMiddleware
from garden_tracker.api.v1 import API_PREFIX
from garden_tracker.api.v1.router import build_api_v1_router
from garden_tracker.shared.config.settings import Settings, get_settings
from garden_tracker.shared.config.supabase import cleanup_supabase
from garden_tracker.shared.core.exceptions import GardenTrackerException, is_client_error
from garden_tracker.shared.infrastructure.database.connection import (
    close_database,
    initialize_database,
)
from garden_tracker.shared.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database pool on startup and releases it, together with the
    Supabase client, on shutdown.
    """
    logger.info("🌱 Garden Tracker API starting up...")

    try:
        await initialize_database()
        logger.info("✅ Database connection initialized")
        logger.info("✅ Garden Tracker API startup complete")

        yield

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("🔄 Garden Tracker API shutting down...")
        try:
            await close_database()
            await cleanup_supabase()
            logger.info("✅ Garden Tracker API shutdown complete")
        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}", exc_info=True)


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": jsonable_encoder(details or {}),
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": getattr(request.state, "request_id", None),
            }
        },
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:

    @app.exception_handler(GardenTrackerException)
    async def garden_tracker_exception_handler(
        request: Request,
        exc: GardenTrackerException
    ) -> JSONResponse:
        """Handle application exceptions."""
        if not is_client_error(exc):
            logger.error(
                f"{exc.error_code}: {exc.message}",
                path=request.url.path,
                details=exc.details,
            )
        else:
            logger.info(
                f"{exc.error_code}: {exc.message}",
                path=request.url.path,
            )
        return _error_response(request, exc.status_code, exc.error_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Render request body/query validation failures in the common envelope."""
        return _error_response(
            request,
            422,
            "VALIDATION_ERROR",
            "Request validation failed",
            {"errors": exc.errors()},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Anything unexpected becomes a generic 500."""
        logger.error(f"Internal server error: {exc}", exc_info=True, path=request.url.path)
        return _error_response(
            request,
            500,
            "INTERNAL_SERVER_ERROR",
            "An internal server error occurred",
            {"error_type": type(exc).__name__} if settings.DEBUG else {},
        )


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        settings: Settings to build the app with; defaults to get_settings()

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging()

    docs_enabled = settings.ENABLE_SWAGGER_UI and not settings.is_production
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(build_api_v1_router(settings), prefix=API_PREFIX)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app, settings)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if docs_enabled else None,
            "health_check": f"{API_PREFIX}/health",
            "api_base": API_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """
    Run the application with uvicorn.

    Used by the garden-tracker console script and ``python -m garden_tracker.main``.
    """
    settings = get_settings()
    uvicorn.run(
        "garden_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
