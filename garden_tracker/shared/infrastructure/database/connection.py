# 📄 File: garden_tracker/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens and closes the link to the Garden Tracker's PostgreSQL database and
# can tell whether the database is answering.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle (create, ping, dispose) with pooled asyncpg
# connections configured from Settings.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - asyncpg (PostgreSQL async driver)
# - garden_tracker.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.main (lifespan startup/shutdown)
# - garden_tracker.shared.infrastructure.database.session
# - garden_tracker.api.v1.health

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from garden_tracker.shared.config.settings import get_settings

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Owns the process-wide async engine and its connection pool.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters from settings."""
        settings = get_settings()
        return {
            "url": settings.database_url,
            "echo": settings.DEBUG and settings.is_development,
            "pool_pre_ping": True,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "connect_args": {
                "server_settings": {
                    "application_name": "garden_tracker",
                    "timezone": "UTC",
                },
                "command_timeout": 60,
                # Supabase pooler (pgbouncer) does not support prepared statement caching
                "statement_cache_size": 0,
            },
        }

    async def initialize(self) -> None:
        """Create the engine and verify connectivity."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database connection pool...")
        self._engine = create_async_engine(**self._build_connection_params())

        health = await self.health_check()
        if health["status"] != "healthy":
            await self._engine.dispose()
            self._engine = None
            raise ConnectionError(f"Database unreachable: {health.get('error')}")

        logger.info("Database connection pool initialized successfully")

    async def health_check(self) -> Dict[str, Any]:
        """
        Run a trivial query and report a structured status.
        """
        timestamp = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": timestamp,
            }

        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(self._health_check_query)
                result.scalar()
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return {"status": "unhealthy", "error": str(e), "timestamp": timestamp}

        return {"status": "healthy", "timestamp": timestamp}

    async def close(self) -> None:
        """Dispose the engine and all pooled connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None


# Process-wide connection manager, created at import and initialized by the lifespan
db_manager = DatabaseConnectionManager()


async def initialize_database() -> None:
    """Initialize the database engine and the session factory."""
    from garden_tracker.shared.infrastructure.database.session import session_manager

    try:
        await db_manager.initialize()
        session_manager.initialize(db_manager.engine)
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise


async def close_database() -> None:
    """Close the database engine."""
    await db_manager.close()


async def database_health_check() -> Dict[str, Any]:
    return await db_manager.health_check()
