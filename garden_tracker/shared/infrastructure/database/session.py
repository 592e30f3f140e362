# 📄 File: garden_tracker/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Gives every request its own conversation with the database, saving the
# changes when the request succeeds and throwing them away when it fails.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session factory with a FastAPI dependency that commits on
# success and rolls back on any exception.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - garden_tracker.shared.infrastructure.database.connection (engine)
#
# 🔄 Connected Modules / Calls From:
# - plant_management.presentation.dependencies (repository wiring)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from garden_tracker.shared.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Hands out request-scoped sessions with automatic commit/rollback.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None

    def initialize(self, engine: AsyncEngine) -> None:
        """Bind the session factory to the engine."""
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=True,
        )
        logger.info("Database session factory initialized")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield a session; commit if the block finishes, roll back otherwise.

        Raises:
            DatabaseError: If the factory is not initialized or the commit fails
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized", operation="get_session")

        session: AsyncSession = self._session_factory()
        try:
            yield session
            await session.commit()
            logger.debug("Database transaction committed")
        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}", operation="commit")
        except Exception:
            await session.rollback()
            logger.debug("Transaction rolled back after request error")
            raise
        finally:
            await session.close()

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None


session_manager = DatabaseSessionManager()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a transactional session per request.

    Usage:
        @router.post("/plants")
        async def create_plant(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with session_manager.get_session() as session:
        yield session
