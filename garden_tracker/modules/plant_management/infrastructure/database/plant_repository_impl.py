# 📄 File: garden_tracker/modules/plant_management/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Does the real saving, finding, changing and deleting of plants in the database,
# always only within the current user's own plants.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async implementation of PlantRepository. Updates run inside a
# SAVEPOINT so a failed write to one plant leaves the request transaction usable
# for the next one (bulk watering relies on this). SQLAlchemy errors are wrapped
# in RepositoryError.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - plant_management.domain (Plant, PlantRepository)
# - plant_management.infrastructure.database.models (PlantModel)
#
# 🔄 Connected Modules / Calls From:
# - plant_management.presentation.dependencies (request-scoped construction)

"""
Plant Repository Implementation

Features:
- Owner-scoped CRUD on the ``plants`` table
- Domain model to SQLAlchemy model mapping
- Per-update savepoints for independent failure of bulk writes
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, func, inspect, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garden_tracker.shared.core.exceptions import RepositoryError

from ...domain.models.plant import Plant
from ...domain.repositories.plant_repository import PlantRepository
from .models import PlantModel

logger = logging.getLogger(__name__)


class PlantRepositoryImpl(PlantRepository):
    """
    SQLAlchemy implementation of the PlantRepository interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the plant repository.

        Args:
            session: Request-scoped SQLAlchemy async session
        """
        self._session = session

    async def create(self, plant: Plant) -> Plant:
        """
        Insert a new plant row; the id and timestamps come from the store.
        """
        try:
            plant_model = self._domain_to_model(plant)
            self._session.add(plant_model)
            await self._session.flush()
            await self._session.refresh(plant_model)

            logger.info(f"Created plant with ID: {plant_model.id}")
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during plant creation: {e}")
            raise RepositoryError(
                f"Failed to create plant: {e}", operation="create", entity="plant"
            ) from e

    async def get_by_id(self, plant_id: UUID, owner_id: UUID) -> Optional[Plant]:
        try:
            stmt = select(PlantModel).where(
                PlantModel.id == plant_id,
                PlantModel.owner_id == owner_id,
            )
            result = await self._session.execute(stmt)
            plant_model = result.scalar_one_or_none()

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving plant {plant_id}: {e}")
            raise RepositoryError(
                f"Failed to retrieve plant: {e}", operation="get_by_id", entity="plant"
            ) from e

        if plant_model is None:
            logger.debug(f"Plant not found: {plant_id}")
            return None
        return self._model_to_domain(plant_model)

    async def list_by_owner(self, owner_id: UUID) -> List[Plant]:
        try:
            stmt = (
                select(PlantModel)
                .where(PlantModel.owner_id == owner_id)
                .order_by(PlantModel.name, PlantModel.created_at)
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing plants for {owner_id}: {e}")
            raise RepositoryError(
                f"Failed to list plants: {e}", operation="list_by_owner", entity="plant"
            ) from e

    async def update(self, plant_id: UUID, owner_id: UUID, fields: Dict[str, Any]) -> Optional[Plant]:
        """
        Apply ``fields`` to one plant inside a savepoint.

        On failure only this savepoint is rolled back; earlier writes in the
        same request are kept.
        """
        unknown = set(fields) - set(PlantModel.__table__.columns.keys())
        if unknown:
            raise RepositoryError(
                f"Unknown plant fields: {sorted(unknown)}", operation="update", entity="plant"
            )

        try:
            async with self._session.begin_nested():
                stmt = (
                    update(PlantModel)
                    .where(PlantModel.id == plant_id, PlantModel.owner_id == owner_id)
                    .values(**fields, updated_at=func.now())
                    .returning(PlantModel)
                    .execution_options(populate_existing=True)
                )
                result = await self._session.execute(stmt)
                plant_model = result.scalar_one_or_none()

        except SQLAlchemyError as e:
            logger.error(f"Database error updating plant {plant_id}: {e}")
            raise RepositoryError(
                f"Failed to update plant: {e}", operation="update", entity="plant"
            ) from e

        if plant_model is None:
            return None

        logger.debug(f"Updated plant {plant_id}: {sorted(fields)}")
        return self._model_to_domain(plant_model)

    async def delete(self, plant_id: UUID, owner_id: UUID) -> bool:
        try:
            stmt = delete(PlantModel).where(
                PlantModel.id == plant_id,
                PlantModel.owner_id == owner_id,
            )
            result = await self._session.execute(stmt)

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting plant {plant_id}: {e}")
            raise RepositoryError(
                f"Failed to delete plant: {e}", operation="delete", entity="plant"
            ) from e

        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted plant {plant_id}")
        return deleted

    async def get_column_names(self) -> List[str]:
        """Read the live column list of the plants table through the dialect inspector."""

        def read_columns(sync_session) -> List[str]:
            inspector = inspect(sync_session.connection())
            return [column["name"] for column in inspector.get_columns(PlantModel.__tablename__)]

        try:
            return await self._session.run_sync(read_columns)

        except SQLAlchemyError as e:
            logger.error(f"Database error reading plant columns: {e}")
            raise RepositoryError(
                f"Failed to read plant columns: {e}", operation="get_column_names", entity="plant"
            ) from e

    # =========================================================================
    # MAPPING
    # =========================================================================

    @staticmethod
    def _model_to_domain(plant_model: PlantModel) -> Plant:
        return Plant.model_validate(plant_model)

    @staticmethod
    def _domain_to_model(plant: Plant) -> PlantModel:
        return PlantModel(**plant.to_record())
