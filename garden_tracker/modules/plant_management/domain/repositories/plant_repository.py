# 📄 File: garden_tracker/modules/plant_management/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the promise for how plants are saved, found, changed and removed,
# without saying which database does the work.
# 🧪 Purpose (Technical Summary):
# Repository interface for Plant entities. Every operation is scoped to an
# owner, so one user can never read or change another user's plants.
# 🔗 Dependencies:
# Plant domain model, typing, abc, uuid
# 🔄 Connected Modules / Calls From:
# Command/query handlers, SQLAlchemy implementation, in-memory test double

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..models.plant import Plant


class PlantRepository(ABC):
    """
    Repository interface for Plant data access.

    Implementation Notes:
    - Concrete implementations live in the infrastructure layer
    - Methods return domain entities (Plant), not database models
    - The store assigns ids and maintains created_at / updated_at
    - A plant owned by someone else behaves exactly like a missing plant
    """

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        """
        Insert a new plant.

        Args:
            plant: Plant entity without an id

        Returns:
            The stored Plant with id and timestamps populated

        Raises:
            RepositoryError: If the database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: UUID, owner_id: UUID) -> Optional[Plant]:
        """
        Get one of the owner's plants.

        Returns:
            Plant if it exists and belongs to owner_id, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: UUID) -> List[Plant]:
        """
        List every plant of the owner, ordered by name.
        """
        pass

    @abstractmethod
    async def update(self, plant_id: UUID, owner_id: UUID, fields: Dict[str, Any]) -> Optional[Plant]:
        """
        Write the given fields to one plant.

        The write is atomic for the record: on failure nothing is changed.

        Args:
            plant_id: Plant to change
            owner_id: Owner the plant must belong to
            fields: Column name to new value

        Returns:
            The updated Plant, or None if no such plant exists for the owner

        Raises:
            RepositoryError: If the database operation fails
        """
        pass

    @abstractmethod
    async def delete(self, plant_id: UUID, owner_id: UUID) -> bool:
        """
        Delete one plant.

        Returns:
            True if a plant was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def get_column_names(self) -> List[str]:
        """Column names of the plant store, for read-only diagnostics."""
        pass
