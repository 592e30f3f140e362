# 📄 File: garden_tracker/modules/plant_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The workers behind the garden's buttons: they add, edit, water and delete plants,
# always keeping the "next watering" date in step with the rest of the record.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers orchestrating validation, the watering schedule domain
# services and the PlantRepository. Every handler that touches last_watered_date or
# watering_frequency_days recomputes next_watering_date in the same write.
#
# 🔗 Dependencies:
# - plant_management.application.commands (command definitions)
# - plant_management.domain.services (schedule calculator, watering planner)
# - plant_management.domain.repositories (repository interface)
# - garden_tracker.shared.utils.logging (audit logging)
#
# 🔄 Connected Modules / Calls From:
# - plant_management.presentation.dependencies (handler wiring)
# - plant_catalog.application.handlers (import creates plants through the repository)

__all__ = [
    "CreatePlantCommandHandler",
    "UpdatePlantCommandHandler",
    "DeletePlantCommandHandler",
    "WaterPlantCommandHandler",
    "WaterOverduePlantsCommandHandler",
    "WateringBatchResult",
]

from dataclasses import dataclass, field
from typing import Any, Dict, List
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from garden_tracker.shared.core.exceptions import (
    GardenTrackerException,
    PlantNotFoundError,
    ValidationError,
)
from garden_tracker.shared.utils.helpers import utc_now
from garden_tracker.shared.utils.logging import get_logger

from ...domain.models.plant import Plant
from ...domain.repositories.plant_repository import PlantRepository
from ...domain.services.watering_schedule import compute_next_watering
from ...domain.services.watering_service import water_all, water_one
from ..commands.create_plant import CreatePlantCommand
from ..commands.delete_plant import DeletePlantCommand
from ..commands.update_plant import UpdatePlantCommand
from ..commands.water_plants import WaterOverduePlantsCommand, WaterPlantCommand

logger = get_logger(__name__)

# Upper bound for a user-entered watering frequency (days)
MAX_USER_FREQUENCY_DAYS = 365


def _validate_frequency(value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            "Watering frequency must be a whole number of days",
            field="watering_frequency_days",
            value=value,
        )
    if not 1 <= value <= MAX_USER_FREQUENCY_DAYS:
        raise ValidationError(
            f"Watering frequency must be between 1 and {MAX_USER_FREQUENCY_DAYS} days",
            field="watering_frequency_days",
            value=value,
            constraint=f"1..{MAX_USER_FREQUENCY_DAYS}",
        )


def _build_plant(data: Dict[str, Any]) -> Plant:
    """Validate plant data, translating pydantic errors into the app's ValidationError."""
    name = data.get("name")
    if name is None or not str(name).strip():
        raise ValidationError("Plant name is required", field="name", constraint="required")

    try:
        return Plant(**data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ValidationError(
            f"Invalid plant data: {first.get('msg')}",
            field=field_name,
            details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
        ) from e


@dataclass
class WateringBatchResult:
    """Outcome of watering every overdue plant; partial success is a normal result."""

    watered: List[Plant] = field(default_factory=list)
    failed: List[Dict[str, str]] = field(default_factory=list)

    @property
    def watered_ids(self) -> List[UUID]:
        return [plant.id for plant in self.watered]

    @property
    def failed_ids(self) -> List[str]:
        return [item["plant_id"] for item in self.failed]

    @property
    def attempted_count(self) -> int:
        return len(self.watered) + len(self.failed)


class CreatePlantCommandHandler:
    """
    Handles plant creation from the manual "add plant" form.
    """

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, command: CreatePlantCommand) -> Plant:
        _validate_frequency(command.watering_frequency_days)

        plant = _build_plant(command.model_dump())
        plant.next_watering_date = compute_next_watering(
            plant.last_watered_date, plant.watering_frequency_days
        )

        created = await self._plant_repository.create(plant)
        logger.log_user_action(
            action="create_plant",
            user_id=str(command.owner_id),
            resource=f"plant:{created.id}",
        )
        return created


class UpdatePlantCommandHandler:
    """
    Handles the plant edit form.

    Changes are merged over the stored plant and the next watering date is
    always recomputed from the merged last-watered date and frequency, so a
    cleared frequency clears the next date too.
    """

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, command: UpdatePlantCommand) -> Plant:
        existing = await self._plant_repository.get_by_id(command.plant_id, command.owner_id)
        if existing is None:
            raise PlantNotFoundError(str(command.plant_id))

        changes = command.editable_changes()
        if not changes:
            return existing

        if "watering_frequency_days" in changes:
            _validate_frequency(changes["watering_frequency_days"])

        merged = _build_plant({**existing.model_dump(), **changes})
        fields = {key: getattr(merged, key) for key in changes}
        fields["next_watering_date"] = compute_next_watering(
            merged.last_watered_date, merged.watering_frequency_days
        )

        updated = await self._plant_repository.update(command.plant_id, command.owner_id, fields)
        if updated is None:
            raise PlantNotFoundError(str(command.plant_id))

        logger.log_user_action(
            action="update_plant",
            user_id=str(command.owner_id),
            resource=f"plant:{command.plant_id}",
            extra={"fields": sorted(fields)},
        )
        return updated


class DeletePlantCommandHandler:
    """Deletes a plant once the user has confirmed."""

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, command: DeletePlantCommand) -> None:
        if not command.confirm:
            raise ValidationError(
                "Deleting a plant must be confirmed",
                field="confirm",
                constraint="must be true",
            )

        deleted = await self._plant_repository.delete(command.plant_id, command.owner_id)
        if not deleted:
            raise PlantNotFoundError(str(command.plant_id))

        logger.log_user_action(
            action="delete_plant",
            user_id=str(command.owner_id),
            resource=f"plant:{command.plant_id}",
        )


class WaterPlantCommandHandler:
    """Waters a single plant now."""

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, command: WaterPlantCommand) -> Plant:
        plant = await self._plant_repository.get_by_id(command.plant_id, command.owner_id)
        if plant is None:
            raise PlantNotFoundError(str(command.plant_id))

        update = water_one(plant, command.now or utc_now())
        watered = await self._plant_repository.update(
            command.plant_id, command.owner_id, update.to_fields()
        )
        if watered is None:
            raise PlantNotFoundError(str(command.plant_id))

        logger.log_business_event(
            event_type="plant_watered",
            description=f"Plant {plant.id} watered",
            entity_id=str(plant.id),
            entity_type="plant",
            extra={
                "next_watering_date": (
                    update.next_watering_date.isoformat() if update.next_watering_date else None
                )
            },
        )
        return watered


class WaterOverduePlantsCommandHandler:
    """
    Waters every overdue plant of the owner.

    Updates are applied one at a time. A failure on one plant is recorded in
    the result and does not stop, or roll back, the others.
    """

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, command: WaterOverduePlantsCommand) -> WateringBatchResult:
        now = command.now or utc_now()
        plants = await self._plant_repository.list_by_owner(command.owner_id)
        updates = water_all(plants, now)

        result = WateringBatchResult()
        for update in updates:
            try:
                watered = await self._plant_repository.update(
                    update.plant_id, command.owner_id, update.to_fields()
                )
                if watered is None:
                    raise PlantNotFoundError(str(update.plant_id))
            except GardenTrackerException as e:
                logger.warning(
                    f"Watering plant {update.plant_id} failed: {e.message}",
                    plant_id=str(update.plant_id),
                    error_code=e.error_code,
                )
                result.failed.append({"plant_id": str(update.plant_id), "error": e.message})
                continue
            result.watered.append(watered)

        logger.log_business_event(
            event_type="overdue_plants_watered",
            description=(
                f"Watered {len(result.watered)} of {len(updates)} overdue plants"
            ),
            entity_id=str(command.owner_id),
            entity_type="garden",
            extra={
                "watered_count": len(result.watered),
                "failed_count": len(result.failed),
                "failed_ids": result.failed_ids,
            },
        )
        return result
