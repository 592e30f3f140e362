# 📄 File: garden_tracker/modules/plant_management/application/commands/update_plant.py
# 🧭 Purpose (Layman Explanation):
# The changes a user makes on the plant edit form.
# 🧪 Purpose (Technical Summary):
# CQRS command for partial plant updates. Only fields the caller actually sent
# are applied; sending null for an optional field clears it.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# UpdatePlantCommandHandler, plants API (PATCH /plants/{id})

"""
Update Plant Command

Update Semantics:
- Fields listed in ``changes`` are applied, anything else is left alone
- Clearing watering_frequency_days or last_watered_date clears the next
  watering date as well
- next_watering_date cannot be set directly
"""

from typing import Any, Dict
from uuid import UUID

from pydantic import BaseModel, Field

EDITABLE_FIELDS = frozenset({
    "name",
    "species",
    "notes",
    "sunlight_needs",
    "date_planted",
    "last_watered_date",
    "watering_frequency_days",
})


class UpdatePlantCommand(BaseModel):
    """Command for editing one of the owner's plants."""

    plant_id: UUID
    owner_id: UUID
    changes: Dict[str, Any] = Field(
        default_factory=dict,
        description="Field name to new value, only for fields the user edited"
    )

    def editable_changes(self) -> Dict[str, Any]:
        """Changes restricted to fields a user may edit."""
        return {k: v for k, v in self.changes.items() if k in EDITABLE_FIELDS}
