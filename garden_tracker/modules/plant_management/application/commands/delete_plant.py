# 📄 File: garden_tracker/modules/plant_management/application/commands/delete_plant.py
# 🧭 Purpose (Layman Explanation):
# A request to remove a plant for good, which only goes through when the user
# has confirmed it.
# 🧪 Purpose (Technical Summary):
# CQRS command for hard deletion with an explicit confirmation flag.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# DeletePlantCommandHandler, plants API (DELETE /plants/{id})

from uuid import UUID

from pydantic import BaseModel


class DeletePlantCommand(BaseModel):
    """Command for deleting a plant. There is no soft delete."""

    plant_id: UUID
    owner_id: UUID
    confirm: bool = False
