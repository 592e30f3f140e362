# 📄 File: garden_tracker/modules/plant_management/application/commands/create_plant.py
# 🧭 Purpose (Layman Explanation):
# Everything needed to add a new plant to the garden from the "add plant" form.
# 🧪 Purpose (Technical Summary):
# CQRS command for plant creation. Carries user input only; the next watering
# date is never part of the command and is derived by the handler.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# CreatePlantCommandHandler, plants API (POST /plants), catalog import handler

"""
Create Plant Command

Command Fields:
- owner_id: the authenticated user (injected, never taken from the request body)
- name: required plant name
- species, notes, sunlight_needs: optional text
- date_planted, last_watered_date: optional timestamps
- watering_frequency_days: optional, 1 to 365 when set by a user
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class CreatePlantCommand(BaseModel):
    """Command for adding a plant to the owner's garden."""

    owner_id: UUID = Field(..., description="Authenticated user creating the plant")
    name: str = Field(..., description="Plant name", examples=["Kitchen basil"])
    species: Optional[str] = Field(default=None, examples=["Ocimum basilicum"])
    notes: Optional[str] = None
    sunlight_needs: Optional[str] = Field(default=None, examples=["Full sun"])
    date_planted: Optional[datetime] = None
    last_watered_date: Optional[datetime] = None
    watering_frequency_days: Optional[int] = Field(
        default=None,
        description="Days between waterings",
        examples=[3]
    )
