# 📄 File: garden_tracker/modules/plant_management/application/commands/water_plants.py
# 🧭 Purpose (Layman Explanation):
# The two watering buttons: "water this plant now" and "water every overdue plant".
# 🧪 Purpose (Technical Summary):
# CQRS commands for single and bulk watering. ``now`` is optional so callers
# (and tests) can pin the clock; handlers default it to the current UTC time.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# WaterPlantCommandHandler, WaterOverduePlantsCommandHandler, plants API

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class WaterPlantCommand(BaseModel):
    """Water one plant now."""

    plant_id: UUID
    owner_id: UUID
    now: Optional[datetime] = None


class WaterOverduePlantsCommand(BaseModel):
    """Water every plant of the owner that is overdue at ``now``."""

    owner_id: UUID
    now: Optional[datetime] = None
