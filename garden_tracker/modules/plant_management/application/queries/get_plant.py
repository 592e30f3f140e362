# 📄 File: garden_tracker/modules/plant_management/application/queries/get_plant.py
# 🧭 Purpose (Layman Explanation):
# Asks for one plant's details.
# 🧪 Purpose (Technical Summary):
# CQRS query for a single owner-scoped plant.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# GetPlantQueryHandler, plants API (GET /plants/{id})

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class GetPlantQuery(BaseModel):
    plant_id: UUID
    owner_id: UUID
    now: Optional[datetime] = None
