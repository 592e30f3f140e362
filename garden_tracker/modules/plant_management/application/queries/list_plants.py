# 📄 File: garden_tracker/modules/plant_management/application/queries/list_plants.py
# 🧭 Purpose (Layman Explanation):
# Asks for the whole garden, with a flag on every plant that needs water.
# 🧪 Purpose (Technical Summary):
# CQRS query for the garden view. Read-only: listing never waters or rewrites
# anything, whatever the overdue state.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# ListPlantsQueryHandler, plants API (GET /plants), diagnostics endpoint

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class ListPlantsQuery(BaseModel):
    owner_id: UUID
    overdue_only: bool = False
    now: Optional[datetime] = None
