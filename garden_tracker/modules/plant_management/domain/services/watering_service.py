# 📄 File: garden_tracker/modules/plant_management/domain/services/watering_service.py
# 🧭 Purpose (Layman Explanation):
# Decides which plants are thirsty right now and what their records should look
# like after being watered, either one at a time or all the overdue ones at once.
# 🧪 Purpose (Technical Summary):
# Overdue detection and watering update planning. Produces WateringUpdate records
# (one per watered plant) without touching the store; the application layer
# applies them with per-item error isolation.
# 🔗 Dependencies:
# dataclasses, datetime, watering_schedule.compute_next_watering
# 🔄 Connected Modules / Calls From:
# plant command handlers (water one, water overdue), list plants query handler

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from garden_tracker.shared.utils.helpers import ensure_utc

from ..models.plant import Plant
from .watering_schedule import compute_next_watering


@dataclass(frozen=True)
class WateringUpdate:
    """The fields one watering writes to one plant."""

    plant_id: UUID
    last_watered_date: datetime
    next_watering_date: Optional[datetime]

    def to_fields(self) -> Dict[str, Any]:
        return {
            "last_watered_date": self.last_watered_date,
            "next_watering_date": self.next_watering_date,
        }


def is_overdue(plant: Plant, now: datetime) -> bool:
    """A plant is overdue when its next watering date is set and not after ``now``."""
    if plant.next_watering_date is None:
        return False
    return plant.next_watering_date <= ensure_utc(now)


def water_one(plant: Plant, now: datetime) -> WateringUpdate:
    """
    Plan the update for watering ``plant`` at ``now``.

    A plant without a frequency gets no next date, which takes it out of
    future overdue sets until a frequency is set.
    """
    now = ensure_utc(now)
    return WateringUpdate(
        plant_id=plant.id,
        last_watered_date=now,
        next_watering_date=compute_next_watering(now, plant.watering_frequency_days),
    )


def water_all(plants: Iterable[Plant], now: datetime) -> List[WateringUpdate]:
    """Plan one update per overdue plant; plants that are not overdue are left out."""
    return [water_one(plant, now) for plant in plants if is_overdue(plant, now)]


def count_overdue(plants: Iterable[Plant], now: datetime) -> int:
    return sum(1 for plant in plants if is_overdue(plant, now))
