from .watering_schedule import compute_next_watering, estimate_frequency_from_hint
from .watering_service import WateringUpdate, is_overdue, water_all, water_one

__all__ = [
    "WateringUpdate",
    "compute_next_watering",
    "estimate_frequency_from_hint",
    "is_overdue",
    "water_all",
    "water_one",
]
