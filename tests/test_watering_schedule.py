from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from garden_tracker.modules.plant_catalog.domain.models.species import WateringBenchmark
from garden_tracker.modules.plant_management.domain.models.plant import Plant
from garden_tracker.modules.plant_management.domain.services.watering_schedule import (
    compute_next_watering,
    estimate_frequency_from_hint,
)
from garden_tracker.modules.plant_management.domain.services.watering_service import is_overdue

LAST = datetime(2024, 3, 30, 18, 45, tzinfo=timezone.utc)


def test_next_watering_is_calendar_day_addition():
    assert compute_next_watering(LAST, 3) == datetime(2024, 4, 2, 18, 45, tzinfo=timezone.utc)


def test_next_watering_crosses_month_and_year():
    last = datetime(2023, 12, 30, 8, 0, tzinfo=timezone.utc)
    assert compute_next_watering(last, 5) == datetime(2024, 1, 4, 8, 0, tzinfo=timezone.utc)


def test_next_watering_keeps_timezone():
    tz = timezone(timedelta(hours=-5))
    last = datetime(2024, 5, 1, 7, 30, tzinfo=tz)
    result = compute_next_watering(last, 1)
    assert result == datetime(2024, 5, 2, 7, 30, tzinfo=tz)
    assert result.utcoffset() == timedelta(hours=-5)


@pytest.mark.parametrize("frequency", [None, 0, -3, True, 2.5, "3"])
def test_next_watering_none_for_unusable_frequency(frequency):
    assert compute_next_watering(LAST, frequency) is None


def test_next_watering_none_without_last_watered():
    assert compute_next_watering(None, 7) is None


@pytest.mark.parametrize(
    "benchmark, label, expected",
    [
        ({"value": "7", "unit": "days"}, None, 7),
        ({"value": "10", "unit": "days"}, None, 10),
        ({"value": "5-7", "unit": "weeks"}, None, 35),
        ({"value": "5-7", "unit": "days"}, None, 5),
        ({"value": "1-2", "unit": "week"}, None, 7),
        ({"value": "2", "unit": "weeks"}, None, 14),
        ({"value": "1", "unit": "month"}, None, 30),
        ({"value": "10", "unit": None}, None, 10),
        ({"value": "often", "unit": "days"}, "Average", 7),
        ({"value": None, "unit": None}, "Frequent", 3),
        (None, "frequent", 3),
        (None, " MINIMUM ", 14),
        (None, "None", None),
        (None, "sometimes", None),
        (None, None, None),
    ],
)
def test_estimate_frequency_from_hint(benchmark, label, expected):
    assert estimate_frequency_from_hint(benchmark, label) == expected


def test_estimate_prefers_benchmark_over_label():
    assert estimate_frequency_from_hint({"value": "10", "unit": "days"}, "Frequent") == 10


def test_estimate_zero_benchmark_gives_none_without_label_fallback():
    assert estimate_frequency_from_hint({"value": "0", "unit": "days"}, "Average") is None


def test_estimate_accepts_benchmark_objects():
    benchmark = WateringBenchmark(value="3", unit="weeks")
    assert estimate_frequency_from_hint(benchmark) == 21


def test_week_schedule_is_due_at_exactly_the_next_watering_instant():
    last = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
    next_watering = compute_next_watering(last, 7)
    assert next_watering == datetime(2024, 1, 8, 0, 0, tzinfo=timezone.utc)

    plant = Plant(owner_id=uuid4(), name="Fern", last_watered_date=last,
                  watering_frequency_days=7, next_watering_date=next_watering)
    assert is_overdue(plant, next_watering)
    assert not is_overdue(plant, next_watering - timedelta(microseconds=1))
