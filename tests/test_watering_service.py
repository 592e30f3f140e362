from datetime import datetime, timedelta, timezone
from uuid import uuid4

from garden_tracker.modules.plant_management.domain.models.plant import Plant
from garden_tracker.modules.plant_management.domain.services.watering_service import (
    count_overdue,
    is_overdue,
    water_all,
    water_one,
)

from .conftest import NOW, OWNER_ID


def make_plant(**fields) -> Plant:
    return Plant(id=uuid4(), owner_id=OWNER_ID, **{"name": "Fern", **fields})


def test_overdue_when_next_date_is_past_or_now():
    assert is_overdue(make_plant(next_watering_date=NOW - timedelta(hours=1)), NOW)
    assert is_overdue(make_plant(next_watering_date=NOW), NOW)


def test_not_overdue_when_next_date_is_future_or_missing():
    assert not is_overdue(make_plant(next_watering_date=NOW + timedelta(minutes=1)), NOW)
    assert not is_overdue(make_plant(), NOW)


def test_naive_now_is_treated_as_utc():
    plant = make_plant(next_watering_date=NOW)
    assert is_overdue(plant, NOW.replace(tzinfo=None))


def test_water_one_sets_last_watered_and_next_date():
    plant = make_plant(last_watered_date=NOW - timedelta(days=10), watering_frequency_days=4)
    update = water_one(plant, NOW)
    assert update.plant_id == plant.id
    assert update.last_watered_date == NOW
    assert update.next_watering_date == NOW + timedelta(days=4)


def test_water_one_without_frequency_clears_next_date():
    update = water_one(make_plant(next_watering_date=NOW - timedelta(days=1)), NOW)
    assert update.last_watered_date == NOW
    assert update.next_watering_date is None
    assert update.to_fields() == {"last_watered_date": NOW, "next_watering_date": None}


def test_water_all_only_plans_overdue_plants():
    overdue = [
        make_plant(name="Mint", watering_frequency_days=2, next_watering_date=NOW - timedelta(days=1)),
        make_plant(name="Basil", watering_frequency_days=3, next_watering_date=NOW),
    ]
    others = [
        make_plant(name="Cactus", watering_frequency_days=20, next_watering_date=NOW + timedelta(days=5)),
        make_plant(name="Orchid"),
        make_plant(name="Ivy", watering_frequency_days=7),
    ]
    plants = others[:1] + overdue + others[1:]

    updates = water_all(plants, NOW)

    assert [u.plant_id for u in updates] == [p.id for p in overdue]
    assert [u.next_watering_date for u in updates] == [NOW + timedelta(days=2), NOW + timedelta(days=3)]
    assert count_overdue(plants, NOW) == 2


def test_watered_plant_is_no_longer_overdue():
    plant = make_plant(watering_frequency_days=1, next_watering_date=NOW - timedelta(days=2))
    update = water_one(plant, NOW)
    watered = plant.model_copy(update=update.to_fields())
    assert not is_overdue(watered, NOW)
    assert is_overdue(watered, NOW + timedelta(days=1))
