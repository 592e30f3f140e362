from datetime import timedelta

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from garden_tracker.modules.plant_management.application.commands.water_plants import (
    WaterOverduePlantsCommand,
)
from garden_tracker.modules.plant_management.application.handlers.command_handlers import (
    WaterOverduePlantsCommandHandler,
)
from garden_tracker.modules.plant_management.domain.models.plant import Plant
from garden_tracker.modules.plant_management.infrastructure.database.plant_repository_impl import (
    PlantRepositoryImpl,
)
from garden_tracker.shared.config.database import DatabaseBase
from garden_tracker.shared.core.exceptions import RepositoryError

from .conftest import NOW, OTHER_OWNER_ID, OWNER_ID


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'garden.db'}")

    # SQLite only honours SAVEPOINT when SQLAlchemy emits BEGIN itself
    @event.listens_for(engine.sync_engine, "connect")
    def disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


async def seed(session_factory, owner_id=OWNER_ID, **fields) -> Plant:
    async with session_factory() as session:
        plant = await PlantRepositoryImpl(session).create(Plant(owner_id=owner_id, **fields))
        await session.commit()
    return plant


class ConstraintBreakingRepository(PlantRepositoryImpl):
    """Sends an invalid frequency along with the update of one chosen plant."""

    def __init__(self, session, broken_id):
        super().__init__(session)
        self.broken_id = broken_id

    async def update(self, plant_id, owner_id, fields):
        if plant_id == self.broken_id:
            fields = {**fields, "watering_frequency_days": 0}
        return await super().update(plant_id, owner_id, fields)


async def test_create_round_trips_through_the_table(session_factory):
    created = await seed(
        session_factory,
        name="Kitchen basil",
        species="Ocimum basilicum",
        last_watered_date=NOW,
        watering_frequency_days=3,
        next_watering_date=NOW + timedelta(days=3),
    )

    assert created.id is not None
    assert created.created_at is not None

    async with session_factory() as session:
        stored = await PlantRepositoryImpl(session).get_by_id(created.id, OWNER_ID)

    assert stored.name == "Kitchen basil"
    assert stored.owner_id == OWNER_ID
    assert stored.last_watered_date == NOW
    assert stored.next_watering_date == NOW + timedelta(days=3)


async def test_queries_are_scoped_to_the_owner(session_factory):
    fern = await seed(session_factory, name="Fern")
    await seed(session_factory, name="Aloe")
    secret = await seed(session_factory, owner_id=OTHER_OWNER_ID, name="Secret")

    async with session_factory() as session:
        repository = PlantRepositoryImpl(session)

        assert [plant.name for plant in await repository.list_by_owner(OWNER_ID)] == ["Aloe", "Fern"]
        assert await repository.get_by_id(secret.id, OWNER_ID) is None
        assert await repository.update(secret.id, OWNER_ID, {"name": "Mine now"}) is None
        assert await repository.delete(secret.id, OWNER_ID) is False
        assert (await repository.get_by_id(fern.id, OWNER_ID)).name == "Fern"
        await session.commit()

    async with session_factory() as session:
        untouched = await PlantRepositoryImpl(session).get_by_id(secret.id, OTHER_OWNER_ID)
    assert untouched.name == "Secret"


async def test_update_returns_the_stored_row(session_factory):
    plant = await seed(session_factory, name="Fern", watering_frequency_days=3)

    async with session_factory() as session:
        updated = await PlantRepositoryImpl(session).update(
            plant.id,
            OWNER_ID,
            {"last_watered_date": NOW, "next_watering_date": NOW + timedelta(days=3)},
        )
        await session.commit()

    assert updated.id == plant.id
    assert updated.watering_frequency_days == 3
    assert updated.next_watering_date == NOW + timedelta(days=3)
    assert updated.updated_at is not None

    async with session_factory() as session:
        stored = await PlantRepositoryImpl(session).get_by_id(plant.id, OWNER_ID)
    assert stored.last_watered_date == NOW


async def test_update_rejects_unknown_fields(session_factory):
    plant = await seed(session_factory, name="Fern")

    async with session_factory() as session:
        with pytest.raises(RepositoryError):
            await PlantRepositoryImpl(session).update(plant.id, OWNER_ID, {"colour": "green"})


async def test_constraint_violation_rolls_back_only_that_update(session_factory):
    plant = await seed(session_factory, name="Fern", watering_frequency_days=3)

    async with session_factory() as session:
        repository = PlantRepositoryImpl(session)
        with pytest.raises(RepositoryError):
            await repository.update(plant.id, OWNER_ID, {"watering_frequency_days": 0})

        renamed = await repository.update(plant.id, OWNER_ID, {"name": "Boston fern"})
        await session.commit()

    assert renamed.name == "Boston fern"
    assert renamed.watering_frequency_days == 3


async def test_delete_reports_whether_a_row_was_removed(session_factory):
    plant = await seed(session_factory, name="Fern")

    async with session_factory() as session:
        repository = PlantRepositoryImpl(session)
        assert await repository.delete(plant.id, OWNER_ID) is True
        assert await repository.delete(plant.id, OWNER_ID) is False
        await session.commit()

    async with session_factory() as session:
        assert await PlantRepositoryImpl(session).list_by_owner(OWNER_ID) == []


async def test_water_overdue_keeps_sibling_updates_when_one_fails(session_factory):
    overdue = NOW - timedelta(days=1)
    basil = await seed(session_factory, name="Basil", watering_frequency_days=3, next_watering_date=overdue)
    mint = await seed(session_factory, name="Mint", watering_frequency_days=4, next_watering_date=overdue)

    async with session_factory() as session:
        handler = WaterOverduePlantsCommandHandler(ConstraintBreakingRepository(session, basil.id))
        result = await handler.handle(WaterOverduePlantsCommand(owner_id=OWNER_ID, now=NOW))
        await session.commit()

    assert result.failed_ids == [str(basil.id)]
    assert result.watered_ids == [mint.id]

    async with session_factory() as session:
        repository = PlantRepositoryImpl(session)
        stored_basil = await repository.get_by_id(basil.id, OWNER_ID)
        stored_mint = await repository.get_by_id(mint.id, OWNER_ID)

    assert stored_basil.last_watered_date is None
    assert stored_basil.watering_frequency_days == 3
    assert stored_basil.next_watering_date == overdue
    assert stored_mint.last_watered_date == NOW
    assert stored_mint.next_watering_date == NOW + timedelta(days=4)


async def test_column_names_come_from_the_live_table(session_factory):
    async with session_factory() as session:
        columns = await PlantRepositoryImpl(session).get_column_names()

    assert columns[0] == "id"
    assert {"owner_id", "last_watered_date", "watering_frequency_days", "next_watering_date"} <= set(columns)
