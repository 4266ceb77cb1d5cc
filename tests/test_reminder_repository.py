# 📄 File: tests/test_reminder_repository.py
# 🧭 Purpose (Layman Explanation):
# Checks that reminders and their phone alerts are really saved to, and read back from, a database.
# 🧪 Purpose (Technical Summary):
# Async integration tests for ReminderRepositoryImpl and ScheduledAlertRegistrar on an in-memory
# aiosqlite database, plus a ReminderService run where both share one session.
# 🔗 Dependencies:
# pytest, pytest-asyncio, SQLAlchemy async, aiosqlite
# 🔄 Connected Modules / Calls From:
# pytest

from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.modules.care_management.domain.models.alert_trigger import AlertTrigger
from app.modules.care_management.domain.models.reminder import (
    Frequency,
    Reminder,
    ReminderType,
    Weekday,
)
from app.modules.care_management.domain.services.reminder_scheduler import build_alert_content
from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.care_management.infrastructure.database.models import ScheduledAlertModel
from app.modules.care_management.infrastructure.database.reminder_repository_impl import (
    ReminderRepositoryImpl,
)
from app.modules.care_management.infrastructure.external import scheduled_alert_registrar
from app.modules.care_management.infrastructure.external.scheduled_alert_registrar import (
    ScheduledAlertRegistrar,
)
from app.shared.config.database import create_all_tables
from app.shared.core.exceptions import NotificationRegistrationError, ReminderNotFoundError
from app.shared.infrastructure.database.connection import configure_sqlite_engine

NOW = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    configure_sqlite_engine(engine)
    await create_all_tables(engine)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def repository(session):
    return ReminderRepositoryImpl(session)


@pytest.fixture
def registrar(session):
    return ScheduledAlertRegistrar(session)


def make_reminder(**overrides) -> Reminder:
    fields = dict(
        plant_id="plant-1",
        plant_name="Calathea",
        type=ReminderType.WATERING,
        frequency=Frequency.WEEKLY,
        start_date=date(2024, 6, 1),
        preferred_day_of_week=Weekday.SATURDAY,
        preferred_time="evening",
        next_due=date(2024, 6, 1),
    )
    fields.update(overrides)
    return Reminder(**fields)


# =============================================================================
# REMINDER REPOSITORY
# =============================================================================

async def test_create_and_get_round_trip(repository):
    reminder = make_reminder()
    await repository.create(reminder)

    loaded = await repository.get_by_id(reminder.id)

    assert loaded.id == reminder.id
    assert loaded.type == ReminderType.WATERING
    assert loaded.frequency == Frequency.WEEKLY
    assert loaded.preferred_day_of_week == Weekday.SATURDAY
    assert loaded.preferred_time == "evening"
    assert loaded.next_due == date(2024, 6, 1)
    assert loaded.created_at.tzinfo is not None


async def test_get_missing_returns_none(repository):
    assert await repository.get_by_id("nope") is None


async def test_update_persists_schedule_fields(repository):
    reminder = await repository.create(make_reminder())
    reminder.record_completion(date(2024, 6, 1), date(2024, 6, 8))
    reminder.attach_alert("handle-1")

    await repository.update(reminder)
    loaded = await repository.get_by_id(reminder.id)

    assert loaded.last_completed == date(2024, 6, 1)
    assert loaded.next_due == date(2024, 6, 8)
    assert loaded.notification_handle == "handle-1"


async def test_update_missing_raises(repository):
    with pytest.raises(ReminderNotFoundError):
        await repository.update(make_reminder())


async def test_list_filters_and_orders_by_next_due(repository):
    late = await repository.create(make_reminder(next_due=date(2024, 6, 20)))
    early = await repository.create(make_reminder(next_due=date(2024, 5, 20)))
    other_plant = await repository.create(make_reminder(plant_id="plant-2", next_due=date(2024, 6, 1)))
    disabled = await repository.create(make_reminder(next_due=date(2024, 6, 2), enabled=False))

    all_ids = [r.id for r in await repository.list_reminders()]
    assert all_ids == [early.id, other_plant.id, disabled.id, late.id]

    window = await repository.list_reminders(due_from=date(2024, 6, 1), due_until=date(2024, 6, 2))
    assert {r.id for r in window} == {other_plant.id, disabled.id}

    assert [r.id for r in await repository.list_reminders(plant_id="plant-2")] == [other_plant.id]
    assert [r.id for r in await repository.list_reminders(enabled=False)] == [disabled.id]


async def test_delete(repository):
    reminder = await repository.create(make_reminder())

    assert await repository.delete(reminder.id) is True
    assert await repository.delete(reminder.id) is False
    assert await repository.get_by_id(reminder.id) is None


# =============================================================================
# SCHEDULED ALERT REGISTRAR
# =============================================================================

async def test_register_and_cancel_alert(repository, registrar):
    reminder = await repository.create(make_reminder())
    trigger = AlertTrigger.weekly(Weekday.SATURDAY, datetime(2024, 6, 1, 19, 0).time())

    handle = await registrar.register(trigger, build_alert_content(reminder))

    assert await registrar.is_active(handle, NOW) is True
    active = await registrar.list_active(NOW)
    assert [alert.handle for alert in active] == [handle]
    assert active[0].body == "Time to water Calathea!"

    assert await registrar.cancel(handle) is True
    assert await registrar.cancel(handle) is False
    assert await registrar.is_active(handle, NOW) is False
    assert await registrar.list_active(NOW) == []


async def test_one_shot_alert_expires_after_fire_time(repository, registrar):
    reminder = await repository.create(make_reminder(frequency=Frequency.MONTHLY))
    trigger = AlertTrigger.one_shot(NOW + timedelta(hours=2))

    handle = await registrar.register(trigger, build_alert_content(reminder))

    assert await registrar.is_active(handle, NOW) is True
    assert await registrar.is_active(handle, NOW + timedelta(hours=3)) is False
    assert await registrar.list_active(NOW + timedelta(hours=3)) == []


async def test_register_requires_reminder_id(registrar):
    content = build_alert_content(make_reminder()).model_copy(update={"payload": {}})

    with pytest.raises(NotificationRegistrationError):
        await registrar.register(AlertTrigger.one_shot(NOW), content)


async def test_service_keeps_alert_rows_in_step(session, repository, registrar):
    service = ReminderService(repository, registrar, clock=lambda: NOW)

    created = await service.create_reminder(
        plant_id="plant-1",
        type=ReminderType.FERTILIZING,
        frequency=Frequency.BIWEEKLY,
        start_date=date(2024, 6, 1),
    )
    completed = await service.mark_completed(created.reminder.id, date(2024, 6, 1))

    rows = (await session.execute(select(ScheduledAlertModel))).scalars().all()
    by_handle = {row.handle: row for row in rows}
    assert by_handle[created.alert_handle].cancelled_at is not None
    assert by_handle[completed.alert_handle].cancelled_at is None
    assert by_handle[completed.alert_handle].shape == "one_shot"

    stored = await repository.get_by_id(created.reminder.id)
    assert stored.next_due == date(2024, 6, 15)
    assert stored.notification_handle == completed.alert_handle


async def test_disabling_leaves_no_live_alert_rows(repository, registrar):
    service = ReminderService(repository, registrar, clock=lambda: NOW)
    created = await service.create_reminder(
        plant_id="plant-1",
        type=ReminderType.WATERING,
        frequency=Frequency.MONTHLY,
        start_date=date(2024, 6, 1),
    )
    await service.snooze_reminder(created.reminder.id, minutes=30)
    assert len(await registrar.list_active(NOW, reminder_id=created.reminder.id)) == 2

    await service.toggle_enabled(created.reminder.id)
    await service.reconcile_alerts()

    assert await registrar.list_active(NOW, reminder_id=created.reminder.id) == []


async def test_delete_removes_alert_rows(session, repository, registrar):
    service = ReminderService(repository, registrar, clock=lambda: NOW)
    created = await service.create_reminder(
        plant_id="plant-1",
        type=ReminderType.WATERING,
        frequency=Frequency.WEEKLY,
        start_date=date(2024, 6, 1),
    )
    await service.snooze_reminder(created.reminder.id)

    await service.delete_reminder(created.reminder.id)
    session.expunge_all()

    rows = await session.execute(
        select(ScheduledAlertModel).where(ScheduledAlertModel.reminder_id == created.reminder.id)
    )
    assert rows.scalars().all() == []
    assert await registrar.list_active(NOW) == []


async def test_failed_alert_insert_keeps_completion(session, repository, registrar, monkeypatch):
    service = ReminderService(repository, registrar, clock=lambda: NOW)
    created = await service.create_reminder(
        plant_id="plant-1",
        type=ReminderType.FERTILIZING,
        frequency=Frequency.BIWEEKLY,
        start_date=date(2024, 6, 1),
    )
    await session.commit()
    session.expunge_all()

    # Next insert reuses an existing primary key and fails in the database
    taken = created.alert_handle
    monkeypatch.setattr(scheduled_alert_registrar, "generate_uuid", lambda: taken)

    outcome = await service.mark_completed(created.reminder.id, date(2024, 6, 1))
    await session.commit()

    assert outcome.alert_registered is False
    stored = await repository.get_by_id(created.reminder.id)
    assert stored.next_due == date(2024, 6, 15)
    assert stored.last_completed == date(2024, 6, 1)
    assert stored.notification_handle is None
    assert await registrar.is_active(taken, NOW) is False
