# 📄 File: tests/test_reminder_service.py
# 🧭 Purpose (Layman Explanation):
# Checks the full life of a reminder: creating it, ticking it off, pausing, editing, snoozing
# and deleting, and that the phone alert always follows along.
# 🧪 Purpose (Technical Summary):
# Async tests for ReminderService against in-memory repository/registrar fakes with a fixed
# clock, including registrar failure and the reconciliation pass.
# 🔗 Dependencies:
# pytest, pytest-asyncio, tests/conftest.py fakes
# 🔄 Connected Modules / Calls From:
# pytest

from datetime import date, timedelta

import pytest

from app.modules.care_management.domain.models.alert_trigger import TriggerShape
from app.modules.care_management.domain.models.reminder import (
    Frequency,
    ReminderFilter,
    ReminderType,
    Weekday,
)
from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.shared.core.exceptions import (
    CareScheduleError,
    ReminderNotFoundError,
    ValidationError,
)

from .conftest import FIXED_NOW, FailingRegistrar


async def create(service, **overrides):
    fields = dict(
        plant_id="plant-1",
        plant_name="Fern",
        type=ReminderType.WATERING,
        frequency=Frequency.BIWEEKLY,
        start_date=date(2024, 6, 1),
    )
    fields.update(overrides)
    return await service.create_reminder(**fields)


# =============================================================================
# CREATE
# =============================================================================

async def test_create_computes_next_due_and_registers_alert(service, repository, registrar, event_bus):
    outcome = await create(service, frequency=Frequency.WEEKLY, preferred_day_of_week=Weekday.WEDNESDAY)

    reminder = outcome.reminder
    assert reminder.next_due == date(2024, 6, 5)
    assert outcome.alert_registered is True
    assert outcome.trigger.shape == TriggerShape.WEEKLY
    assert reminder.notification_handle == outcome.alert_handle
    assert outcome.alert_handle in registrar.alerts
    assert repository.rows[reminder.id].notification_handle == outcome.alert_handle
    assert event_bus.event_types == ["reminder.created"]


async def test_create_disabled_reminder_registers_nothing(service, registrar):
    outcome = await create(service, enabled=False)

    assert outcome.alert_registered is False
    assert outcome.reminder.notification_handle is None
    assert registrar.alerts == {}


async def test_create_rejects_invalid_preferred_time(service, repository):
    with pytest.raises(ValidationError):
        await create(service, preferred_time="teatime")
    assert repository.rows == {}


async def test_alert_content_names_the_plant(service, registrar):
    outcome = await create(service, type=ReminderType.PRUNING, plant_name="Bonsai")

    _, content = registrar.alerts[outcome.alert_handle]
    assert content.title == "Pruning reminder"
    assert content.body == "Time to prune Bonsai!"
    assert content.payload["reminder_id"] == outcome.reminder.id


# =============================================================================
# COMPLETE
# =============================================================================

async def test_biweekly_completions_advance_next_due(service, registrar, clock):
    created = await create(service)
    reminder_id = created.reminder.id

    first = await service.mark_completed(reminder_id, date(2024, 6, 1))
    assert first.reminder.next_due == date(2024, 6, 15)
    assert first.reminder.last_completed == date(2024, 6, 1)

    clock.now = FIXED_NOW + timedelta(days=14)
    second = await service.mark_completed(reminder_id, date(2024, 6, 15))
    assert second.reminder.next_due == date(2024, 6, 29)
    assert second.trigger.shape == TriggerShape.ONE_SHOT
    assert second.trigger.fire_at.date() == date(2024, 6, 29)

    # Each completion replaces the previous alert
    assert created.alert_handle in registrar.cancelled
    assert first.alert_handle in registrar.cancelled
    assert list(registrar.alerts) == [second.alert_handle]


async def test_completion_defaults_to_today(service):
    created = await create(service, frequency=Frequency.MONTHLY)

    outcome = await service.mark_completed(created.reminder.id)

    assert outcome.reminder.last_completed == FIXED_NOW.date()
    assert outcome.reminder.next_due == date(2024, 7, 1)


async def test_completion_of_disabled_reminder_advances_without_alert(service, registrar):
    created = await create(service, enabled=False)

    outcome = await service.mark_completed(created.reminder.id, date(2024, 6, 1))

    assert outcome.reminder.next_due == date(2024, 6, 15)
    assert outcome.alert_registered is False
    assert registrar.alerts == {}


async def test_registration_failure_keeps_advanced_schedule(repository, event_bus, clock):
    service = ReminderService(repository, FailingRegistrar(), event_bus, clock)
    created = await create(service)
    assert created.alert_registered is False

    outcome = await service.mark_completed(created.reminder.id, date(2024, 6, 1))

    assert outcome.alert_registered is False
    assert outcome.trigger is not None
    stored = repository.rows[created.reminder.id]
    assert stored.next_due == date(2024, 6, 15)
    assert stored.notification_handle is None
    completed_event = event_bus.events[-1]
    assert completed_event.event_type == "reminder.completed"
    assert completed_event.alert_registered is False


async def test_missing_reminder_raises_not_found(service):
    with pytest.raises(ReminderNotFoundError):
        await service.mark_completed("missing")


# =============================================================================
# TOGGLE / UPDATE / DELETE
# =============================================================================

async def test_toggle_never_changes_next_due(service, registrar):
    created = await create(service)
    next_due = created.reminder.next_due

    disabled = await service.toggle_enabled(created.reminder.id)
    assert disabled.reminder.enabled is False
    assert disabled.reminder.next_due == next_due
    assert disabled.reminder.notification_handle is None
    assert registrar.alerts == {}

    enabled = await service.toggle_enabled(created.reminder.id)
    assert enabled.reminder.enabled is True
    assert enabled.reminder.next_due == next_due
    assert enabled.alert_registered is True


async def test_update_keeps_id_and_history_and_recomputes_next_due(service, registrar):
    created = await create(service)
    reminder_id = created.reminder.id
    await service.mark_completed(reminder_id, date(2024, 6, 1))

    outcome = await service.update_reminder(
        reminder_id,
        plant_id="plant-1",
        type=ReminderType.WATERING,
        frequency=Frequency.DAILY,
        start_date=date(2024, 6, 3),
        preferred_time="evening",
    )

    assert outcome.reminder.id == reminder_id
    assert outcome.reminder.last_completed == date(2024, 6, 1)
    assert outcome.reminder.next_due == date(2024, 6, 3)
    assert outcome.reminder.created_at == created.reminder.created_at
    assert outcome.trigger.shape == TriggerShape.DAILY
    assert (outcome.trigger.hour, outcome.trigger.minute) == (19, 0)
    assert list(registrar.alerts) == [outcome.alert_handle]


async def test_delete_cancels_alert(service, repository, registrar, event_bus):
    created = await create(service)

    await service.delete_reminder(created.reminder.id)

    assert repository.rows == {}
    assert created.alert_handle in registrar.cancelled
    assert event_bus.event_types[-1] == "reminder.deleted"
    with pytest.raises(ReminderNotFoundError):
        await service.get_reminder(created.reminder.id)


# =============================================================================
# SNOOZE
# =============================================================================

async def test_snooze_adds_one_shot_without_moving_schedule(service, registrar):
    created = await create(service)

    outcome = await service.snooze_reminder(created.reminder.id, minutes=30)

    assert outcome.trigger.shape == TriggerShape.ONE_SHOT
    assert outcome.trigger.fire_at == FIXED_NOW + timedelta(minutes=30)
    assert outcome.reminder.next_due == created.reminder.next_due
    assert created.alert_handle in registrar.alerts
    assert outcome.alert_handle in registrar.alerts


async def test_disabling_cancels_snooze_alert(service, registrar):
    created = await create(service, frequency=Frequency.MONTHLY)
    snoozed = await service.snooze_reminder(created.reminder.id, minutes=30)

    await service.toggle_enabled(created.reminder.id)
    report = await service.reconcile_alerts()

    assert registrar.alerts == {}
    assert snoozed.alert_handle in registrar.cancelled
    assert report.registered == 0


async def test_completion_cancels_snooze_alert(service, registrar):
    created = await create(service, frequency=Frequency.MONTHLY)
    snoozed = await service.snooze_reminder(created.reminder.id, minutes=30)

    completed = await service.mark_completed(created.reminder.id)

    assert list(registrar.alerts) == [completed.alert_handle]
    assert snoozed.alert_handle in registrar.cancelled


async def test_update_cancels_snooze_alert(service, registrar):
    created = await create(service)
    snoozed = await service.snooze_reminder(created.reminder.id)

    updated = await service.update_reminder(
        created.reminder.id,
        plant_id="plant-1",
        plant_name="Fern",
        type=ReminderType.PRUNING,
        frequency=Frequency.WEEKLY,
        start_date=date(2024, 6, 1),
    )

    assert list(registrar.alerts) == [updated.alert_handle]
    assert snoozed.alert_handle in registrar.cancelled


async def test_delete_cancels_snooze_alert(service, registrar):
    created = await create(service)
    snoozed = await service.snooze_reminder(created.reminder.id)

    await service.delete_reminder(created.reminder.id)

    assert registrar.alerts == {}
    assert {created.alert_handle, snoozed.alert_handle} <= set(registrar.cancelled)


async def test_reconcile_keeps_pending_snooze_of_enabled_reminder(service, registrar, clock):
    created = await create(service, frequency=Frequency.MONTHLY)
    snoozed = await service.snooze_reminder(created.reminder.id, minutes=60 * 24 * 3)

    # The recurring one-shot has fired; the snooze has not
    clock.now = FIXED_NOW + timedelta(days=2)
    await service.reconcile_alerts()

    assert snoozed.alert_handle in registrar.alerts
    assert created.alert_handle in registrar.cancelled


async def test_snooze_disabled_reminder_is_rejected(service):
    created = await create(service, enabled=False)

    with pytest.raises(CareScheduleError):
        await service.snooze_reminder(created.reminder.id)


# =============================================================================
# LISTING AND RECONCILIATION
# =============================================================================

async def test_list_filters_relative_to_today(service):
    overdue = await create(service, plant_id="a", start_date=date(2024, 5, 20))
    today = await create(service, plant_id="b", start_date=date(2024, 6, 1))
    upcoming = await create(service, plant_id="c", start_date=date(2024, 6, 10))

    def ids(reminders):
        return [r.id for r in reminders]

    assert ids(await service.list_reminders()) == [
        overdue.reminder.id, today.reminder.id, upcoming.reminder.id
    ]
    assert ids(await service.list_reminders(ReminderFilter.OVERDUE)) == [overdue.reminder.id]
    assert ids(await service.list_reminders(ReminderFilter.TODAY)) == [today.reminder.id]
    assert ids(await service.list_reminders(ReminderFilter.UPCOMING)) == [upcoming.reminder.id]
    assert ids(await service.list_reminders(plant_id="b")) == [today.reminder.id]


async def test_reconcile_registers_missing_and_cancels_stale(repository, registrar, clock):
    failing = ReminderService(repository, FailingRegistrar(), clock=clock)
    missing = await create(failing, plant_id="missing-alert")

    service = ReminderService(repository, registrar, clock=clock)
    healthy = await create(service, plant_id="healthy")
    stale = await create(service, plant_id="stale")

    # Disabled behind the service's back, still holding its alert
    row = repository.rows[stale.reminder.id]
    row.enabled = False

    report = await service.reconcile_alerts()

    assert report.checked == 3
    assert report.registered == 1
    assert report.cancelled == 1
    assert report.failed == 0
    assert repository.rows[missing.reminder.id].notification_handle is not None
    assert repository.rows[healthy.reminder.id].notification_handle == healthy.alert_handle
    assert repository.rows[stale.reminder.id].notification_handle is None
    assert stale.alert_handle in registrar.cancelled


async def test_reconcile_replaces_fired_one_shot(service, repository, registrar, clock):
    created = await create(service, frequency=Frequency.MONTHLY)
    old_handle = created.alert_handle

    # Past the one-shot's fire time without a completion
    clock.now = FIXED_NOW + timedelta(days=2)
    report = await service.reconcile_alerts()

    assert report.registered == 1
    new_handle = repository.rows[created.reminder.id].notification_handle
    assert new_handle != old_handle
    trigger, _ = registrar.alerts[new_handle]
    assert trigger.fire_at > clock.now
