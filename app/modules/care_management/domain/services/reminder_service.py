# 📄 File: app/modules/care_management/domain/services/reminder_service.py
# 🧭 Purpose (Layman Explanation):
# Runs everything that happens to a reminder over its life - creating it, ticking it off as done,
# switching it on or off, editing, snoozing and deleting - and keeps the phone alert in step.
# 🧪 Purpose (Technical Summary):
# Domain service orchestrating the reminder lifecycle around the pure scheduler, with explicitly
# injected repository, notification registrar, event bus and clock. Includes a reconciliation
# pass that re-derives missing alerts from next_due.
# 🔗 Dependencies:
# Reminder domain models, reminder_scheduler, ReminderRepository, NotificationRegistrar,
# app.shared.core (exceptions, event bus), pydantic
# 🔄 Connected Modules / Calls From:
# Application command/query handlers, background reconciliation task, tests

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Callable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.shared.core.event_bus import DomainEvent, EventBus
from app.shared.core.exceptions import (
    CareScheduleError,
    NotificationRegistrationError,
    ReminderNotFoundError,
    ValidationError,
)

from ..events.reminder_events import (
    ReminderCompleted,
    ReminderCreated,
    ReminderDeleted,
    ReminderSnoozed,
    ReminderToggled,
    ReminderUpdated,
)
from ..models.alert_trigger import AlertTrigger
from ..models.reminder import (
    Frequency,
    Reminder,
    ReminderFilter,
    ReminderType,
    Weekday,
)
from ..repositories.reminder_repository import ReminderRepository
from . import reminder_scheduler as scheduler
from .notification_registrar import NotificationRegistrar

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ScheduleOutcome:
    """Result of a lifecycle operation that may (re)register an alert."""
    reminder: Reminder
    trigger: Optional[AlertTrigger] = None
    alert_registered: bool = False
    alert_handle: Optional[str] = None


@dataclass
class ReconciliationReport:
    """Counts from one reconciliation pass."""
    checked: int = 0
    registered: int = 0
    cancelled: int = 0
    failed: int = 0


class ReminderService:
    """
    Domain service for the reminder lifecycle.

    next_due only ever changes through the scheduler: compute_initial_due_date
    on create/edit and advance_due_date on completion. Toggling never touches it.
    Alert registration failures never undo a schedule change; the reminder is
    saved without a handle and the reconciliation pass retries later.
    """

    def __init__(
        self,
        repository: ReminderRepository,
        registrar: NotificationRegistrar,
        event_bus: Optional[EventBus] = None,
        clock: Optional[Clock] = None,
        alert_category: str = scheduler.ALERT_CATEGORY,
    ):
        self.repository = repository
        self.registrar = registrar
        self.event_bus = event_bus
        self.clock = clock or utc_now
        self.alert_category = alert_category

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def get_reminder(self, reminder_id: str) -> Reminder:
        """
        Get a reminder by ID.

        Raises:
            ReminderNotFoundError: If no reminder has this ID
        """
        reminder = await self.repository.get_by_id(reminder_id)
        if reminder is None:
            raise ReminderNotFoundError(reminder_id)
        return reminder

    async def list_reminders(
        self,
        status_filter: ReminderFilter = ReminderFilter.ALL,
        plant_id: Optional[str] = None,
    ) -> List[Reminder]:
        """List reminders by due-date bucket relative to today."""
        today = self.today()
        bounds = {
            ReminderFilter.ALL: (None, None),
            ReminderFilter.TODAY: (today, today),
            ReminderFilter.UPCOMING: (today + timedelta(days=1), None),
            ReminderFilter.OVERDUE: (None, today - timedelta(days=1)),
        }
        due_from, due_until = bounds[ReminderFilter(status_filter)]
        return await self.repository.list_reminders(
            plant_id=plant_id, due_from=due_from, due_until=due_until
        )

    def today(self) -> date:
        return self.clock().date()

    # =========================================================================
    # LIFECYCLE COMMANDS
    # =========================================================================

    async def create_reminder(
        self,
        plant_id: str,
        type: ReminderType,
        frequency: Frequency,
        start_date: date,
        preferred_day_of_week: Optional[Weekday] = None,
        preferred_time: Optional[str] = None,
        plant_name: Optional[str] = None,
        enabled: bool = True,
    ) -> ScheduleOutcome:
        """
        Create a reminder with its initial next_due and register its alert.

        Raises:
            ValidationError: If a field is outside the accepted values
        """
        try:
            reminder = Reminder(
                plant_id=plant_id,
                plant_name=plant_name,
                type=type,
                frequency=frequency,
                start_date=start_date,
                preferred_day_of_week=preferred_day_of_week,
                preferred_time=preferred_time,
                next_due=scheduler.compute_initial_due_date(
                    start_date, Frequency(frequency), preferred_day_of_week
                ),
                enabled=enabled,
            )
        except (PydanticValidationError, ValueError) as e:
            raise ValidationError(f"Invalid reminder: {e}", constraint="reminder_fields")

        # Stored first so the alert can reference it
        reminder = await self.repository.create(reminder)
        outcome = await self._sync_alert(reminder, self.clock())
        reminder = await self.repository.update(reminder)
        outcome.reminder = reminder

        logger.info(f"Created reminder {reminder.id} for plant {reminder.plant_id}, next due {reminder.next_due}")
        await self._publish(ReminderCreated(
            aggregate_id=reminder.id,
            plant_id=reminder.plant_id,
            frequency=reminder.frequency.value,
            next_due=reminder.next_due,
        ))
        return outcome

    async def mark_completed(
        self,
        reminder_id: str,
        completion_date: Optional[date] = None,
    ) -> ScheduleOutcome:
        """
        Record a completion: advance next_due and re-issue the alert if enabled.

        completion_date defaults to today in the service clock's timezone.
        """
        reminder = await self.get_reminder(reminder_id)
        completion_date = completion_date or self.today()

        next_due = scheduler.advance_due_date(completion_date, reminder.frequency)
        reminder.record_completion(completion_date, next_due)

        outcome = await self._sync_alert(reminder, self.clock())
        outcome.reminder = await self.repository.update(reminder)

        logger.info(
            f"Reminder {reminder_id} completed on {completion_date}; next due {next_due}"
        )
        await self._publish(ReminderCompleted(
            aggregate_id=reminder.id,
            plant_id=reminder.plant_id,
            completion_date=completion_date,
            next_due=next_due,
            alert_registered=outcome.alert_registered,
        ))
        return outcome

    async def toggle_enabled(self, reminder_id: str) -> ScheduleOutcome:
        """Flip enabled; the alert is cancelled or registered, next_due is unchanged."""
        reminder = await self.get_reminder(reminder_id)
        reminder.set_enabled(not reminder.enabled)

        outcome = await self._sync_alert(reminder, self.clock())
        outcome.reminder = await self.repository.update(reminder)

        await self._publish(ReminderToggled(
            aggregate_id=reminder.id,
            plant_id=reminder.plant_id,
            enabled=reminder.enabled,
        ))
        return outcome

    async def update_reminder(
        self,
        reminder_id: str,
        plant_id: str,
        type: ReminderType,
        frequency: Frequency,
        start_date: date,
        preferred_day_of_week: Optional[Weekday] = None,
        preferred_time: Optional[str] = None,
        plant_name: Optional[str] = None,
        enabled: bool = True,
    ) -> ScheduleOutcome:
        """
        Full edit: every field except id and history is replaced and
        next_due is recomputed from the new start date and frequency.
        """
        existing = await self.get_reminder(reminder_id)

        try:
            reminder = Reminder(
                id=existing.id,
                plant_id=plant_id,
                plant_name=plant_name,
                type=type,
                frequency=frequency,
                start_date=start_date,
                preferred_day_of_week=preferred_day_of_week,
                preferred_time=preferred_time,
                next_due=scheduler.compute_initial_due_date(
                    start_date, Frequency(frequency), preferred_day_of_week
                ),
                last_completed=existing.last_completed,
                enabled=enabled,
                notification_handle=existing.notification_handle,
                created_at=existing.created_at,
            )
        except (PydanticValidationError, ValueError) as e:
            raise ValidationError(f"Invalid reminder: {e}", constraint="reminder_fields")

        outcome = await self._sync_alert(reminder, self.clock())
        outcome.reminder = await self.repository.update(reminder)

        await self._publish(ReminderUpdated(
            aggregate_id=reminder.id,
            plant_id=reminder.plant_id,
            next_due=reminder.next_due,
        ))
        return outcome

    async def delete_reminder(self, reminder_id: str) -> None:
        """
        Cancel the reminder's alerts, snoozes included, then delete it.

        Raises:
            ReminderNotFoundError: If no reminder has this ID
            NotificationRegistrationError: If the alerts cannot be cancelled;
                the reminder is kept so the delete can be retried
        """
        reminder = await self.get_reminder(reminder_id)

        await self.registrar.cancel_for_reminder(reminder.id)

        await self.repository.delete(reminder_id)
        logger.info(f"Deleted reminder {reminder_id}")

        await self._publish(ReminderDeleted(
            aggregate_id=reminder.id,
            plant_id=reminder.plant_id,
        ))

    async def snooze_reminder(self, reminder_id: str, minutes: int = 60) -> ScheduleOutcome:
        """
        Register an extra one-shot alert `minutes` from now ("remind me later").

        The recurring alert and next_due are not changed. The snooze alert is
        only tied to the reminder through its payload, and is cancelled with
        the reminder's other alerts on completion, edit, disable and delete.

        Raises:
            CareScheduleError: If the reminder is disabled
            NotificationRegistrationError: If the alert cannot be registered
        """
        reminder = await self.get_reminder(reminder_id)
        if not reminder.enabled:
            raise CareScheduleError(
                "Cannot snooze a disabled reminder",
                plant_id=reminder.plant_id,
                reminder_id=reminder.id,
                conflict="disabled",
            )

        trigger = scheduler.build_snooze_trigger(self.clock(), timedelta(minutes=minutes))
        content = scheduler.build_alert_content(reminder, self.alert_category)
        handle = await self.registrar.register(trigger, content)

        await self._publish(ReminderSnoozed(
            aggregate_id=reminder.id,
            plant_id=reminder.plant_id,
            fire_at=trigger.fire_at,
        ))
        return ScheduleOutcome(reminder, trigger, True, handle)

    # =========================================================================
    # RECONCILIATION
    # =========================================================================

    async def reconcile_alerts(self) -> ReconciliationReport:
        """
        Re-derive alerts from stored reminders.

        Enabled reminders with no handle, or whose alert will no longer fire,
        get a fresh trigger; their pending snooze alerts are left alone.
        Disabled reminders get every alert registered for them cancelled,
        whether or not they still hold a handle.
        """
        now = self.clock()
        report = ReconciliationReport()

        for reminder in await self.repository.list_reminders():
            report.checked += 1
            handle = reminder.notification_handle

            if not reminder.enabled:
                reminder.detach_alert()
                cancelled = await self._cancel_all_quietly(reminder.id)
                if handle:
                    await self.repository.update(reminder)
                if handle or cancelled:
                    report.cancelled += 1
                continue

            if handle and await self.registrar.is_active(handle, now):
                continue

            outcome = await self._sync_alert(reminder, now, keep_snoozes=True)
            await self.repository.update(reminder)
            if outcome.alert_registered:
                report.registered += 1
            else:
                report.failed += 1

        logger.info(
            f"Alert reconciliation: checked={report.checked} registered={report.registered} "
            f"cancelled={report.cancelled} failed={report.failed}"
        )
        return report

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _sync_alert(
        self,
        reminder: Reminder,
        now: datetime,
        keep_snoozes: bool = False,
    ) -> ScheduleOutcome:
        """
        Replace the reminder's alert with one matching its current fields.

        Every alert registered for the reminder is cancelled first, pending
        snooze alerts included, unless keep_snoozes is set.
        """
        old_handle = reminder.detach_alert()
        if not keep_snoozes:
            await self._cancel_all_quietly(reminder.id)
        elif old_handle:
            await self._cancel_quietly(old_handle)

        if not reminder.enabled:
            return ScheduleOutcome(reminder)

        trigger = scheduler.build_alert_trigger(reminder, now)
        content = scheduler.build_alert_content(reminder, self.alert_category)

        try:
            handle = await self.registrar.register(trigger, content)
        except NotificationRegistrationError as e:
            logger.warning(
                f"Alert registration failed for reminder {reminder.id}; "
                f"left for reconciliation: {e.message}"
            )
            return ScheduleOutcome(reminder, trigger, False)

        reminder.attach_alert(handle)
        return ScheduleOutcome(reminder, trigger, True, handle)

    async def _cancel_quietly(self, handle: str) -> None:
        try:
            await self.registrar.cancel(handle)
        except NotificationRegistrationError as e:
            logger.warning(f"Could not cancel alert {handle}: {e.message}")

    async def _cancel_all_quietly(self, reminder_id: str) -> int:
        try:
            return await self.registrar.cancel_for_reminder(reminder_id)
        except NotificationRegistrationError as e:
            logger.warning(f"Could not cancel alerts for reminder {reminder_id}: {e.message}")
            return 0

    async def _publish(self, event: DomainEvent) -> None:
        if self.event_bus is not None:
            await self.event_bus.publish(event)
