# 📄 File: app/modules/care_management/application/dto/reminder_dto.py
# 🧭 Purpose (Layman Explanation):
# Standard packages of reminder information handed back to the app, including the friendly
# labels ("Every 2 weeks") and whether the task is due, overdue or still ahead.
#
# 🧪 Purpose (Technical Summary):
# Data transfer objects built from Reminder domain entities, AlertTrigger values and stored
# alert rows. Derived fields (state, labels, resolved alert time) are computed here so API
# schemas stay thin.
#
# 🔗 Dependencies:
# - pydantic for DTO validation and serialization
# - app.modules.care_management.domain (models and scheduler)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.application.handlers (handlers return DTOs)
# - app.modules.care_management.presentation.api.v1.reminders (response models)

"""
Reminder Data Transfer Objects (DTOs)

DTO Classes:
- ReminderDTO: reminder with display labels and schedule state
- AlertTriggerDTO: the trigger registered for a reminder
- ScheduleResultDTO: result of a lifecycle command that (re)schedules an alert
- ReminderListDTO: filtered reminder list
- ScheduledAlertDTO: one alert a device should schedule locally
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.modules.care_management.domain.models.alert_trigger import AlertTrigger, TriggerShape
from app.modules.care_management.domain.models.reminder import (
    Frequency,
    Reminder,
    ReminderFilter,
    ReminderType,
    ScheduleState,
    Weekday,
)
from app.modules.care_management.domain.services.reminder_scheduler import (
    resolve_time,
    schedule_state,
)
from app.shared.utils.helpers import ensure_utc


class ReminderDTO(BaseModel):
    """Complete reminder representation."""

    id: str
    plant_id: str
    plant_name: Optional[str] = None
    type: ReminderType
    type_label: str
    frequency: Frequency
    frequency_label: str
    start_date: date
    preferred_day_of_week: Optional[Weekday] = None
    preferred_time: Optional[str] = None
    alert_time: str = Field(..., description="Resolved HH:MM the alert fires at")
    next_due: date
    last_completed: Optional[date] = None
    enabled: bool
    state: ScheduleState
    notification_handle: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, reminder: Reminder, today: date) -> "ReminderDTO":
        return cls(
            id=reminder.id,
            plant_id=reminder.plant_id,
            plant_name=reminder.plant_name,
            type=reminder.type,
            type_label=reminder.type_label,
            frequency=reminder.frequency,
            frequency_label=reminder.frequency_label,
            start_date=reminder.start_date,
            preferred_day_of_week=reminder.preferred_day_of_week,
            preferred_time=reminder.preferred_time,
            alert_time=resolve_time(reminder.preferred_time).strftime("%H:%M"),
            next_due=reminder.next_due,
            last_completed=reminder.last_completed,
            enabled=reminder.enabled,
            state=schedule_state(reminder, today),
            notification_handle=reminder.notification_handle,
            created_at=reminder.created_at,
            updated_at=reminder.updated_at,
        )


class AlertTriggerDTO(BaseModel):
    shape: TriggerShape
    repeats: bool
    hour: Optional[int] = None
    minute: Optional[int] = None
    weekday: Optional[Weekday] = None
    fire_at: Optional[datetime] = None

    @classmethod
    def from_trigger(cls, trigger: AlertTrigger) -> "AlertTriggerDTO":
        return cls(
            shape=trigger.shape,
            repeats=trigger.is_repeating,
            hour=trigger.hour,
            minute=trigger.minute,
            weekday=trigger.weekday,
            fire_at=trigger.fire_at,
        )


class ScheduleResultDTO(BaseModel):
    """
    Outcome of a command that may (re)register an alert.

    alert_registered is False when the reminder is disabled or when the
    registrar refused the alert; in the latter case the schedule change is
    still saved and the alert is retried by reconciliation.
    """

    reminder: ReminderDTO
    alert_registered: bool
    trigger: Optional[AlertTriggerDTO] = None


class ReminderListDTO(BaseModel):
    items: List[ReminderDTO]
    total: int
    status_filter: ReminderFilter


class ScheduledAlertDTO(BaseModel):
    """An alert as a device should schedule it."""

    handle: str
    reminder_id: str
    shape: TriggerShape
    trigger: Dict[str, Any]
    title: str
    body: str
    category: str
    payload: Dict[str, Any]
    created_at: datetime

    @classmethod
    def from_model(cls, alert) -> "ScheduledAlertDTO":
        trigger = AlertTrigger(
            shape=alert.shape,
            hour=alert.hour,
            minute=alert.minute,
            weekday=alert.weekday,
            fire_at=ensure_utc(alert.fire_at),
        )
        return cls(
            handle=alert.handle,
            reminder_id=alert.reminder_id,
            shape=trigger.shape,
            trigger=trigger.to_payload(),
            title=alert.title,
            body=alert.body,
            category=alert.category,
            payload=dict(alert.payload or {}),
            created_at=ensure_utc(alert.created_at),
        )
