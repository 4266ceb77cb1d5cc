# 📄 File: app/modules/care_management/domain/models/reminder.py
# 🧭 Purpose (Layman Explanation):
# Defines what a care "reminder" is - which plant it is for, what needs doing (water, fertilize...),
# how often, and when it is next due - plus the friendly names shown to people for each option.
# 🧪 Purpose (Technical Summary):
# Domain model for the Reminder entity with its enumerations (type, frequency, weekday,
# preferred time, schedule state) and the single display lookup table keyed by those enums.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, re
# 🔄 Connected Modules / Calls From:
# reminder_scheduler.py, reminder_service.py, reminder_repository.py, application DTOs and API schemas

import re
import uuid
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

CLOCK_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class ReminderType(str, Enum):
    """Kind of care task. Only affects human-readable text."""
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    ROTATION = "rotation"
    REPOTTING = "repotting"
    OTHER = "other"


class Frequency(str, Enum):
    """Named recurrence interval governing next-due arithmetic."""
    DAILY = "daily"
    EVERY_3_DAYS = "every3days"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SIX_MONTHLY = "sixmonthly"
    YEARLY = "yearly"
    BIANNUALLY = "biannually"   # every two years


class Weekday(str, Enum):
    """Weekday names, ordered to match date.weekday()."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def day_number(self) -> int:
        """0 for Monday through 6 for Sunday."""
        return list(Weekday).index(self)


class PreferredTime(str, Enum):
    """Named times of day for a reminder's alert."""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"

    @property
    def clock_time(self) -> time:
        return PREFERRED_TIME_CLOCK[self]


class ScheduleState(str, Enum):
    """Where a reminder sits relative to today."""
    SCHEDULED = "scheduled"
    DUE = "due"
    OVERDUE = "overdue"
    DISABLED = "disabled"


PREFERRED_TIME_CLOCK: Dict[PreferredTime, time] = {
    PreferredTime.MORNING: time(8, 0),
    PreferredTime.AFTERNOON: time(13, 0),
    PreferredTime.EVENING: time(19, 0),
}


# =============================================================================
# DISPLAY LOOKUP TABLES
# =============================================================================

FREQUENCY_LABELS: Dict[Frequency, str] = {
    Frequency.DAILY: "Every day",
    Frequency.EVERY_3_DAYS: "Every 3 days",
    Frequency.WEEKLY: "Every week",
    Frequency.BIWEEKLY: "Every 2 weeks",
    Frequency.MONTHLY: "Every month",
    Frequency.QUARTERLY: "Every 3 months",
    Frequency.SIX_MONTHLY: "Every 6 months",
    Frequency.YEARLY: "Every year",
    Frequency.BIANNUALLY: "Every 2 years",
}

REMINDER_TYPE_LABELS: Dict[ReminderType, str] = {
    ReminderType.WATERING: "Watering",
    ReminderType.FERTILIZING: "Fertilizing",
    ReminderType.PRUNING: "Pruning",
    ReminderType.ROTATION: "Rotation",
    ReminderType.REPOTTING: "Repotting",
    ReminderType.OTHER: "Plant care",
}

# Verb used in alert bodies, e.g. "Time to water Monstera"
REMINDER_TYPE_ACTIONS: Dict[ReminderType, str] = {
    ReminderType.WATERING: "water",
    ReminderType.FERTILIZING: "fertilize",
    ReminderType.PRUNING: "prune",
    ReminderType.ROTATION: "rotate",
    ReminderType.REPOTTING: "repot",
    ReminderType.OTHER: "care for",
}

CUSTOM_FREQUENCY_LABEL = "Custom"


def frequency_label(frequency: Union[Frequency, str]) -> str:
    """Display label for a frequency; unknown values read as 'Custom'."""
    try:
        return FREQUENCY_LABELS[Frequency(frequency)]
    except ValueError:
        return CUSTOM_FREQUENCY_LABEL


def is_valid_preferred_time(value: str) -> bool:
    """True for a named time of day or an explicit 24h HH:MM string."""
    if value in PreferredTime._value2member_map_:
        return True
    return CLOCK_TIME_PATTERN.match(value) is not None


class Reminder(BaseModel):
    """
    Reminder domain model: one recurring care task for one plant.

    next_due is the single source of truth for when the task is due and is
    only changed with a value computed by the reminder scheduler. The id is
    assigned at creation and stays stable across edits.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    plant_id: str = Field(..., min_length=1, max_length=64)
    plant_name: Optional[str] = Field(None, max_length=120)
    type: ReminderType
    frequency: Frequency
    start_date: date
    preferred_day_of_week: Optional[Weekday] = None
    preferred_time: Optional[str] = None
    next_due: date
    last_completed: Optional[date] = None
    enabled: bool = True

    # Handle of the device alert currently registered for this reminder
    notification_handle: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("preferred_time")
    @classmethod
    def validate_preferred_time(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().lower()
        if not is_valid_preferred_time(v):
            raise ValueError(
                "preferred_time must be morning, afternoon, evening or HH:MM"
            )
        return v

    # -------------------------------------------------------------------------
    # Business methods
    # -------------------------------------------------------------------------

    def record_completion(self, completion_date: date, next_due: date) -> None:
        """Apply a completion with the next due date computed by the scheduler."""
        self.last_completed = completion_date
        self.next_due = next_due
        self.touch()

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable alerts; next_due is left untouched."""
        self.enabled = enabled
        self.touch()

    def attach_alert(self, handle: Optional[str]) -> None:
        self.notification_handle = handle

    def detach_alert(self) -> Optional[str]:
        handle, self.notification_handle = self.notification_handle, None
        return handle

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    @property
    def display_name(self) -> str:
        return self.plant_name or "your plant"

    @property
    def type_label(self) -> str:
        return REMINDER_TYPE_LABELS[self.type]

    @property
    def frequency_label(self) -> str:
        return frequency_label(self.frequency)


class ReminderFilter(str, Enum):
    """List filters for the reminder overview screens."""
    ALL = "all"
    TODAY = "today"
    UPCOMING = "upcoming"
    OVERDUE = "overdue"
