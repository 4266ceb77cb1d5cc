# 📄 File: app/modules/care_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the core care reminder data types in one place - the reminder itself and the alert it produces.
# 🧪 Purpose (Technical Summary):
# Package exports for the Reminder entity, its enumerations and display tables,
# and the alert trigger / content value objects.
# 🔗 Dependencies:
# reminder.py, alert_trigger.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, application layer, infrastructure layer

from .reminder import (
    FREQUENCY_LABELS,
    REMINDER_TYPE_ACTIONS,
    REMINDER_TYPE_LABELS,
    Frequency,
    PreferredTime,
    Reminder,
    ReminderFilter,
    ReminderType,
    ScheduleState,
    Weekday,
    frequency_label,
)
from .alert_trigger import AlertContent, AlertTrigger, TriggerShape

__all__ = [
    "Reminder",
    "ReminderFilter",
    "ReminderType",
    "Frequency",
    "Weekday",
    "PreferredTime",
    "ScheduleState",
    "FREQUENCY_LABELS",
    "REMINDER_TYPE_LABELS",
    "REMINDER_TYPE_ACTIONS",
    "frequency_label",
    "AlertTrigger",
    "AlertContent",
    "TriggerShape",
]
