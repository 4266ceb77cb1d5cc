# 📄 File: app/modules/care_management/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the reminder information packages returned to the app.
# 🧪 Purpose (Technical Summary):
# Package exports for care management DTOs.
# 🔗 Dependencies:
# reminder_dto
# 🔄 Connected Modules / Calls From:
# application handlers, presentation API

from .reminder_dto import (
    AlertTriggerDTO,
    ReminderDTO,
    ReminderListDTO,
    ScheduledAlertDTO,
    ScheduleResultDTO,
)

__all__ = [
    "ReminderDTO",
    "AlertTriggerDTO",
    "ScheduleResultDTO",
    "ReminderListDTO",
    "ScheduledAlertDTO",
]
