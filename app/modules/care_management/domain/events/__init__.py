# 📄 File: app/modules/care_management/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the announcements made when reminders are created, finished, switched, edited, snoozed or deleted.
# 🧪 Purpose (Technical Summary):
# Package exports for reminder domain events and their event bus handlers.
# 🔗 Dependencies:
# reminder_events, handlers
# 🔄 Connected Modules / Calls From:
# ReminderService (publisher), app.main lifespan (handler registration)

from .reminder_events import (
    REMINDER_EVENT_TYPES,
    ReminderCompleted,
    ReminderCreated,
    ReminderDeleted,
    ReminderEvent,
    ReminderSnoozed,
    ReminderToggled,
    ReminderUpdated,
)
from .handlers import ReminderActivityHandler, register_reminder_event_handlers

__all__ = [
    "REMINDER_EVENT_TYPES",
    "ReminderEvent",
    "ReminderCreated",
    "ReminderCompleted",
    "ReminderToggled",
    "ReminderUpdated",
    "ReminderDeleted",
    "ReminderSnoozed",
    "ReminderActivityHandler",
    "register_reminder_event_handlers",
]
