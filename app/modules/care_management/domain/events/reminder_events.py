# 📄 File: app/modules/care_management/domain/events/reminder_events.py
# 🧭 Purpose (Layman Explanation):
# Announcements the reminder system makes when something happens - a reminder was created,
# finished, switched off, edited, snoozed or deleted - so other parts of the app can react.
# 🧪 Purpose (Technical Summary):
# Dataclass domain events on the shared event bus for the reminder lifecycle; each sets its
# event_type and aggregate_type after initialization.
# 🔗 Dependencies:
# dataclasses, datetime, typing, app.shared.core.event_bus
# 🔄 Connected Modules / Calls From:
# reminder_service.py (publisher), domain/events/handlers.py (subscribers)

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from app.shared.core.event_bus import DomainEvent

REMINDER_AGGREGATE = "reminder"


@dataclass
class ReminderEvent(DomainEvent):
    """Base class for reminder events."""
    plant_id: Optional[str] = None

    def __post_init__(self):
        self.aggregate_type = REMINDER_AGGREGATE


@dataclass
class ReminderCreated(ReminderEvent):
    frequency: Optional[str] = None
    next_due: Optional[date] = None

    def __post_init__(self):
        super().__post_init__()
        self.event_type = "reminder.created"


@dataclass
class ReminderCompleted(ReminderEvent):
    """Fired after a completion advanced next_due."""
    completion_date: Optional[date] = None
    next_due: Optional[date] = None
    alert_registered: bool = False

    def __post_init__(self):
        super().__post_init__()
        self.event_type = "reminder.completed"


@dataclass
class ReminderToggled(ReminderEvent):
    enabled: bool = True

    def __post_init__(self):
        super().__post_init__()
        self.event_type = "reminder.toggled"


@dataclass
class ReminderUpdated(ReminderEvent):
    next_due: Optional[date] = None

    def __post_init__(self):
        super().__post_init__()
        self.event_type = "reminder.updated"


@dataclass
class ReminderDeleted(ReminderEvent):
    def __post_init__(self):
        super().__post_init__()
        self.event_type = "reminder.deleted"


@dataclass
class ReminderSnoozed(ReminderEvent):
    fire_at: Optional[datetime] = None

    def __post_init__(self):
        super().__post_init__()
        self.event_type = "reminder.snoozed"


REMINDER_EVENT_TYPES = (
    "reminder.created",
    "reminder.completed",
    "reminder.toggled",
    "reminder.updated",
    "reminder.deleted",
    "reminder.snoozed",
)
