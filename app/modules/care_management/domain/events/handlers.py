# 📄 File: app/modules/care_management/domain/events/handlers.py
# 🧭 Purpose (Layman Explanation):
# Listens for reminder announcements and writes them to the activity log, so we can see how often
# people finish their plant care and whether alerts failed to schedule.
# 🧪 Purpose (Technical Summary):
# Event bus handlers for reminder lifecycle events, recording structured business events and
# flagging completions whose follow-up alert could not be registered.
# 🔗 Dependencies:
# app.shared.core.event_bus, app.shared.utils.logging, reminder_events
# 🔄 Connected Modules / Calls From:
# app.main lifespan (subscription at startup), event bus workers

from app.shared.core.event_bus import BaseEventHandler, EventBus
from app.shared.utils.logging import get_logger

from .reminder_events import REMINDER_EVENT_TYPES, ReminderCompleted, ReminderEvent

activity_log = get_logger("care_management.activity")


class ReminderActivityHandler(BaseEventHandler):
    """Records one reminder event type as a business event."""

    def __init__(self, event_type: str):
        super().__init__(f"reminder_activity:{event_type}")
        self._event_type = event_type

    @property
    def event_type(self) -> str:
        return self._event_type

    async def handle(self, event: ReminderEvent) -> bool:
        extra = {"plant_id": event.plant_id, "event_id": event.event_id}

        if isinstance(event, ReminderCompleted):
            extra.update({
                "completion_date": str(event.completion_date),
                "next_due": str(event.next_due),
                "alert_registered": event.alert_registered,
            })
            if not event.alert_registered:
                activity_log.warning(
                    f"Reminder {event.aggregate_id} completed without a follow-up alert",
                    extra=extra,
                )

        activity_log.log_business_event(
            event_type=event.event_type,
            description=f"{event.event_type} for reminder {event.aggregate_id}",
            entity_id=event.aggregate_id,
            entity_type=event.aggregate_type,
            extra=extra,
        )
        self.processed_count += 1
        return True


def register_reminder_event_handlers(event_bus: EventBus) -> None:
    """Subscribe the activity handler to every reminder event type."""
    for event_type in REMINDER_EVENT_TYPES:
        event_bus.subscribe(ReminderActivityHandler(event_type), retry_count=1)
