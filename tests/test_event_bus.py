# 📄 File: tests/test_event_bus.py
# 🧭 Purpose (Layman Explanation):
# Checks that reminder announcements reach their listeners, and that a listener that
# stumbles gets another try.
# 🧪 Purpose (Technical Summary):
# Async tests for the in-process EventBus (dispatch, retry, give-up) and the reminder
# activity handler subscribed at startup.
# 🔗 Dependencies:
# pytest, pytest-asyncio, app.shared.core.event_bus
# 🔄 Connected Modules / Calls From:
# pytest

import logging
from datetime import date

import pytest

from app.modules.care_management.domain.events.handlers import (
    ReminderActivityHandler,
    register_reminder_event_handlers,
)
from app.modules.care_management.domain.events.reminder_events import (
    REMINDER_EVENT_TYPES,
    ReminderCompleted,
    ReminderCreated,
)
from app.shared.core.event_bus import BaseEventHandler, EventBus


class RecordingHandler(BaseEventHandler):
    def __init__(self, event_type: str, failures: int = 0):
        super().__init__(f"recording:{event_type}")
        self._event_type = event_type
        self.failures = failures
        self.calls = 0
        self.events = []

    @property
    def event_type(self) -> str:
        return self._event_type

    async def handle(self, event) -> bool:
        self.calls += 1
        if self.calls <= self.failures:
            raise RuntimeError("flaky")
        self.events.append(event)
        self.processed_count += 1
        return True


@pytest.fixture
async def bus():
    event_bus = EventBus(worker_count=1, retry_delay=0)
    await event_bus.start()
    yield event_bus
    await event_bus.stop()


async def test_events_reach_subscribed_handler_only(bus):
    created = RecordingHandler("reminder.created")
    completed = RecordingHandler("reminder.completed")
    bus.subscribe(created)
    bus.subscribe(completed)

    await bus.publish(ReminderCreated(aggregate_id="r1", plant_id="p1"), correlation_id="req-1")
    await bus.drain()

    assert [e.aggregate_id for e in created.events] == ["r1"]
    assert created.events[0].correlation_id == "req-1"
    assert completed.events == []
    assert bus.get_stats()["processed"] == 1


async def test_failing_handler_is_retried(bus):
    handler = RecordingHandler("reminder.created", failures=2)
    bus.subscribe(handler, retry_count=3)

    await bus.publish(ReminderCreated(aggregate_id="r1"))
    await bus.drain()

    assert handler.calls == 3
    assert len(handler.events) == 1
    assert bus.get_stats()["retries"] == 2


async def test_handler_gives_up_after_retries(bus):
    handler = RecordingHandler("reminder.created", failures=5)
    bus.subscribe(handler, retry_count=1)

    await bus.publish(ReminderCreated(aggregate_id="r1"))
    await bus.drain()

    assert handler.calls == 2
    assert handler.error_count == 1
    assert bus.get_stats()["failed"] == 1


async def test_reminder_events_carry_their_type():
    event = ReminderCompleted(aggregate_id="r1", next_due=date(2024, 6, 15))

    assert event.event_type == "reminder.completed"
    assert event.aggregate_type == "reminder"
    assert event.to_dict()["next_due"] == date(2024, 6, 15)


async def test_activity_handler_flags_completion_without_alert(caplog):
    handler = ReminderActivityHandler("reminder.completed")
    event = ReminderCompleted(
        aggregate_id="r1",
        plant_id="p1",
        completion_date=date(2024, 6, 1),
        next_due=date(2024, 6, 15),
        alert_registered=False,
    )

    with caplog.at_level(logging.INFO, logger="care_management.activity"):
        assert await handler.handle(event) is True

    assert handler.processed_count == 1
    assert "completed without a follow-up alert" in caplog.text


async def test_activity_handlers_cover_every_reminder_event(bus):
    register_reminder_event_handlers(bus)

    assert bus.get_stats()["event_types"] == sorted(REMINDER_EVENT_TYPES)
