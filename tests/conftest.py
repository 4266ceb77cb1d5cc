# 📄 File: tests/conftest.py
# 🧭 Purpose (Layman Explanation):
# Shared test helpers: a pretend reminder store, a pretend phone alert list and a frozen clock,
# so reminder behaviour can be checked without a real database or phone.
# 🧪 Purpose (Technical Summary):
# pytest fixtures providing in-memory ReminderRepository / NotificationRegistrar fakes, a
# failing registrar, a recording event bus and a ReminderService wired to a fixed clock.
# 🔗 Dependencies:
# pytest, pytest-asyncio, app.modules.care_management.domain
# 🔄 Connected Modules / Calls From:
# tests/test_*.py

import os
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

import pytest

os.environ.setdefault("ENVIRONMENT", "test")

from app.modules.care_management.domain.models.alert_trigger import (  # noqa: E402
    AlertContent,
    AlertTrigger,
)
from app.modules.care_management.domain.models.reminder import Reminder  # noqa: E402
from app.modules.care_management.domain.repositories.reminder_repository import (  # noqa: E402
    ReminderRepository,
)
from app.modules.care_management.domain.services.notification_registrar import (  # noqa: E402
    NotificationRegistrar,
)
from app.modules.care_management.domain.services.reminder_service import ReminderService  # noqa: E402
from app.shared.core.exceptions import (  # noqa: E402
    NotificationRegistrationError,
    ReminderNotFoundError,
)

# Saturday 1 June 2024, 09:00 UTC
FIXED_NOW = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)


class InMemoryReminderRepository(ReminderRepository):
    def __init__(self):
        self.rows: Dict[str, Reminder] = {}

    async def create(self, reminder: Reminder) -> Reminder:
        self.rows[reminder.id] = reminder.model_copy()
        return reminder.model_copy()

    async def get_by_id(self, reminder_id: str) -> Optional[Reminder]:
        stored = self.rows.get(reminder_id)
        return stored.model_copy() if stored else None

    async def update(self, reminder: Reminder) -> Reminder:
        if reminder.id not in self.rows:
            raise ReminderNotFoundError(reminder.id)
        self.rows[reminder.id] = reminder.model_copy()
        return reminder.model_copy()

    async def delete(self, reminder_id: str) -> bool:
        return self.rows.pop(reminder_id, None) is not None

    async def list_reminders(
        self,
        plant_id: Optional[str] = None,
        enabled: Optional[bool] = None,
        due_from: Optional[date] = None,
        due_until: Optional[date] = None,
    ) -> List[Reminder]:
        result = [
            r for r in self.rows.values()
            if (plant_id is None or r.plant_id == plant_id)
            and (enabled is None or r.enabled == enabled)
            and (due_from is None or r.next_due >= due_from)
            and (due_until is None or r.next_due <= due_until)
        ]
        return [r.model_copy() for r in sorted(result, key=lambda r: r.next_due)]


class InMemoryRegistrar(NotificationRegistrar):
    """Registrar keeping alerts in a dict; handles are sequential."""

    def __init__(self):
        self.alerts: Dict[str, tuple] = {}
        self.cancelled: List[str] = []
        self._counter = 0

    async def register(self, trigger: AlertTrigger, content: AlertContent) -> str:
        self._counter += 1
        handle = f"alert-{self._counter}"
        self.alerts[handle] = (trigger, content)
        return handle

    async def cancel(self, handle: str) -> bool:
        if handle not in self.alerts:
            return False
        del self.alerts[handle]
        self.cancelled.append(handle)
        return True

    async def cancel_for_reminder(self, reminder_id: str) -> int:
        handles = [
            handle for handle, (_, content) in self.alerts.items()
            if content.payload.get("reminder_id") == reminder_id
        ]
        for handle in handles:
            await self.cancel(handle)
        return len(handles)

    async def is_active(self, handle: str, now: datetime) -> bool:
        if handle not in self.alerts:
            return False
        trigger, _ = self.alerts[handle]
        return trigger.is_repeating or trigger.fire_at > now

    async def list_active(self, now: datetime, reminder_id: Optional[str] = None):
        return [
            (handle, trigger, content)
            for handle, (trigger, content) in self.alerts.items()
            if reminder_id is None or content.payload.get("reminder_id") == reminder_id
        ]


class FailingRegistrar(InMemoryRegistrar):
    """Registrar that refuses every alert, as when notification permission is denied."""

    async def register(self, trigger: AlertTrigger, content: AlertContent) -> str:
        raise NotificationRegistrationError(
            "Notification permission denied",
            reminder_id=content.payload.get("reminder_id"),
            trigger_shape=trigger.shape.value,
        )


class RecordingEventBus:
    def __init__(self):
        self.events = []

    async def publish(self, event, correlation_id=None):
        self.events.append(event)

    @property
    def event_types(self) -> List[str]:
        return [event.event_type for event in self.events]


@pytest.fixture
def repository() -> InMemoryReminderRepository:
    return InMemoryReminderRepository()


@pytest.fixture
def registrar() -> InMemoryRegistrar:
    return InMemoryRegistrar()


@pytest.fixture
def event_bus() -> RecordingEventBus:
    return RecordingEventBus()


@pytest.fixture
def clock():
    """Mutable fixed clock; tests move time by assigning clock.now."""
    class FixedClock:
        now = FIXED_NOW

        def __call__(self) -> datetime:
            return self.now

    return FixedClock()


@pytest.fixture
def service(repository, registrar, event_bus, clock) -> ReminderService:
    return ReminderService(
        repository=repository,
        registrar=registrar,
        event_bus=event_bus,
        clock=clock,
    )
