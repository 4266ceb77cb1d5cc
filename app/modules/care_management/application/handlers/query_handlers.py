# 📄 File: app/modules/care_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers "show me" requests: one reminder, a filtered list of reminders, or the alerts a
# phone should have set.
# 🧪 Purpose (Technical Summary):
# CQRS query handlers reading through ReminderService and ScheduledAlertRegistrar and
# returning DTOs with schedule state computed against the service clock.
# 🔗 Dependencies:
# application queries and DTOs, ReminderService, ScheduledAlertRegistrar
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.dependencies, presentation.api.v1.reminders

__all__ = [
    "GetReminderQueryHandler",
    "ListRemindersQueryHandler",
    "ListScheduledAlertsQueryHandler",
]

import logging
from typing import List

from app.modules.care_management.application.dto import (
    ReminderDTO,
    ReminderListDTO,
    ScheduledAlertDTO,
)
from app.modules.care_management.application.queries import (
    GetReminderQuery,
    ListRemindersQuery,
    ListScheduledAlertsQuery,
)
from app.modules.care_management.domain.services.reminder_service import ReminderService
from app.modules.care_management.infrastructure.external.scheduled_alert_registrar import (
    ScheduledAlertRegistrar,
)

logger = logging.getLogger(__name__)


class GetReminderQueryHandler:
    def __init__(self, reminder_service: ReminderService):
        self._service = reminder_service

    async def handle(self, query: GetReminderQuery) -> ReminderDTO:
        reminder = await self._service.get_reminder(query.reminder_id)
        return ReminderDTO.from_domain(reminder, self._service.today())


class ListRemindersQueryHandler:
    def __init__(self, reminder_service: ReminderService):
        self._service = reminder_service

    async def handle(self, query: ListRemindersQuery) -> ReminderListDTO:
        reminders = await self._service.list_reminders(query.status_filter, query.plant_id)
        today = self._service.today()
        items = [ReminderDTO.from_domain(reminder, today) for reminder in reminders]
        logger.debug(f"Listed {len(items)} reminders with filter {query.status_filter.value}")
        return ReminderListDTO(items=items, total=len(items), status_filter=query.status_filter)


class ListScheduledAlertsQueryHandler:
    """Lists the alerts devices should currently have scheduled."""

    def __init__(self, reminder_service: ReminderService, registrar: ScheduledAlertRegistrar):
        self._service = reminder_service
        self._registrar = registrar

    async def handle(self, query: ListScheduledAlertsQuery) -> List[ScheduledAlertDTO]:
        alerts = await self._registrar.list_active(self._service.clock(), query.reminder_id)
        return [ScheduledAlertDTO.from_model(alert) for alert in alerts]
