# 📄 File: app/modules/care_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Puts together, for each web request, the pieces a reminder needs: the database, the phone
# alert list, the event system and the clock in the right timezone.
#
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies building the ReminderService and the application
# handlers. The repository and the registrar resolve the same request-scoped AsyncSession,
# so reminder writes and alert writes commit as one transaction.
#
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.shared.core.event_bus,
# app.shared.infrastructure.database.session, care_management infrastructure and handlers
#
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.api.v1.reminders, tests (dependency_overrides)

import logging
from datetime import datetime
from typing import Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.application.handlers import (
    CompleteReminderCommandHandler,
    CreateReminderCommandHandler,
    DeleteReminderCommandHandler,
    GetReminderQueryHandler,
    ListRemindersQueryHandler,
    ListScheduledAlertsQueryHandler,
    SnoozeReminderCommandHandler,
    ToggleReminderCommandHandler,
    UpdateReminderCommandHandler,
)
from app.modules.care_management.domain.repositories.reminder_repository import ReminderRepository
from app.modules.care_management.domain.services.reminder_service import Clock, ReminderService
from app.modules.care_management.infrastructure.database.reminder_repository_impl import (
    ReminderRepositoryImpl,
)
from app.modules.care_management.infrastructure.external.scheduled_alert_registrar import (
    ScheduledAlertRegistrar,
)
from app.shared.config.settings import get_settings
from app.shared.core.event_bus import EventBus, get_event_bus
from app.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


# =============================================================================
# INFRASTRUCTURE
# =============================================================================

def get_reminder_clock() -> Clock:
    """Clock in the configured reminder timezone; "today" is derived from it."""
    tz = get_settings().reminder_tz
    return lambda: datetime.now(tz)


async def get_reminder_event_bus() -> Optional[EventBus]:
    return await get_event_bus()


def get_reminder_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ReminderRepository:
    return ReminderRepositoryImpl(session)


def get_alert_registrar(
    session: AsyncSession = Depends(get_db_session),
) -> ScheduledAlertRegistrar:
    return ScheduledAlertRegistrar(session)


def get_reminder_service(
    repository: ReminderRepository = Depends(get_reminder_repository),
    registrar: ScheduledAlertRegistrar = Depends(get_alert_registrar),
    event_bus: Optional[EventBus] = Depends(get_reminder_event_bus),
    clock: Clock = Depends(get_reminder_clock),
) -> ReminderService:
    return ReminderService(
        repository=repository,
        registrar=registrar,
        event_bus=event_bus,
        clock=clock,
        alert_category=get_settings().REMINDER_ALERT_CATEGORY,
    )


# =============================================================================
# HANDLERS
# =============================================================================

def get_create_reminder_handler(
    service: ReminderService = Depends(get_reminder_service),
) -> CreateReminderCommandHandler:
    return CreateReminderCommandHandler(service)


def get_update_reminder_handler(
    service: ReminderService = Depends(get_reminder_service),
) -> UpdateReminderCommandHandler:
    return UpdateReminderCommandHandler(service)


def get_complete_reminder_handler(
    service: ReminderService = Depends(get_reminder_service),
) -> CompleteReminderCommandHandler:
    return CompleteReminderCommandHandler(service)


def get_toggle_reminder_handler(
    service: ReminderService = Depends(get_reminder_service),
) -> ToggleReminderCommandHandler:
    return ToggleReminderCommandHandler(service)


def get_delete_reminder_handler(
    service: ReminderService = Depends(get_reminder_service),
) -> DeleteReminderCommandHandler:
    return DeleteReminderCommandHandler(service)


def get_snooze_reminder_handler(
    service: ReminderService = Depends(get_reminder_service),
) -> SnoozeReminderCommandHandler:
    return SnoozeReminderCommandHandler(
        service, default_minutes=get_settings().REMINDER_SNOOZE_MINUTES
    )


def get_reminder_query_handler(
    service: ReminderService = Depends(get_reminder_service),
) -> GetReminderQueryHandler:
    return GetReminderQueryHandler(service)


def get_list_reminders_handler(
    service: ReminderService = Depends(get_reminder_service),
) -> ListRemindersQueryHandler:
    return ListRemindersQueryHandler(service)


def get_list_alerts_handler(
    service: ReminderService = Depends(get_reminder_service),
    registrar: ScheduledAlertRegistrar = Depends(get_alert_registrar),
) -> ListScheduledAlertsQueryHandler:
    return ListScheduledAlertsQueryHandler(service, registrar)


# =============================================================================
# OUTSIDE REQUESTS
# =============================================================================

def build_reminder_service(
    session: AsyncSession,
    event_bus: Optional[EventBus] = None,
) -> ReminderService:
    """ReminderService over an explicit session, for background jobs and scripts."""
    return get_reminder_service(
        repository=ReminderRepositoryImpl(session),
        registrar=ScheduledAlertRegistrar(session),
        event_bus=event_bus,
        clock=get_reminder_clock(),
    )
