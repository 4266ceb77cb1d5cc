# 📄 File: app/modules/care_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "action processors" for reminders: they take a request like "I watered the fern" and
# have the reminder service update the schedule and the phone alert.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers translating application commands into ReminderService calls and
# domain results into DTOs. Transactions are owned by the request-scoped session.
#
# 🔗 Dependencies:
# - app.modules.care_management.application.commands (command definitions)
# - app.modules.care_management.application.dto (result DTOs)
# - app.modules.care_management.domain.services.reminder_service (ReminderService)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.dependencies (handler construction)
# - app.modules.care_management.presentation.api.v1.reminders (endpoints invoke handlers)

__all__ = [
    "CreateReminderCommandHandler",
    "UpdateReminderCommandHandler",
    "CompleteReminderCommandHandler",
    "ToggleReminderCommandHandler",
    "DeleteReminderCommandHandler",
    "SnoozeReminderCommandHandler",
]

import logging

from app.modules.care_management.application.commands import (
    CompleteReminderCommand,
    CreateReminderCommand,
    DeleteReminderCommand,
    SnoozeReminderCommand,
    ToggleReminderCommand,
    UpdateReminderCommand,
)
from app.modules.care_management.application.dto import (
    AlertTriggerDTO,
    ReminderDTO,
    ScheduleResultDTO,
)
from app.modules.care_management.domain.services.reminder_service import (
    ReminderService,
    ScheduleOutcome,
)

logger = logging.getLogger(__name__)


class _ReminderCommandHandler:
    def __init__(self, reminder_service: ReminderService):
        self._service = reminder_service

    def _to_result(self, outcome: ScheduleOutcome) -> ScheduleResultDTO:
        return ScheduleResultDTO(
            reminder=ReminderDTO.from_domain(outcome.reminder, self._service.today()),
            alert_registered=outcome.alert_registered,
            trigger=AlertTriggerDTO.from_trigger(outcome.trigger) if outcome.trigger else None,
        )


class CreateReminderCommandHandler(_ReminderCommandHandler):
    """
    Handles reminder creation: initial due date, alert registration and event publishing.
    """

    async def handle(self, command: CreateReminderCommand) -> ScheduleResultDTO:
        logger.info(f"Creating {command.type.value} reminder for plant {command.plant_id}")
        outcome = await self._service.create_reminder(**command.to_service_kwargs())
        return self._to_result(outcome)


class UpdateReminderCommandHandler(_ReminderCommandHandler):
    async def handle(self, command: UpdateReminderCommand) -> ScheduleResultDTO:
        outcome = await self._service.update_reminder(
            command.reminder_id, **command.to_service_kwargs()
        )
        return self._to_result(outcome)


class CompleteReminderCommandHandler(_ReminderCommandHandler):
    async def handle(self, command: CompleteReminderCommand) -> ScheduleResultDTO:
        outcome = await self._service.mark_completed(command.reminder_id, command.completion_date)
        return self._to_result(outcome)


class ToggleReminderCommandHandler(_ReminderCommandHandler):
    async def handle(self, command: ToggleReminderCommand) -> ScheduleResultDTO:
        outcome = await self._service.toggle_enabled(command.reminder_id)
        return self._to_result(outcome)


class DeleteReminderCommandHandler(_ReminderCommandHandler):
    async def handle(self, command: DeleteReminderCommand) -> None:
        await self._service.delete_reminder(command.reminder_id)


class SnoozeReminderCommandHandler(_ReminderCommandHandler):
    """
    Handles "remind me later". The delay falls back to the configured
    snooze length when the command leaves it out.
    """

    def __init__(self, reminder_service: ReminderService, default_minutes: int = 60):
        super().__init__(reminder_service)
        self._default_minutes = default_minutes

    async def handle(self, command: SnoozeReminderCommand) -> ScheduleResultDTO:
        minutes = command.minutes or self._default_minutes
        outcome = await self._service.snooze_reminder(command.reminder_id, minutes)
        return self._to_result(outcome)
