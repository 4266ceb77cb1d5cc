# 📄 File: app/modules/care_management/presentation/api/v1/reminders.py
# 🧭 Purpose (Layman Explanation):
# The web addresses the mobile app calls to manage plant care reminders: set one up, see
# what is due, tick a task off, pause or snooze alerts, edit and delete.
#
# 🧪 Purpose (Technical Summary):
# FastAPI reminder endpoints mapping HTTP requests onto CQRS commands and queries. Domain
# exceptions propagate to the application-level PlantCareException handler, which renders
# the standard error envelope.
#
# 🔗 Dependencies:
# - FastAPI router, status codes, Query parameters
# - app.modules.care_management.application (commands, queries, DTOs, handlers)
# - app.modules.care_management.presentation.api.schemas.reminder_schemas
# - app.modules.care_management.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/reminders)
# - Mobile app reminder screens and background alert sync

"""
Reminders API Endpoints

Endpoints:
- POST /: Create a reminder and register its alert
- GET /: List reminders (status=all|today|upcoming|overdue, plant_id)
- GET /alerts: Active scheduled alerts for device sync
- GET /{reminder_id}: Get one reminder
- PUT /{reminder_id}: Full edit, next due date recomputed
- DELETE /{reminder_id}: Delete reminder and cancel its alert
- POST /{reminder_id}/complete: Mark completed, advance next due date
- POST /{reminder_id}/toggle: Enable or disable alerts
- POST /{reminder_id}/snooze: One extra alert later ("remind me later")
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status

from app.modules.care_management.application.commands import (
    DeleteReminderCommand,
    ToggleReminderCommand,
)
from app.modules.care_management.application.dto import (
    ReminderDTO,
    ReminderListDTO,
    ScheduledAlertDTO,
    ScheduleResultDTO,
)
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
from app.modules.care_management.application.queries import (
    GetReminderQuery,
    ListRemindersQuery,
    ListScheduledAlertsQuery,
)
from app.modules.care_management.domain.models.reminder import ReminderFilter
from app.modules.care_management.presentation.api.schemas.reminder_schemas import (
    CompleteReminderRequest,
    ErrorResponse,
    ReminderCreateRequest,
    ReminderUpdateRequest,
    SnoozeReminderRequest,
)
from app.modules.care_management.presentation.dependencies import (
    get_complete_reminder_handler,
    get_create_reminder_handler,
    get_delete_reminder_handler,
    get_list_alerts_handler,
    get_list_reminders_handler,
    get_reminder_query_handler,
    get_snooze_reminder_handler,
    get_toggle_reminder_handler,
    get_update_reminder_handler,
)

logger = logging.getLogger(__name__)

reminders_router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Reminder not found"}}
INVALID = {422: {"model": ErrorResponse, "description": "Invalid reminder fields"}}


@reminders_router.post(
    "/",
    response_model=ScheduleResultDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a care reminder",
    description="Create a reminder, compute its first due date and register its alert",
    responses={**INVALID},
)
async def create_reminder(
    request: ReminderCreateRequest,
    handler: CreateReminderCommandHandler = Depends(get_create_reminder_handler),
) -> ScheduleResultDTO:
    return await handler.handle(request.to_command())


@reminders_router.get(
    "/",
    response_model=ReminderListDTO,
    summary="List reminders",
    description="List reminders ordered by next due date, optionally filtered",
)
async def list_reminders(
    status_filter: ReminderFilter = Query(
        ReminderFilter.ALL, alias="status", description="all, today, upcoming or overdue"
    ),
    plant_id: Optional[str] = Query(None, description="Only reminders for this plant"),
    handler: ListRemindersQueryHandler = Depends(get_list_reminders_handler),
) -> ReminderListDTO:
    return await handler.handle(ListRemindersQuery(status_filter=status_filter, plant_id=plant_id))


@reminders_router.get(
    "/alerts",
    response_model=List[ScheduledAlertDTO],
    summary="Active scheduled alerts",
    description="Alerts a device should currently have scheduled locally",
)
async def list_scheduled_alerts(
    reminder_id: Optional[str] = Query(None, description="Only alerts for this reminder"),
    handler: ListScheduledAlertsQueryHandler = Depends(get_list_alerts_handler),
) -> List[ScheduledAlertDTO]:
    return await handler.handle(ListScheduledAlertsQuery(reminder_id=reminder_id))


@reminders_router.get(
    "/{reminder_id}",
    response_model=ReminderDTO,
    summary="Get a reminder",
    responses={**NOT_FOUND},
)
async def get_reminder(
    reminder_id: str,
    handler: GetReminderQueryHandler = Depends(get_reminder_query_handler),
) -> ReminderDTO:
    return await handler.handle(GetReminderQuery(reminder_id=reminder_id))


@reminders_router.put(
    "/{reminder_id}",
    response_model=ScheduleResultDTO,
    summary="Edit a reminder",
    description="Replace a reminder's fields; the next due date is recomputed",
    responses={**NOT_FOUND, **INVALID},
)
async def update_reminder(
    reminder_id: str,
    request: ReminderUpdateRequest,
    handler: UpdateReminderCommandHandler = Depends(get_update_reminder_handler),
) -> ScheduleResultDTO:
    return await handler.handle(request.to_command(reminder_id))


@reminders_router.delete(
    "/{reminder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a reminder",
    description="Cancel the reminder's alert and delete it",
    responses={**NOT_FOUND},
)
async def delete_reminder(
    reminder_id: str,
    handler: DeleteReminderCommandHandler = Depends(get_delete_reminder_handler),
) -> Response:
    await handler.handle(DeleteReminderCommand(reminder_id=reminder_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@reminders_router.post(
    "/{reminder_id}/complete",
    response_model=ScheduleResultDTO,
    summary="Mark a reminder completed",
    description="Record a completion and move the reminder to its next due date",
    responses={**NOT_FOUND},
)
async def complete_reminder(
    reminder_id: str,
    request: Optional[CompleteReminderRequest] = Body(None),
    handler: CompleteReminderCommandHandler = Depends(get_complete_reminder_handler),
) -> ScheduleResultDTO:
    request = request or CompleteReminderRequest()
    return await handler.handle(request.to_command(reminder_id))


@reminders_router.post(
    "/{reminder_id}/toggle",
    response_model=ScheduleResultDTO,
    summary="Enable or disable a reminder",
    responses={**NOT_FOUND},
)
async def toggle_reminder(
    reminder_id: str,
    handler: ToggleReminderCommandHandler = Depends(get_toggle_reminder_handler),
) -> ScheduleResultDTO:
    return await handler.handle(ToggleReminderCommand(reminder_id=reminder_id))


@reminders_router.post(
    "/{reminder_id}/snooze",
    response_model=ScheduleResultDTO,
    summary="Snooze a reminder",
    description="Register one extra alert later without changing the next due date",
    responses={**NOT_FOUND, 422: {"model": ErrorResponse, "description": "Reminder is disabled"}},
)
async def snooze_reminder(
    reminder_id: str,
    request: Optional[SnoozeReminderRequest] = Body(None),
    handler: SnoozeReminderCommandHandler = Depends(get_snooze_reminder_handler),
) -> ScheduleResultDTO:
    request = request or SnoozeReminderRequest()
    return await handler.handle(request.to_command(reminder_id))
