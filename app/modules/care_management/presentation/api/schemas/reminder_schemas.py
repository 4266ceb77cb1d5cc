# 📄 File: app/modules/care_management/presentation/api/schemas/reminder_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes exactly what the mobile app must send when it creates, edits, completes or
# snoozes a reminder, so mistakes are caught before anything is saved.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for the reminders API, each converting itself into the matching
# application command. Enum fields reject unknown values with HTTP 422.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.care_management.application.commands
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.api.v1.reminders

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from app.modules.care_management.application.commands import (
    CompleteReminderCommand,
    CreateReminderCommand,
    SnoozeReminderCommand,
    UpdateReminderCommand,
)
from app.modules.care_management.application.commands.create_reminder import ReminderFieldsMixin


class ReminderCreateRequest(ReminderFieldsMixin):
    """Request body for creating a reminder."""

    def to_command(self) -> CreateReminderCommand:
        return CreateReminderCommand(**self.model_dump())


class ReminderUpdateRequest(ReminderFieldsMixin):
    """Request body for a full reminder edit. Omitted optional fields are cleared."""

    def to_command(self, reminder_id: str) -> UpdateReminderCommand:
        return UpdateReminderCommand(reminder_id=reminder_id, **self.model_dump())


class CompleteReminderRequest(BaseModel):
    completion_date: Optional[date] = Field(
        default=None,
        description="Day the task was done; defaults to today",
    )

    def to_command(self, reminder_id: str) -> CompleteReminderCommand:
        return CompleteReminderCommand(reminder_id=reminder_id, completion_date=self.completion_date)


class SnoozeReminderRequest(BaseModel):
    minutes: Optional[int] = Field(
        default=None,
        ge=1,
        le=24 * 60,
        description="Delay before the extra alert fires; defaults to the configured snooze length",
    )

    def to_command(self, reminder_id: str) -> SnoozeReminderCommand:
        return SnoozeReminderCommand(reminder_id=reminder_id, minutes=self.minutes)


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)
    timestamp: str
    request_id: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error envelope returned by the application exception handlers."""

    error: ErrorBody
