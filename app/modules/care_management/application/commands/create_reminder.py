# 📄 File: app/modules/care_management/application/commands/create_reminder.py
# 🧭 Purpose (Layman Explanation):
# Everything needed to set up a new care reminder for a plant: what to do, how often,
# when to start, and what time of day the phone should buzz.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for reminder creation. Field validation mirrors the Reminder domain model so
# bad input is rejected before the schedule is computed.
#
# 🔗 Dependencies:
# - pydantic for command validation
# - app.modules.care_management.domain.models.reminder (enums and time validation)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.application.handlers.command_handlers (CreateReminderCommandHandler)
# - app.modules.care_management.presentation.api.v1.reminders (POST /reminders)

"""
Create Reminder Command

Fields:
- plant_id / plant_name: which plant the reminder is for
- type: watering, fertilizing, pruning, rotation, repotting, other
- frequency: named recurrence interval
- start_date: date the first due date is derived from
- preferred_day_of_week: weekday anchor for weekly and biweekly reminders
- preferred_time: morning/afternoon/evening or a 24h HH:MM clock time
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.modules.care_management.domain.models.reminder import (
    Frequency,
    ReminderType,
    Weekday,
    is_valid_preferred_time,
)


class ReminderFieldsMixin(BaseModel):
    """Fields shared by the create and full-edit commands."""

    plant_id: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Identifier of the plant this reminder belongs to",
        examples=["plant-42"],
    )
    plant_name: Optional[str] = Field(
        default=None,
        max_length=120,
        description="Plant display name used in alert text",
        examples=["Monstera"],
    )
    type: ReminderType = Field(
        ...,
        description="Care task kind",
        examples=[ReminderType.WATERING],
    )
    frequency: Frequency = Field(
        ...,
        description="Recurrence interval",
        examples=[Frequency.WEEKLY],
    )
    start_date: date = Field(
        ...,
        description="Date the first due date is derived from",
        examples=["2024-06-01"],
    )
    preferred_day_of_week: Optional[Weekday] = Field(
        default=None,
        description="Weekday anchor, honored for weekly and biweekly reminders",
        examples=[Weekday.SATURDAY],
    )
    preferred_time: Optional[str] = Field(
        default=None,
        description="morning, afternoon, evening or HH:MM (24h)",
        examples=["morning", "07:30"],
    )
    enabled: bool = Field(
        default=True,
        description="Whether alerts are active",
    )

    @field_validator("preferred_time")
    @classmethod
    def validate_preferred_time(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().lower()
        if not is_valid_preferred_time(v):
            raise ValueError("preferred_time must be morning, afternoon, evening or HH:MM")
        return v

    def to_service_kwargs(self) -> dict:
        return self.model_dump()


class CreateReminderCommand(ReminderFieldsMixin):
    """Command for creating a new care reminder."""
