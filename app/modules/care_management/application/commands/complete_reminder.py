# 📄 File: app/modules/care_management/application/commands/complete_reminder.py
# 🧭 Purpose (Layman Explanation):
# Ticking off a care task as done, which moves the reminder to its next due date.
# 🧪 Purpose (Technical Summary):
# CQRS command for recording a completion; completion_date defaults to today in the
# configured reminder timezone.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# command_handlers.CompleteReminderCommandHandler, POST /reminders/{reminder_id}/complete

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class CompleteReminderCommand(BaseModel):
    """Command for marking a reminder completed."""

    reminder_id: str = Field(..., description="Reminder that was completed")
    completion_date: Optional[date] = Field(
        default=None,
        description="Day the task was done; defaults to today",
        examples=["2024-06-15"],
    )
