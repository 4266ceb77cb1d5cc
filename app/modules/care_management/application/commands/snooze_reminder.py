# 📄 File: app/modules/care_management/application/commands/snooze_reminder.py
# 🧭 Purpose (Layman Explanation):
# "Remind me later": asks for one extra alert a little while from now without moving
# the reminder's due date.
# 🧪 Purpose (Technical Summary):
# CQRS command registering an extra one-shot alert. The delay defaults to the
# REMINDER_SNOOZE_MINUTES setting when omitted.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# command_handlers.SnoozeReminderCommandHandler, POST /reminders/{reminder_id}/snooze

from typing import Optional

from pydantic import BaseModel, Field


class SnoozeReminderCommand(BaseModel):
    """Command for snoozing a reminder's alert."""

    reminder_id: str = Field(..., description="Reminder to snooze")
    minutes: Optional[int] = Field(
        default=None,
        ge=1,
        le=24 * 60,
        description="Delay before the extra alert fires",
        examples=[60],
    )
