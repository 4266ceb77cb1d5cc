# 📄 File: app/modules/care_management/application/commands/delete_reminder.py
# 🧭 Purpose (Layman Explanation):
# Removing a reminder for good, together with any alert still scheduled for it.
# 🧪 Purpose (Technical Summary):
# CQRS command for reminder deletion; the alert is cancelled before the row is removed.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# command_handlers.DeleteReminderCommandHandler, DELETE /reminders/{reminder_id}

from pydantic import BaseModel, Field


class DeleteReminderCommand(BaseModel):
    reminder_id: str = Field(..., description="Reminder to delete")
