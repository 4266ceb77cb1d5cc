# 📄 File: app/modules/care_management/application/commands/toggle_reminder.py
# 🧭 Purpose (Layman Explanation):
# Switching a reminder's phone alerts off, or back on.
# 🧪 Purpose (Technical Summary):
# CQRS command flipping the enabled flag; next_due is never changed by it.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# command_handlers.ToggleReminderCommandHandler, POST /reminders/{reminder_id}/toggle

from pydantic import BaseModel, Field


class ToggleReminderCommand(BaseModel):
    reminder_id: str = Field(..., description="Reminder to enable or disable")
