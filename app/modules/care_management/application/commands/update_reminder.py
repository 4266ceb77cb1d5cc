# 📄 File: app/modules/care_management/application/commands/update_reminder.py
# 🧭 Purpose (Layman Explanation):
# Changing a reminder after it was set up. The whole reminder is replaced and its next due
# date is worked out again from the new settings.
# 🧪 Purpose (Technical Summary):
# CQRS command for a full reminder edit; reuses the create command's validated fields.
# 🔗 Dependencies:
# pydantic, create_reminder.ReminderFieldsMixin
# 🔄 Connected Modules / Calls From:
# command_handlers.UpdateReminderCommandHandler, PUT /reminders/{reminder_id}

from pydantic import Field

from .create_reminder import ReminderFieldsMixin


class UpdateReminderCommand(ReminderFieldsMixin):
    """Full edit of an existing reminder; id and completion history are kept."""

    reminder_id: str = Field(..., description="Reminder to edit")

    def to_service_kwargs(self) -> dict:
        return self.model_dump(exclude={"reminder_id"})
