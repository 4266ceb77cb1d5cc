# 📄 File: app/modules/care_management/application/queries/get_reminder.py
# 🧭 Purpose (Layman Explanation):
# Asking for one reminder's details.
# 🧪 Purpose (Technical Summary):
# CQRS query for a single reminder by id.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# query_handlers.GetReminderQueryHandler, GET /reminders/{reminder_id}

from pydantic import BaseModel, Field


class GetReminderQuery(BaseModel):
    reminder_id: str = Field(..., description="Reminder to fetch")
