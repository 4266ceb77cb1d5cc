# 📄 File: app/modules/care_management/application/queries/list_reminders.py
# 🧭 Purpose (Layman Explanation):
# Asking for a list of reminders, like "everything due today" or "everything I missed",
# optionally for a single plant.
#
# 🧪 Purpose (Technical Summary):
# CQRS queries for the reminder overview (filtered by due-date bucket and plant) and for
# the device alert sync list.
#
# 🔗 Dependencies:
# - pydantic for query validation
# - app.modules.care_management.domain.models.reminder (ReminderFilter)
#
# 🔄 Connected Modules / Calls From:
# - query_handlers.ListRemindersQueryHandler (GET /reminders)
# - query_handlers.ListScheduledAlertsQueryHandler (GET /reminders/alerts)

"""
List Queries

Filters (relative to today in the configured reminder timezone):
- all: every reminder
- today: next_due is today
- upcoming: next_due is after today
- overdue: next_due is before today
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.modules.care_management.domain.models.reminder import ReminderFilter


class ListRemindersQuery(BaseModel):
    """Query for the reminder overview, ordered by next_due."""

    status_filter: ReminderFilter = Field(
        default=ReminderFilter.ALL,
        description="Due-date bucket to list",
    )
    plant_id: Optional[str] = Field(
        default=None,
        description="Only reminders for this plant",
    )


class ListScheduledAlertsQuery(BaseModel):
    """Query for the alerts a device should currently have scheduled."""

    reminder_id: Optional[str] = Field(
        default=None,
        description="Only alerts for this reminder",
    )
