# 📄 File: app/modules/care_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the shapes of reminder API requests.
# 🧪 Purpose (Technical Summary):
# Package exports for reminder request schemas.
# 🔗 Dependencies:
# reminder_schemas
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.reminders

from .reminder_schemas import (
    CompleteReminderRequest,
    ErrorResponse,
    ReminderCreateRequest,
    ReminderUpdateRequest,
    SnoozeReminderRequest,
)

__all__ = [
    "ReminderCreateRequest",
    "ReminderUpdateRequest",
    "CompleteReminderRequest",
    "SnoozeReminderRequest",
    "ErrorResponse",
]
