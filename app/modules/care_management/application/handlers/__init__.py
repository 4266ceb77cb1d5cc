# 📄 File: app/modules/care_management/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the processors that carry out reminder requests.
# 🧪 Purpose (Technical Summary):
# Package exports for care management command and query handlers.
# 🔗 Dependencies:
# command_handlers, query_handlers
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.dependencies

from .command_handlers import (
    CompleteReminderCommandHandler,
    CreateReminderCommandHandler,
    DeleteReminderCommandHandler,
    SnoozeReminderCommandHandler,
    ToggleReminderCommandHandler,
    UpdateReminderCommandHandler,
)
from .query_handlers import (
    GetReminderQueryHandler,
    ListRemindersQueryHandler,
    ListScheduledAlertsQueryHandler,
)

__all__ = [
    "CreateReminderCommandHandler",
    "UpdateReminderCommandHandler",
    "CompleteReminderCommandHandler",
    "ToggleReminderCommandHandler",
    "DeleteReminderCommandHandler",
    "SnoozeReminderCommandHandler",
    "GetReminderQueryHandler",
    "ListRemindersQueryHandler",
    "ListScheduledAlertsQueryHandler",
]
