# 📄 File: app/modules/care_management/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects every "show me" request about reminders.
# 🧪 Purpose (Technical Summary):
# Package exports for the care management CQRS queries.
# 🔗 Dependencies:
# query modules in this package
# 🔄 Connected Modules / Calls From:
# application handlers, presentation API

from .get_reminder import GetReminderQuery
from .list_reminders import ListRemindersQuery, ListScheduledAlertsQuery

__all__ = ["GetReminderQuery", "ListRemindersQuery", "ListScheduledAlertsQuery"]
