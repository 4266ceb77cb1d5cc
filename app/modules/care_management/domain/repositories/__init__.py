# 📄 File: app/modules/care_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the storage contract for care reminders.
# 🧪 Purpose (Technical Summary):
# Package export for the ReminderRepository interface.
# 🔗 Dependencies:
# reminder_repository
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from .reminder_repository import ReminderRepository

__all__ = ["ReminderRepository"]
