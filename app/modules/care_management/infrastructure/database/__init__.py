# 📄 File: app/modules/care_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the database tables and storage code for care reminders.
# 🧪 Purpose (Technical Summary):
# Package exports for the SQLAlchemy models and the ReminderRepository implementation.
# 🔗 Dependencies:
# models, reminder_repository_impl
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, background jobs, migrations/env.py

from .models import ReminderModel, ScheduledAlertModel
from .reminder_repository_impl import ReminderRepositoryImpl

__all__ = ["ReminderModel", "ScheduledAlertModel", "ReminderRepositoryImpl"]
