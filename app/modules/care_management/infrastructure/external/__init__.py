# 📄 File: app/modules/care_management/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the connection to the phones' alert schedules.
# 🧪 Purpose (Technical Summary):
# Package export for the database-backed NotificationRegistrar.
# 🔗 Dependencies:
# scheduled_alert_registrar
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, background jobs

from .scheduled_alert_registrar import ScheduledAlertRegistrar

__all__ = ["ScheduledAlertRegistrar"]
