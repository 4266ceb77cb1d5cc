# 📄 File: app/modules/care_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the reminder date calculator and the service that runs each reminder's life.
# 🧪 Purpose (Technical Summary):
# Package exports for the pure reminder scheduler, the ReminderService and the
# NotificationRegistrar interface.
# 🔗 Dependencies:
# reminder_scheduler, reminder_service, notification_registrar
# 🔄 Connected Modules / Calls From:
# Application handlers, presentation dependencies, background jobs

from .reminder_scheduler import (
    advance_due_date,
    build_alert_content,
    build_alert_trigger,
    build_snooze_trigger,
    compute_initial_due_date,
    resolve_time,
    schedule_state,
)
from .notification_registrar import NotificationRegistrar
from .reminder_service import ReconciliationReport, ReminderService, ScheduleOutcome

__all__ = [
    "compute_initial_due_date",
    "advance_due_date",
    "build_alert_trigger",
    "build_alert_content",
    "build_snooze_trigger",
    "resolve_time",
    "schedule_state",
    "NotificationRegistrar",
    "ReminderService",
    "ScheduleOutcome",
    "ReconciliationReport",
]
