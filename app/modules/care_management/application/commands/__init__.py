# 📄 File: app/modules/care_management/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects every "do something to a reminder" request in one place.
# 🧪 Purpose (Technical Summary):
# Package exports for the care management CQRS commands.
# 🔗 Dependencies:
# command modules in this package
# 🔄 Connected Modules / Calls From:
# application handlers, presentation API

from .complete_reminder import CompleteReminderCommand
from .create_reminder import CreateReminderCommand
from .delete_reminder import DeleteReminderCommand
from .snooze_reminder import SnoozeReminderCommand
from .toggle_reminder import ToggleReminderCommand
from .update_reminder import UpdateReminderCommand

__all__ = [
    "CreateReminderCommand",
    "UpdateReminderCommand",
    "CompleteReminderCommand",
    "ToggleReminderCommand",
    "DeleteReminderCommand",
    "SnoozeReminderCommand",
]
