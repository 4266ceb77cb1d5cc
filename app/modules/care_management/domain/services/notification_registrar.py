# 📄 File: app/modules/care_management/domain/services/notification_registrar.py
# 🧭 Purpose (Layman Explanation):
# The agreement for whoever actually puts alerts on the user's device: "schedule this alert and give
# me a ticket for it", "cancel the alert with this ticket", "drop every alert for this reminder",
# "is this ticket still going to fire?".
# 🧪 Purpose (Technical Summary):
# Abstract device notification registrar injected into the reminder service instead of a
# process-wide global handler. Implementations return opaque handles used for cancellation.
# 🔗 Dependencies:
# abc, datetime, domain alert value objects
# 🔄 Connected Modules / Calls From:
# reminder_service.py (consumer), infrastructure/external/scheduled_alert_registrar.py (implementation)

from abc import ABC, abstractmethod
from datetime import datetime

from ..models.alert_trigger import AlertContent, AlertTrigger


class NotificationRegistrar(ABC):
    """
    Abstract device notification registrar.

    Implementations may fail for permission or platform reasons; they report
    this by raising NotificationRegistrationError.
    """

    @abstractmethod
    async def register(self, trigger: AlertTrigger, content: AlertContent) -> str:
        """
        Register an alert with the device.

        Args:
            trigger: Trigger descriptor (daily, weekly or one-shot)
            content: Title, body and payload of the alert

        Returns:
            str: Opaque handle for later cancellation

        Raises:
            NotificationRegistrationError: If the alert cannot be registered
        """
        pass

    @abstractmethod
    async def cancel(self, handle: str) -> bool:
        """
        Cancel a previously registered alert.

        Returns:
            bool: True if an active alert was cancelled, False if unknown or already gone
        """
        pass

    @abstractmethod
    async def is_active(self, handle: str, now: datetime) -> bool:
        """True if the alert behind handle will still fire after now."""
        pass

    @abstractmethod
    async def cancel_for_reminder(self, reminder_id: str) -> int:
        """
        Cancel every alert still registered for a reminder, snooze alerts included.

        Returns:
            int: Number of alerts cancelled

        Raises:
            NotificationRegistrationError: If the alerts cannot be cancelled
        """
        pass
