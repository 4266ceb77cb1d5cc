# 📄 File: app/modules/care_management/domain/repositories/reminder_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update, and delete care reminders without saying
# which database actually stores them.
# 🧪 Purpose (Technical Summary):
# Repository interface for Reminder entities following the Repository pattern and dependency
# inversion principle; implementations live in the infrastructure layer.
# 🔗 Dependencies:
# Domain models (Reminder), typing, abc, datetime
# 🔄 Connected Modules / Calls From:
# reminder_service.py, infrastructure/database/reminder_repository_impl.py, test fakes

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from ..models.reminder import Reminder


class ReminderRepository(ABC):
    """
    Repository interface for Reminder entity data access operations.

    Implementation Notes:
    - Methods return domain entities (Reminder), not database models
    - All operations are async for non-blocking I/O
    - The scheduler never validates plant_id; neither does the repository
    """

    @abstractmethod
    async def create(self, reminder: Reminder) -> Reminder:
        """
        Persist a new reminder.

        Args:
            reminder: Reminder entity with its computed next_due

        Returns:
            The stored Reminder entity

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, reminder_id: str) -> Optional[Reminder]:
        """
        Get reminder by ID.

        Returns:
            Reminder entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, reminder: Reminder) -> Reminder:
        """
        Replace every stored field of an existing reminder (id is kept).

        Raises:
            ReminderNotFoundError: If the reminder does not exist
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def delete(self, reminder_id: str) -> bool:
        """
        Delete a reminder.

        Returns:
            True if a reminder was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def list_reminders(
        self,
        plant_id: Optional[str] = None,
        enabled: Optional[bool] = None,
        due_from: Optional[date] = None,
        due_until: Optional[date] = None,
    ) -> List[Reminder]:
        """
        List reminders ordered by next_due.

        Args:
            plant_id: Only reminders for this plant
            enabled: Only enabled (True) or disabled (False) reminders
            due_from: Inclusive lower bound on next_due
            due_until: Inclusive upper bound on next_due
        """
        pass
