# 📄 File: app/modules/care_management/infrastructure/database/reminder_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for care reminders, like saving new reminders,
# finding them, updating their next due date, and deleting them.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the ReminderRepository interface using SQLAlchemy async ORM,
# mapping Reminder domain entities to ReminderModel rows with error wrapping and logging.
#
# 🔗 Dependencies:
# - app.modules.care_management.domain.repositories.reminder_repository (interface)
# - app.modules.care_management.domain.models.reminder (domain model)
# - app.modules.care_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.dependencies (request wiring)
# - app.background_jobs.tasks.care_reminders (reconciliation)

"""
Reminder Repository Implementation

Provides the concrete implementation of the ReminderRepository interface
using SQLAlchemy. Writes are flushed, not committed: the surrounding
session (one per request or job) commits them together with any alert
rows registered in the same unit of work.
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.domain.models.reminder import Reminder
from app.modules.care_management.domain.repositories.reminder_repository import ReminderRepository
from app.modules.care_management.infrastructure.database.models import ReminderModel
from app.shared.core.exceptions import ReminderNotFoundError, RepositoryError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc

logger = logging.getLogger(__name__)


class ReminderRepositoryImpl(ReminderRepository):
    """
    SQLAlchemy implementation of the ReminderRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        """
        Initialize the reminder repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def create(self, reminder: Reminder) -> Reminder:
        try:
            model = self._domain_to_model(reminder, ReminderModel())
            self._session.add(model)
            await self._session.flush()

            logger.debug(f"Created reminder with ID: {model.id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during reminder creation: {e}")
            raise RepositoryError(
                "Failed to create reminder", operation="create", entity="reminder"
            ) from e

    async def get_by_id(self, reminder_id: str) -> Optional[Reminder]:
        try:
            model = await self._get_model(reminder_id)
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving reminder {reminder_id}: {e}")
            raise RepositoryError(
                "Failed to retrieve reminder", operation="get_by_id", entity="reminder"
            ) from e

    async def update(self, reminder: Reminder) -> Reminder:
        try:
            model = await self._get_model(reminder.id)
            if model is None:
                raise ReminderNotFoundError(reminder.id)

            self._domain_to_model(reminder, model)
            await self._session.flush()

            logger.debug(f"Updated reminder {reminder.id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating reminder {reminder.id}: {e}")
            raise RepositoryError(
                "Failed to update reminder", operation="update", entity="reminder"
            ) from e

    async def delete(self, reminder_id: str) -> bool:
        try:
            result = await self._session.execute(
                delete(ReminderModel).where(ReminderModel.id == reminder_id)
            )
            await self._session.flush()
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting reminder {reminder_id}: {e}")
            raise RepositoryError(
                "Failed to delete reminder", operation="delete", entity="reminder"
            ) from e

    async def list_reminders(
        self,
        plant_id: Optional[str] = None,
        enabled: Optional[bool] = None,
        due_from: Optional[date] = None,
        due_until: Optional[date] = None,
    ) -> List[Reminder]:
        try:
            stmt = select(ReminderModel)
            if plant_id is not None:
                stmt = stmt.where(ReminderModel.plant_id == plant_id)
            if enabled is not None:
                stmt = stmt.where(ReminderModel.enabled == enabled)
            if due_from is not None:
                stmt = stmt.where(ReminderModel.next_due >= due_from)
            if due_until is not None:
                stmt = stmt.where(ReminderModel.next_due <= due_until)
            stmt = stmt.order_by(ReminderModel.next_due, ReminderModel.created_at)

            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing reminders: {e}")
            raise RepositoryError(
                "Failed to list reminders", operation="list", entity="reminder"
            ) from e

    # =========================================================================
    # MAPPING
    # =========================================================================

    async def _get_model(self, reminder_id: str) -> Optional[ReminderModel]:
        result = await self._session.execute(
            select(ReminderModel).where(ReminderModel.id == reminder_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _domain_to_model(reminder: Reminder, model: ReminderModel) -> ReminderModel:
        model.id = reminder.id
        model.plant_id = reminder.plant_id
        model.plant_name = reminder.plant_name
        model.reminder_type = reminder.type.value
        model.frequency = reminder.frequency.value
        model.start_date = reminder.start_date
        model.preferred_day_of_week = (
            reminder.preferred_day_of_week.value if reminder.preferred_day_of_week else None
        )
        model.preferred_time = reminder.preferred_time
        model.next_due = reminder.next_due
        model.last_completed = reminder.last_completed
        model.enabled = reminder.enabled
        model.notification_handle = reminder.notification_handle
        model.created_at = ensure_utc(reminder.created_at)
        model.updated_at = ensure_utc(reminder.updated_at)
        return model

    @staticmethod
    def _model_to_domain(model: ReminderModel) -> Reminder:
        return Reminder(
            id=model.id,
            plant_id=model.plant_id,
            plant_name=model.plant_name,
            type=model.reminder_type,
            frequency=model.frequency,
            start_date=model.start_date,
            preferred_day_of_week=model.preferred_day_of_week,
            preferred_time=model.preferred_time,
            next_due=model.next_due,
            last_completed=model.last_completed,
            enabled=model.enabled,
            notification_handle=model.notification_handle,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
