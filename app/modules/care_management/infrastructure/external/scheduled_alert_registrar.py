# 📄 File: app/modules/care_management/infrastructure/external/scheduled_alert_registrar.py
# 🧭 Purpose (Layman Explanation):
# Keeps the list of alerts each phone should have scheduled. The app downloads this list and sets
# the alarms locally, and cancelled or already-fired alerts drop off the list.
#
# 🧪 Purpose (Technical Summary):
# NotificationRegistrar implementation backed by the scheduled_alerts table. It writes in the same
# AsyncSession as the reminder repository, so a reminder change and its alert registration commit
# or roll back together. Each insert runs in a SAVEPOINT, so a failed alert never poisons the session.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - app.modules.care_management.domain.services.notification_registrar (interface)
# - app.modules.care_management.infrastructure.database.models (ScheduledAlertModel)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.dependencies (request wiring)
# - app.modules.care_management.presentation.api.v1.reminders (device alert sync endpoint)
# - app.background_jobs.tasks.care_reminders (reconciliation)

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.domain.models.alert_trigger import (
    AlertContent,
    AlertTrigger,
    TriggerShape,
)
from app.modules.care_management.domain.services.notification_registrar import NotificationRegistrar
from app.modules.care_management.infrastructure.database.models import ScheduledAlertModel
from app.shared.core.exceptions import NotificationRegistrationError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc, generate_uuid, utc_now

logger = logging.getLogger(__name__)


class ScheduledAlertRegistrar(NotificationRegistrar):
    """
    Database-backed device alert registrar.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def register(self, trigger: AlertTrigger, content: AlertContent) -> str:
        reminder_id = content.payload.get("reminder_id")
        if not reminder_id:
            raise NotificationRegistrationError(
                "Alert payload is missing reminder_id",
                trigger_shape=trigger.shape.value,
            )

        alert = ScheduledAlertModel(
            handle=generate_uuid(),
            reminder_id=reminder_id,
            shape=trigger.shape.value,
            hour=trigger.hour,
            minute=trigger.minute,
            weekday=trigger.weekday.value if trigger.weekday else None,
            fire_at=ensure_utc(trigger.fire_at),
            title=content.title,
            body=content.body,
            category=content.category,
            payload=dict(content.payload),
            created_at=utc_now(),
        )

        # Inside a SAVEPOINT so a failed insert rolls back alone
        try:
            async with self._session.begin_nested():
                self._session.add(alert)
                await self._session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to store alert for reminder {reminder_id}: {e}")
            raise NotificationRegistrationError(
                "Failed to store scheduled alert",
                reminder_id=reminder_id,
                trigger_shape=trigger.shape.value,
            ) from e

        logger.debug(f"Registered {trigger.shape.value} alert {alert.handle} for reminder {reminder_id}")
        return alert.handle

    async def cancel(self, handle: str) -> bool:
        try:
            alert = await self._get(handle)
            if alert is None or alert.cancelled_at is not None:
                return False

            alert.cancelled_at = utc_now()
            await self._session.flush()
            return True

        except SQLAlchemyError as e:
            logger.error(f"Failed to cancel alert {handle}: {e}")
            raise NotificationRegistrationError(
                "Failed to cancel scheduled alert",
                details={"handle": handle},
            ) from e

    async def cancel_for_reminder(self, reminder_id: str) -> int:
        try:
            result = await self._session.execute(
                update(ScheduledAlertModel)
                .where(
                    ScheduledAlertModel.reminder_id == reminder_id,
                    ScheduledAlertModel.cancelled_at.is_(None),
                )
                .values(cancelled_at=utc_now())
                .execution_options(synchronize_session="fetch")
            )
            await self._session.flush()

        except SQLAlchemyError as e:
            logger.error(f"Failed to cancel alerts for reminder {reminder_id}: {e}")
            raise NotificationRegistrationError(
                "Failed to cancel scheduled alerts",
                reminder_id=reminder_id,
            ) from e

        if result.rowcount:
            logger.debug(f"Cancelled {result.rowcount} alert(s) for reminder {reminder_id}")
        return result.rowcount

    async def is_active(self, handle: str, now: datetime) -> bool:
        alert = await self._get(handle)
        return alert is not None and self._is_live(alert, now)

    async def list_active(self, now: datetime, reminder_id: Optional[str] = None) -> List[ScheduledAlertModel]:
        """Alerts a device should currently have scheduled, oldest first."""
        stmt = select(ScheduledAlertModel).where(ScheduledAlertModel.cancelled_at.is_(None))
        if reminder_id is not None:
            stmt = stmt.where(ScheduledAlertModel.reminder_id == reminder_id)
        stmt = stmt.order_by(ScheduledAlertModel.created_at)

        result = await self._session.execute(stmt)
        return [alert for alert in result.scalars().all() if self._is_live(alert, now)]

    async def _get(self, handle: str) -> Optional[ScheduledAlertModel]:
        result = await self._session.execute(
            select(ScheduledAlertModel).where(ScheduledAlertModel.handle == handle)
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _is_live(alert: ScheduledAlertModel, now: datetime) -> bool:
        if alert.cancelled_at is not None:
            return False
        if alert.shape == TriggerShape.ONE_SHOT.value:
            return ensure_utc(alert.fire_at) > ensure_utc(now)
        return True
