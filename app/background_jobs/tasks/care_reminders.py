# 📄 File: app/background_jobs/tasks/care_reminders.py
# 🧭 Purpose (Layman Explanation):
# A regular background check that makes sure every switched-on reminder really has a phone
# alert waiting, and that switched-off reminders do not.
#
# 🧪 Purpose (Technical Summary):
# Celery task running ReminderService.reconcile_alerts() in its own database session. Each run
# opens and disposes its own engine because every task invocation gets a fresh event loop.
#
# 🔗 Dependencies:
# - celery (app.background_jobs.celery_app)
# - app.shared.infrastructure.database (connection, sessions)
# - app.modules.care_management.presentation.dependencies (service construction)
#
# 🔄 Connected Modules / Calls From:
# - Celery beat ("reconcile-reminder-alerts" in celery_config.py)

import asyncio
import logging
from dataclasses import asdict
from typing import Dict

from app.background_jobs.celery_app import celery_app
from app.modules.care_management.domain.services.reminder_service import ReconciliationReport
from app.modules.care_management.presentation.dependencies import build_reminder_service
from app.shared.infrastructure.database.connection import close_database, init_database
from app.shared.infrastructure.database.session import database_session, initialize_sessions
from app.shared.utils.logging import get_logger, log_context

logger = logging.getLogger(__name__)
job_log = get_logger("background_jobs.care_reminders")


async def _reconcile() -> ReconciliationReport:
    engine = await init_database()
    try:
        initialize_sessions(engine)
        async with database_session() as session:
            return await build_reminder_service(session).reconcile_alerts()
    finally:
        await close_database()


@celery_app.task(
    name="app.background_jobs.tasks.care_reminders.reconcile_reminder_alerts",
    bind=True,
    max_retries=3,
    default_retry_delay=60,
)
def reconcile_reminder_alerts(self) -> Dict[str, int]:
    """
    Re-register missing alerts and cancel alerts of disabled reminders.

    Returns the reconciliation counts so they show up in the result backend.
    """
    with log_context(correlation_id=self.request.id):
        try:
            report = asyncio.run(_reconcile())
        except Exception as e:
            logger.error(f"Reminder alert reconciliation failed: {e}")
            raise self.retry(exc=e)

        job_log.log_business_event(
            "reminder_alerts_reconciled",
            "Reminder alert reconciliation finished",
            extra=asdict(report),
        )
        return asdict(report)
