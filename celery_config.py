# 📄 File: celery_config.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for our background task system (Celery), which regularly double-checks that
# every active reminder still has a phone alert waiting for it.
#
# 🧪 Purpose (Technical Summary):
# Celery configuration for queue routing, worker limits and the beat schedule, with Redis as
# message broker and result backend. Environment-specific subclasses are picked by
# get_celery_config().
#
# 🔗 Dependencies:
# - celery / kombu
# - Redis server (message broker)
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app/background_jobs/celery_app.py
# - Docker Compose services (celery worker and beat)

from datetime import timedelta

from kombu import Queue

from app.shared.config.settings import get_settings

settings = get_settings()

RECONCILE_TASK = "app.background_jobs.tasks.care_reminders.reconcile_reminder_alerts"


# =============================================================================
# CELERY CONFIGURATION CLASS
# =============================================================================

class CeleryConfig:
    """
    Celery configuration class for the reminder service.

    Defines settings for task execution, routing and scheduling.
    """

    # =========================================================================
    # BROKER AND BACKEND SETTINGS
    # =========================================================================

    broker_url = settings.CELERY_BROKER_URL
    result_backend = settings.CELERY_RESULT_BACKEND

    broker_connection_retry_on_startup = True
    broker_connection_max_retries = 10
    broker_heartbeat = 30

    result_expires = timedelta(hours=24)

    # =========================================================================
    # TASK SETTINGS
    # =========================================================================

    task_serializer = "json"
    result_serializer = "json"
    accept_content = ["json"]
    timezone = "UTC"
    enable_utc = True

    task_default_queue = "default"

    # Reconciliation is idempotent, so a lost worker's task can simply run again
    task_time_limit = 300
    task_soft_time_limit = 240
    task_acks_late = True
    task_reject_on_worker_lost = True
    worker_prefetch_multiplier = 1

    # =========================================================================
    # QUEUE DEFINITIONS
    # =========================================================================

    task_routes = {
        "app.background_jobs.tasks.care_reminders.*": {"queue": "care_reminders"},
    }

    task_queues = (
        Queue("care_reminders", routing_key="care_reminders"),
        Queue("default", routing_key="default"),
    )

    # =========================================================================
    # WORKER SETTINGS
    # =========================================================================

    worker_max_tasks_per_child = 1000
    worker_hijack_root_logger = False
    worker_log_format = "[%(asctime)s: %(levelname)s/%(processName)s] %(message)s"
    worker_task_log_format = (
        "[%(asctime)s: %(levelname)s/%(processName)s][%(task_name)s(%(task_id)s)] %(message)s"
    )

    # =========================================================================
    # BEAT SCHEDULER SETTINGS
    # =========================================================================

    beat_schedule = {
        "reconcile-reminder-alerts": {
            "task": RECONCILE_TASK,
            "schedule": timedelta(minutes=settings.REMINDER_RECONCILE_INTERVAL_MINUTES),
            "options": {"queue": "care_reminders"},
        },
    }

    beat_scheduler = "celery.beat:PersistentScheduler"
    beat_schedule_filename = "celerybeat-schedule"

    task_track_started = True
    worker_send_task_events = True


# =============================================================================
# ENVIRONMENT-SPECIFIC CONFIGURATIONS
# =============================================================================

class DevelopmentCeleryConfig(CeleryConfig):
    worker_log_level = "DEBUG"


class ProductionCeleryConfig(CeleryConfig):
    worker_log_level = "INFO"
    worker_max_tasks_per_child = 5000
    broker_use_ssl = True
    redis_backend_use_ssl = True


class TestCeleryConfig(CeleryConfig):
    """Runs tasks inline without a broker."""
    task_always_eager = True
    task_eager_propagates = True
    broker_url = "memory://"
    result_backend = "cache+memory://"


# =============================================================================
# CONFIG FACTORY
# =============================================================================

def get_celery_config() -> CeleryConfig:
    """
    Get the Celery configuration for the current environment.

    Returns:
        CeleryConfig: Configuration instance for current environment
    """
    config_map = {
        "development": DevelopmentCeleryConfig,
        "staging": ProductionCeleryConfig,
        "production": ProductionCeleryConfig,
        "test": TestCeleryConfig,
    }
    return config_map.get(settings.ENVIRONMENT, DevelopmentCeleryConfig)()
