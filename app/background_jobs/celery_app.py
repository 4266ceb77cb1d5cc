# 📄 File: app/background_jobs/celery_app.py
# 🧭 Purpose (Layman Explanation):
# Starts the background worker that runs scheduled reminder maintenance.
# 🧪 Purpose (Technical Summary):
# Celery application instance configured from celery_config.get_celery_config() with the
# care reminder task module registered.
# 🔗 Dependencies:
# celery, celery_config
# 🔄 Connected Modules / Calls From:
# `celery -A app.background_jobs.celery_app worker|beat`, app.background_jobs.tasks

from celery import Celery

from celery_config import get_celery_config

celery_app = Celery("plant_care_reminders")
celery_app.config_from_object(get_celery_config())
celery_app.autodiscover_tasks(["app.background_jobs.tasks"], related_name="care_reminders")

__all__ = ["celery_app"]
