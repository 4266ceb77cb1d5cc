# 📄 File: app/background_jobs/__init__.py
# 🧭 Purpose (Layman Explanation):
# Jobs that run on their own in the background, such as the regular reminder alert check.
# 🧪 Purpose (Technical Summary):
# Celery application package; tasks live in app.background_jobs.tasks.
# 🔗 Dependencies:
# celery, celery_config
# 🔄 Connected Modules / Calls From:
# celery worker / beat command line
