# 📄 File: app/background_jobs/tasks/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of background jobs the worker knows how to run.
# 🧪 Purpose (Technical Summary):
# Celery task package.
# 🔗 Dependencies:
# care_reminders
# 🔄 Connected Modules / Calls From:
# app.background_jobs.celery_app (autodiscovery)
