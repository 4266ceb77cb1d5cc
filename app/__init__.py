# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder holds the plant care reminder service and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and package metadata for the
# plant care reminder FastAPI service.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Package imports throughout the application

"""
Plant Care Reminder Service

Schedules recurring plant care tasks (watering, fertilizing, pruning, ...),
advances them when completed and keeps one device alert per active reminder.
"""

__version__ = "1.0.0"
__title__ = "Plant Care Reminders API"
__description__ = "Recurring plant care reminders with device alert scheduling"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
