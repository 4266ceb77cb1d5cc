# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the reminder service how to connect to its database,
# its background job broker, and which defaults to use for reminders.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and the declarative database base.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (declarative base and naming convention)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database declarative base and constraint naming
- Reminder scheduling defaults
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
