# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools every part of the reminder service
# uses, like settings, database connections, errors and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, infrastructure and cross-cutting concerns
# used by the care_management module.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management
# - app.main, background jobs

"""
Shared Kernel

- Configuration management (pydantic-settings)
- Database engine and session management
- Exception hierarchy and in-process event bus
- Structured JSON logging and small helpers
"""

__all__ = []
