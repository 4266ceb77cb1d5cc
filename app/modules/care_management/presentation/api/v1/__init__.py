# 📄 File: app/modules/care_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the reminder endpoints.
# 🧪 Purpose (Technical Summary):
# Exports the v1 reminders router.
# 🔗 Dependencies:
# reminders
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from .reminders import reminders_router

__all__ = ["reminders_router"]
