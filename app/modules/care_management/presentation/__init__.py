# 📄 File: app/modules/care_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of care reminders that the mobile app talks to.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, request schemas and dependency wiring.
# 🔗 Dependencies:
# FastAPI, application handlers
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
