# 📄 File: app/modules/care_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the care reminder system that tells plant owners when to water, fertilize, prune,
# rotate or repot each plant, and keeps their phone alerts in step.
# 🧪 Purpose (Technical Summary):
# Package initialization for the care management module implementing domain-driven design with
# a pure reminder scheduler at its core and CQRS-style application handlers around it.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, python-dateutil, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main lifespan, app.background_jobs.tasks.care_reminders

"""
Care Management Module

This module handles recurring plant-care reminders:
- Reminder creation and full edits (initial due date resolution)
- Completion tracking (calendar-aware next due date)
- Enabling / disabling reminders without losing their schedule
- Device alert triggers (daily, weekly or one-shot)
- Snoozing and periodic alert reconciliation

Architecture follows Domain-Driven Design:
- Domain: Reminder entity, pure scheduler, lifecycle service, events
- Application: Commands, queries, DTOs and handlers
- Infrastructure: SQLAlchemy persistence and the scheduled-alert registrar
- Presentation: API endpoints and request/response schemas
"""

__version__ = "1.0.0"
