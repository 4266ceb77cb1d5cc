# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package: the list of web addresses the reminder app can call.
# 🧪 Purpose (Technical Summary):
# Package initialization for the HTTP layer with API version constants shared by the
# versioned routers and middleware.
# 🔗 Dependencies:
# app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router

"""
Plant Care Reminders API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/
    │   └── logging.py       # Request ids and request/response logging
    └── v1/
        ├── __init__.py
        ├── router.py        # Main v1 router
        ├── health.py        # Health check endpoints
        └── [module routers] # care_management reminders router
"""

from app.shared.core.exceptions import (
    NotFoundError,
    PlantCareException,
    ValidationError,
)

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
SUPPORTED_VERSIONS = ["v1"]

DEFAULT_HEADERS = {
    "X-API-Version": CURRENT_VERSION,
    "X-App-Name": "PlantCareReminders",
}

__all__ = [
    "PlantCareException",
    "ValidationError",
    "NotFoundError",
    "API_PREFIX",
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
    "DEFAULT_HEADERS",
]
