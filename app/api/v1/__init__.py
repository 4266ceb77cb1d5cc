# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of our API so a later version can be added without breaking existing apps.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata, route prefixes and OpenAPI tags.
# 🔗 Dependencies:
# app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Plant Care Reminders API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module routers (care_management reminders) are mounted by router.py.
"""

from typing import Any, Dict

from app.shared.config.settings import get_settings

__version__ = "1.0.0"
__api_version__ = "v1"

API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": "stable",
    "description": "Plant Care Reminders API Version 1",
    "features": ["care_reminders", "alert_scheduling", "device_alert_sync"],
}

ROUTE_PREFIXES = {
    "reminders": "/reminders",
}

API_TAGS = [
    {
        "name": "Reminders",
        "description": "Plant care reminders: scheduling, completion and alerts",
    },
    {
        "name": "Health Check",
        "description": "Service health and readiness probes",
    },
    {
        "name": "API Info",
        "description": "API version information",
    },
]


def get_api_info() -> Dict[str, Any]:
    """API v1 information combined with the running application's settings."""
    settings = get_settings()
    return {
        **API_V1_CONFIG,
        "app_name": settings.APP_NAME,
        "app_version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "route_prefixes": ROUTE_PREFIXES,
    }


__all__ = ["API_V1_CONFIG", "ROUTE_PREFIXES", "API_TAGS", "get_api_info"]
