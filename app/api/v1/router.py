# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 requests: reminder requests go to the reminder handlers
# and health checks go to the health endpoints.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining the health router and the care management
# reminders router under their route prefixes.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.care_management.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.modules.care_management.presentation.api.v1 import reminders_router

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])

api_v1_router.include_router(
    reminders_router,
    prefix=ROUTE_PREFIXES["reminders"],
    tags=["Reminders"],
)


# =========================================================================
# API V1 INFO ENDPOINT
# =========================================================================

@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="Get API v1 version information and available endpoints",
                   tags=["API Info"])
async def api_v1_info() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            **get_api_info(),
            "endpoints": {
                "health_check": "/health",
                "detailed_health": "/health/detailed",
                "reminders": ROUTE_PREFIXES["reminders"],
                "device_alerts": f"{ROUTE_PREFIXES['reminders']}/alerts",
            },
            "documentation": {
                "openapi_schema": "/openapi.json",
                "swagger_ui": "/docs",
            },
        }
    )


__all__ = ["api_v1_router"]
