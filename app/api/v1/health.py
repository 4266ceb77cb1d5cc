# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check addresses that tell us whether the reminder service is up and whether it can
# reach its database, like a quick checkup for the system.
# 🧪 Purpose (Technical Summary):
# Health and readiness endpoints reporting database connectivity and host resource usage.
# 🔗 Dependencies:
# FastAPI, psutil, app.shared.infrastructure.database.connection, app.shared.core.event_bus,
# app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, load balancers, container orchestration probes

import logging
import platform
import sys
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.core.event_bus import current_event_bus
from app.shared.infrastructure.database.connection import database_health_check as db_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)

SERVICE_NAME = "plant-care-reminders"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Basic health check endpoint for load balancers and monitoring")
async def health_check() -> JSONResponse:
    """Simple OK status for quick health verification."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": _now(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
        }
    )


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Health check including database connectivity and system resources")
async def detailed_health_check() -> JSONResponse:
    """
    Comprehensive health check.

    The service is "unhealthy" (503) when the database is unreachable and
    "degraded" when host resources run close to their limits.
    """
    start_time = datetime.now(timezone.utc)
    overall_status = "healthy"
    components: Dict[str, Any] = {}

    db_health = await db_health_check()
    components["database"] = db_health
    if db_health["status"] != "healthy":
        overall_status = "unhealthy"

    event_bus = current_event_bus()
    if event_bus is not None:
        components["event_bus"] = event_bus.get_stats()

    system_metrics = _get_system_metrics()
    components["system"] = system_metrics
    if overall_status == "healthy" and (
        system_metrics["cpu_percent"] > 90
        or system_metrics["memory_percent"] > 90
        or system_metrics["disk_percent"] > 95
    ):
        overall_status = "degraded"

    now = datetime.now(timezone.utc)
    return JSONResponse(
        status_code=503 if overall_status == "unhealthy" else 200,
        content={
            "status": overall_status,
            "timestamp": now.isoformat(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "uptime_seconds": (now - _app_start_time).total_seconds(),
            "response_time_seconds": (now - start_time).total_seconds(),
            "components": components,
        }
    )


@health_router.get("/health/live",
                   summary="Liveness Probe",
                   description="Returns 200 while the process is running")
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Returns 200 once the database is reachable")
async def readiness_probe() -> JSONResponse:
    db_health = await db_health_check()
    if db_health["status"] == "healthy":
        return JSONResponse(status_code=200, content={"status": "ready", "timestamp": _now()})

    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "database_unhealthy", "timestamp": _now()}
    )


def _get_system_metrics() -> Dict[str, Any]:
    """Host CPU, memory and disk usage."""
    memory = psutil.virtual_memory()
    disk = psutil.disk_usage("/")
    return {
        "status": "ok",
        "cpu_percent": psutil.cpu_percent(interval=None),
        "memory_percent": memory.percent,
        "memory_available_mb": round(memory.available / (1024 * 1024), 1),
        "disk_percent": disk.percent,
        "python_version": sys.version.split()[0],
        "platform": platform.platform(),
        "timestamp": _now(),
    }
