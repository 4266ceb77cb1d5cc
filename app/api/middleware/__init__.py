# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the checkpoints every request passes through before reaching the reminder endpoints.
# 🧪 Purpose (Technical Summary):
# Middleware package with shared path-exclusion configuration.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.api.middleware.logging, app.main

from typing import Tuple

# Paths probed often enough that logging them only adds noise
EXCLUDED_PATHS: Tuple[str, ...] = (
    "/api/v1/health/live",
    "/api/v1/health/ready",
    "/favicon.ico",
)


def should_exclude_path(path: str) -> bool:
    return path in EXCLUDED_PATHS


__all__ = ["EXCLUDED_PATHS", "should_exclude_path"]
