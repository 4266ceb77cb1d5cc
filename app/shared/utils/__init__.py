# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A small toolbox shared across the service: logging setup plus id and time helpers.

# 🧪 Purpose (Technical Summary):
# Re-exports the structured logging entry points and the UTC / id helpers.

# 🔗 Dependencies:
# - logging: Structured JSON logging (python-json-logger)
# - helpers: id and UTC datetime helpers

# 🔄 Connected Modules / Calls From:
# app.main, repositories, the alert registrar, background jobs

from .helpers import ensure_utc, generate_uuid, utc_now
from .logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "generate_uuid",
    "utc_now",
    "ensure_utc",
]
