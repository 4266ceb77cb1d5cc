# 📄 File: app/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small everyday tools used across the reminder service, like making new IDs and
# making sure every stored time is written in the same (UTC) clock.

# 🧪 Purpose (Technical Summary):
# General helper functions for identifier generation and timezone normalization of
# datetimes crossing the persistence boundary (SQLite drops offsets, PostgreSQL keeps them).

# 🔗 Dependencies:
# - datetime, uuid

# 🔄 Connected Modules / Calls From:
# Used by: care_management repository implementation, scheduled alert registrar

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


def generate_uuid() -> str:
    """Generate a random UUID4 string."""
    return str(uuid4())


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to aware UTC.

    Naive values are assumed to already be UTC (as read back from SQLite).
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
