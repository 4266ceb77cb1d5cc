# 📄 File: app/modules/care_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how care reminders and the phone alerts scheduled for them are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the care_reminders and scheduled_alerts tables, with check
# constraints mirroring the domain enumerations and indexes for due-date queries.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base with naming convention)
#
# 🔄 Connected Modules / Calls From:
# - reminder_repository_impl.py (CRUD operations)
# - infrastructure/external/scheduled_alert_registrar.py (alert rows)
# - migrations/env.py and migrations/versions (schema generation)

"""
SQLAlchemy Models for Care Management

Models:
- ReminderModel: one recurring care task for one plant
- ScheduledAlertModel: one device alert registered for a reminder

Identifiers are UUID strings so the same schema runs on PostgreSQL and SQLite.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)

from app.shared.config.database import DatabaseBase

REMINDER_TYPES = ("watering", "fertilizing", "pruning", "rotation", "repotting", "other")
FREQUENCIES = (
    "daily", "every3days", "weekly", "biweekly", "monthly",
    "quarterly", "sixmonthly", "yearly", "biannually",
)
WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
TRIGGER_SHAPES = ("daily", "weekly", "one_shot")


def _in_list(column: str, values) -> str:
    return f"{column} IN ({', '.join(repr(v) for v in values)})"


# =============================================================================
# REMINDER MODEL
# =============================================================================

class ReminderModel(DatabaseBase):
    """
    SQLAlchemy model for care reminders.

    next_due is the only scheduling state; everything else describes the
    recurrence rule and its display text.
    """
    __tablename__ = "care_reminders"

    id = Column(String(36), primary_key=True, comment="Reminder UUID")
    plant_id = Column(String(64), nullable=False, index=True, comment="External plant reference")
    plant_name = Column(String(120), nullable=True, comment="Plant display name used in alert text")

    reminder_type = Column(String(20), nullable=False, comment="Care task kind")
    frequency = Column(String(20), nullable=False, comment="Recurrence interval name")
    start_date = Column(Date, nullable=False, comment="Date the first due date is derived from")
    preferred_day_of_week = Column(String(10), nullable=True, comment="Weekday for weekly/biweekly")
    preferred_time = Column(String(10), nullable=True, comment="morning/afternoon/evening or HH:MM")

    next_due = Column(Date, nullable=False, comment="Next due date")
    last_completed = Column(Date, nullable=True, comment="Date of the latest completion")
    enabled = Column(Boolean, nullable=False, default=True, comment="Alerts active")
    notification_handle = Column(String(36), nullable=True, comment="Currently registered alert")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        CheckConstraint(_in_list("reminder_type", REMINDER_TYPES), name="reminder_type"),
        CheckConstraint(_in_list("frequency", FREQUENCIES), name="frequency"),
        CheckConstraint(
            f"preferred_day_of_week IS NULL OR {_in_list('preferred_day_of_week', WEEKDAYS)}",
            name="preferred_day_of_week",
        ),
        Index("ix_care_reminders_enabled_next_due", "enabled", "next_due"),
    )

    def __repr__(self) -> str:
        return (
            f"<ReminderModel(id={self.id}, plant_id={self.plant_id}, "
            f"frequency={self.frequency}, next_due={self.next_due})>"
        )


# =============================================================================
# SCHEDULED ALERT MODEL
# =============================================================================

class ScheduledAlertModel(DatabaseBase):
    """
    SQLAlchemy model for device alerts.

    Devices pull active rows and schedule them locally; a row is active
    until cancelled, or for one-shot alerts until fire_at has passed.
    """
    __tablename__ = "scheduled_alerts"

    handle = Column(String(36), primary_key=True, comment="Opaque alert handle")
    reminder_id = Column(
        String(36),
        ForeignKey("care_reminders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Reminder this alert belongs to",
    )

    shape = Column(String(10), nullable=False, comment="daily, weekly or one_shot")
    hour = Column(Integer, nullable=True)
    minute = Column(Integer, nullable=True)
    weekday = Column(String(10), nullable=True)
    fire_at = Column(DateTime(timezone=True), nullable=True, comment="One-shot fire time (UTC)")

    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)
    payload = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    cancelled_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint(_in_list("shape", TRIGGER_SHAPES), name="shape"),
    )

    def __repr__(self) -> str:
        return f"<ScheduledAlertModel(handle={self.handle}, reminder_id={self.reminder_id}, shape={self.shape})>"
