# 📄 File: app/modules/care_management/domain/models/alert_trigger.py
# 🧭 Purpose (Layman Explanation):
# Describes exactly when the phone should pop up a care alert (every day, every week on a set day,
# or once at a specific moment) and what the alert should say.
# 🧪 Purpose (Technical Summary):
# Immutable value objects for device alert trigger descriptors tagged by shape
# (daily / weekly / one_shot) and the alert content handed to the notification registrar.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# reminder_scheduler.py (builds them), notification registrars (consume them), alert API schemas

from datetime import datetime, time
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .reminder import Weekday


class TriggerShape(str, Enum):
    """The three trigger shapes a device notification API accepts."""
    DAILY = "daily"          # natively repeating every day
    WEEKLY = "weekly"        # natively repeating on one weekday
    ONE_SHOT = "one_shot"    # fires once; must be re-issued after each firing


class AlertTrigger(BaseModel):
    """
    Trigger descriptor for a device alert.

    Only the fields belonging to the shape are set:
    daily -> hour, minute; weekly -> weekday, hour, minute; one_shot -> fire_at.
    """

    model_config = ConfigDict(frozen=True)

    shape: TriggerShape
    hour: Optional[int] = Field(None, ge=0, le=23)
    minute: Optional[int] = Field(None, ge=0, le=59)
    weekday: Optional[Weekday] = None
    fire_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_shape_fields(self) -> "AlertTrigger":
        if self.shape == TriggerShape.ONE_SHOT:
            if self.fire_at is None:
                raise ValueError("one_shot trigger requires fire_at")
            if self.hour is not None or self.minute is not None or self.weekday is not None:
                raise ValueError("one_shot trigger only carries fire_at")
            return self

        if self.hour is None or self.minute is None:
            raise ValueError(f"{self.shape.value} trigger requires hour and minute")
        if self.fire_at is not None:
            raise ValueError(f"{self.shape.value} trigger does not carry fire_at")
        if (self.shape == TriggerShape.WEEKLY) != (self.weekday is not None):
            raise ValueError("weekday is required for weekly triggers and only for them")
        return self

    @classmethod
    def daily(cls, at: time) -> "AlertTrigger":
        return cls(shape=TriggerShape.DAILY, hour=at.hour, minute=at.minute)

    @classmethod
    def weekly(cls, weekday: Weekday, at: time) -> "AlertTrigger":
        return cls(shape=TriggerShape.WEEKLY, weekday=weekday, hour=at.hour, minute=at.minute)

    @classmethod
    def one_shot(cls, fire_at: datetime) -> "AlertTrigger":
        return cls(shape=TriggerShape.ONE_SHOT, fire_at=fire_at)

    @property
    def is_repeating(self) -> bool:
        return self.shape != TriggerShape.ONE_SHOT

    def to_payload(self) -> Dict[str, Any]:
        """Wire shape for the device notification API."""
        if self.shape == TriggerShape.DAILY:
            return {"hour": self.hour, "minute": self.minute, "repeats": True}
        if self.shape == TriggerShape.WEEKLY:
            return {
                "weekday": self.weekday.value,
                "hour": self.hour,
                "minute": self.minute,
                "repeats": True,
            }
        return {"timestamp": self.fire_at.isoformat()}


class AlertContent(BaseModel):
    """Title, body and payload shown with a device alert."""

    model_config = ConfigDict(frozen=True)

    title: str = "Plant Care Reminder"
    body: str = "Time to care for your plant!"
    category: str = "plant-care"
    payload: Dict[str, Any] = Field(default_factory=dict)
