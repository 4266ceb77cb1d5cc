# 📄 File: app/modules/care_management/domain/services/reminder_scheduler.py
# 🧭 Purpose (Layman Explanation):
# The calendar brain of the reminders: works out the first day a care task is due, the next day
# after you finish it, and exactly when the phone should ring for it.
# 🧪 Purpose (Technical Summary):
# Stateless pure functions for initial due-date resolution, calendar-aware interval advance
# (dateutil relativedelta with end-of-month clamping), preferred-time resolution, trigger-shape
# selection with one-shot past/lead-time correction, snooze triggers and schedule classification.
# 🔗 Dependencies:
# python-dateutil (relativedelta), datetime, logging, domain models
# 🔄 Connected Modules / Calls From:
# reminder_service.py (create / edit / complete / snooze / reconcile flows), API schemas, tests

"""
Reminder Scheduler

Every function here is pure: no clock reads, no I/O and no module state.
Callers pass `now` / `today` explicitly, so identical inputs always give
identical outputs and the functions are safe to call from any request or
worker context.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Dict, Optional, Union

from dateutil.relativedelta import relativedelta

from ..models.alert_trigger import AlertContent, AlertTrigger
from ..models.reminder import (
    CLOCK_TIME_PATTERN,
    REMINDER_TYPE_ACTIONS,
    REMINDER_TYPE_LABELS,
    Frequency,
    PreferredTime,
    Reminder,
    ScheduleState,
    Weekday,
)

logger = logging.getLogger(__name__)

DEFAULT_ALERT_TIME = time(8, 0)
MIN_LEAD_TIME = timedelta(seconds=60)
DEFAULT_SNOOZE_DELAY = timedelta(hours=1)
FALLBACK_INTERVAL = relativedelta(days=7)
ALERT_CATEGORY = "plant-care"

# relativedelta clamps month/year arithmetic to the last valid day
FREQUENCY_INTERVALS: Dict[Frequency, relativedelta] = {
    Frequency.DAILY: relativedelta(days=1),
    Frequency.EVERY_3_DAYS: relativedelta(days=3),
    Frequency.WEEKLY: relativedelta(days=7),
    Frequency.BIWEEKLY: relativedelta(days=14),
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.QUARTERLY: relativedelta(months=3),
    Frequency.SIX_MONTHLY: relativedelta(months=6),
    Frequency.YEARLY: relativedelta(years=1),
    Frequency.BIANNUALLY: relativedelta(years=2),
}

WEEKDAY_ALIGNED_FREQUENCIES = (Frequency.WEEKLY, Frequency.BIWEEKLY)


# =============================================================================
# DUE DATES
# =============================================================================

def compute_initial_due_date(
    start_date: date,
    frequency: Frequency,
    preferred_day_of_week: Optional[Weekday] = None,
) -> date:
    """
    First due date for a new or edited reminder.

    Weekly and biweekly reminders with a preferred weekday move forward to
    the first matching day on or after start_date (zero advance when the
    start date already matches). Everything else starts on start_date.
    """
    if frequency not in WEEKDAY_ALIGNED_FREQUENCIES or preferred_day_of_week is None:
        return start_date

    target = Weekday(preferred_day_of_week).day_number
    offset = target - start_date.weekday()
    if offset < 0:
        offset += 7
    return start_date + timedelta(days=offset)


def advance_due_date(completion_date: date, frequency: Union[Frequency, str]) -> date:
    """
    Next due date after the task was completed on completion_date.

    Unrecognised frequencies (e.g. legacy values read from storage) fall back
    to a 7-day interval so a reminder can never get stuck.
    """
    try:
        interval = FREQUENCY_INTERVALS[Frequency(frequency)]
    except ValueError:
        logger.warning(
            f"Unrecognised reminder frequency {frequency!r}; advancing by 7 days"
        )
        interval = FALLBACK_INTERVAL

    return completion_date + interval


# =============================================================================
# ALERT TIMES AND TRIGGERS
# =============================================================================

def resolve_time(preferred_time: Optional[str]) -> time:
    """
    Clock time for a preferred time of day.

    morning/afternoon/evening map to 08:00, 13:00 and 19:00; an explicit
    HH:MM is parsed as-is; no preference means 08:00.

    Raises:
        ValueError: if preferred_time is neither a named time nor HH:MM
    """
    if preferred_time is None:
        return DEFAULT_ALERT_TIME

    value = preferred_time.strip().lower()
    if value in PreferredTime._value2member_map_:
        return PreferredTime(value).clock_time

    match = CLOCK_TIME_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Invalid preferred time: {preferred_time!r}")
    return time(int(match.group(1)), int(match.group(2)))


def _correct_one_shot(fire_at: datetime, at: time, now: datetime) -> datetime:
    """Push a one-shot timestamp off the past and at least MIN_LEAD_TIME ahead."""
    if fire_at <= now:
        tomorrow = now.date() + timedelta(days=1)
        fire_at = datetime.combine(tomorrow, at, tzinfo=now.tzinfo)

    earliest = now + MIN_LEAD_TIME
    if fire_at < earliest:
        fire_at = earliest
    return fire_at


def build_alert_trigger(reminder: Reminder, now: datetime) -> AlertTrigger:
    """
    Choose the device trigger for a reminder's next occurrence.

    - daily -> daily-repeating at the resolved time
    - weekly with a preferred weekday -> weekly-repeating on that day
    - anything else -> one-shot at next_due + resolved time, in now's timezone

    One-shot timestamps at or before `now` move to tomorrow at the resolved
    time, and are never closer than 60 seconds to `now`.
    """
    at = resolve_time(reminder.preferred_time)

    if reminder.frequency == Frequency.DAILY:
        return AlertTrigger.daily(at)

    if reminder.frequency == Frequency.WEEKLY and reminder.preferred_day_of_week is not None:
        return AlertTrigger.weekly(reminder.preferred_day_of_week, at)

    fire_at = datetime.combine(reminder.next_due, at, tzinfo=now.tzinfo)
    return AlertTrigger.one_shot(_correct_one_shot(fire_at, at, now))


def build_snooze_trigger(now: datetime, delay: timedelta = DEFAULT_SNOOZE_DELAY) -> AlertTrigger:
    """One-shot trigger for "remind me later"; lead time rules still apply."""
    return AlertTrigger.one_shot(max(now + delay, now + MIN_LEAD_TIME))


def build_alert_content(reminder: Reminder, category: str = ALERT_CATEGORY) -> AlertContent:
    """Title, body and routing payload for a reminder's alert."""
    title = f"{REMINDER_TYPE_LABELS[reminder.type]} reminder"
    body = f"Time to {REMINDER_TYPE_ACTIONS[reminder.type]} {reminder.display_name}!"
    return AlertContent(
        title=title,
        body=body,
        category=category,
        payload={
            "type": category,
            "reminder_id": reminder.id,
            "plant_id": reminder.plant_id,
            "reminder_type": reminder.type.value,
        },
    )


# =============================================================================
# CLASSIFICATION
# =============================================================================

def schedule_state(reminder: Reminder, today: date) -> ScheduleState:
    """Disabled wins; otherwise overdue / due / scheduled by next_due vs today."""
    if not reminder.enabled:
        return ScheduleState.DISABLED
    if reminder.next_due < today:
        return ScheduleState.OVERDUE
    if reminder.next_due == today:
        return ScheduleState.DUE
    return ScheduleState.SCHEDULED
