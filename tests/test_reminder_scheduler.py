# 📄 File: tests/test_reminder_scheduler.py
# 🧭 Purpose (Layman Explanation):
# Checks the calendar maths: first due dates, next due dates after completing a task, and when
# the phone alert fires.
# 🧪 Purpose (Technical Summary):
# Unit tests for the pure reminder_scheduler functions (due-date arithmetic with month clamping,
# weekday alignment, trigger selection, one-shot correction, snooze, classification, content).
# 🔗 Dependencies:
# pytest, app.modules.care_management.domain
# 🔄 Connected Modules / Calls From:
# pytest

from datetime import date, datetime, time, timedelta, timezone

import pytest

from app.modules.care_management.domain.models.alert_trigger import TriggerShape
from app.modules.care_management.domain.models.reminder import (
    Frequency,
    Reminder,
    ReminderType,
    ScheduleState,
    Weekday,
    frequency_label,
)
from app.modules.care_management.domain.services.reminder_scheduler import (
    advance_due_date,
    build_alert_content,
    build_alert_trigger,
    build_snooze_trigger,
    compute_initial_due_date,
    resolve_time,
    schedule_state,
)

UTC = timezone.utc


def make_reminder(**overrides) -> Reminder:
    fields = dict(
        plant_id="plant-1",
        type=ReminderType.WATERING,
        frequency=Frequency.WEEKLY,
        start_date=date(2024, 3, 4),
        next_due=date(2024, 3, 4),
    )
    fields.update(overrides)
    return Reminder(**fields)


# =============================================================================
# DUE DATES
# =============================================================================

@pytest.mark.parametrize("frequency", list(Frequency))
def test_advance_always_moves_forward(frequency):
    for completed in (date(2024, 1, 31), date(2024, 2, 29), date(2023, 12, 31)):
        assert advance_due_date(completed, frequency) > completed


@pytest.mark.parametrize(
    "completed, frequency, expected",
    [
        (date(2024, 6, 1), Frequency.DAILY, date(2024, 6, 2)),
        (date(2024, 6, 1), Frequency.EVERY_3_DAYS, date(2024, 6, 4)),
        (date(2024, 6, 1), Frequency.WEEKLY, date(2024, 6, 8)),
        (date(2024, 6, 1), Frequency.BIWEEKLY, date(2024, 6, 15)),
        (date(2024, 1, 31), Frequency.MONTHLY, date(2024, 2, 29)),
        (date(2023, 1, 31), Frequency.MONTHLY, date(2023, 2, 28)),
        (date(2024, 11, 30), Frequency.QUARTERLY, date(2025, 2, 28)),
        (date(2024, 8, 31), Frequency.SIX_MONTHLY, date(2025, 2, 28)),
        (date(2024, 2, 29), Frequency.YEARLY, date(2025, 2, 28)),
        (date(2024, 2, 29), Frequency.BIANNUALLY, date(2026, 2, 28)),
    ],
)
def test_advance_due_date(completed, frequency, expected):
    assert advance_due_date(completed, frequency) == expected


def test_advance_is_deterministic():
    first = advance_due_date(date(2024, 1, 31), Frequency.MONTHLY)
    second = advance_due_date(date(2024, 1, 31), Frequency.MONTHLY)
    assert first == second


def test_unknown_frequency_falls_back_to_a_week(caplog):
    assert advance_due_date(date(2024, 6, 1), "fortnightly-ish") == date(2024, 6, 8)
    assert "fortnightly-ish" in caplog.text


def test_accepts_frequency_strings():
    assert advance_due_date(date(2024, 6, 1), "biweekly") == date(2024, 6, 15)


def test_initial_due_date_on_matching_weekday_is_start_date():
    # 2024-03-04 is a Monday
    assert compute_initial_due_date(date(2024, 3, 4), Frequency.WEEKLY, Weekday.MONDAY) == date(2024, 3, 4)


def test_initial_due_date_moves_forward_to_weekday():
    assert compute_initial_due_date(date(2024, 3, 4), Frequency.WEEKLY, Weekday.SUNDAY) == date(2024, 3, 10)
    assert compute_initial_due_date(date(2024, 3, 6), Frequency.BIWEEKLY, Weekday.TUESDAY) == date(2024, 3, 12)


def test_initial_due_date_ignores_weekday_for_other_frequencies():
    assert compute_initial_due_date(date(2024, 3, 4), Frequency.MONTHLY, Weekday.SUNDAY) == date(2024, 3, 4)
    assert compute_initial_due_date(date(2024, 3, 4), Frequency.WEEKLY) == date(2024, 3, 4)


def test_biweekly_completion_scenario():
    reminder = make_reminder(frequency=Frequency.BIWEEKLY, start_date=date(2024, 6, 1), next_due=date(2024, 6, 1))

    next_due = advance_due_date(date(2024, 6, 1), reminder.frequency)
    reminder.record_completion(date(2024, 6, 1), next_due)
    assert reminder.next_due == date(2024, 6, 15)

    next_due = advance_due_date(date(2024, 6, 15), reminder.frequency)
    reminder.record_completion(date(2024, 6, 15), next_due)
    assert reminder.next_due == date(2024, 6, 29)
    assert reminder.last_completed == date(2024, 6, 15)


# =============================================================================
# TIMES AND TRIGGERS
# =============================================================================

@pytest.mark.parametrize(
    "preferred, expected",
    [
        (None, time(8, 0)),
        ("morning", time(8, 0)),
        ("afternoon", time(13, 0)),
        ("evening", time(19, 0)),
        ("07:45", time(7, 45)),
        ("23:59", time(23, 59)),
    ],
)
def test_resolve_time(preferred, expected):
    assert resolve_time(preferred) == expected


@pytest.mark.parametrize("bad", ["noon", "24:00", "7:5", "12:60"])
def test_resolve_time_rejects_malformed_values(bad):
    with pytest.raises(ValueError):
        resolve_time(bad)


def test_daily_reminder_gets_daily_trigger():
    reminder = make_reminder(frequency=Frequency.DAILY, preferred_time="evening")
    trigger = build_alert_trigger(reminder, datetime(2024, 3, 4, 10, 0, tzinfo=UTC))

    assert trigger.shape == TriggerShape.DAILY
    assert (trigger.hour, trigger.minute) == (19, 0)
    assert trigger.to_payload() == {"hour": 19, "minute": 0, "repeats": True}


def test_weekly_reminder_with_weekday_gets_weekly_trigger():
    reminder = make_reminder(preferred_day_of_week=Weekday.SATURDAY, preferred_time="07:30")
    trigger = build_alert_trigger(reminder, datetime(2024, 3, 4, 10, 0, tzinfo=UTC))

    assert trigger.shape == TriggerShape.WEEKLY
    assert trigger.weekday == Weekday.SATURDAY
    assert (trigger.hour, trigger.minute) == (7, 30)


@pytest.mark.parametrize(
    "frequency, weekday",
    [
        (Frequency.WEEKLY, None),
        (Frequency.BIWEEKLY, Weekday.MONDAY),
        (Frequency.EVERY_3_DAYS, None),
        (Frequency.MONTHLY, None),
        (Frequency.YEARLY, None),
    ],
)
def test_other_reminders_get_one_shot_at_next_due(frequency, weekday):
    reminder = make_reminder(
        frequency=frequency,
        preferred_day_of_week=weekday,
        next_due=date(2024, 3, 20),
        preferred_time="afternoon",
    )
    trigger = build_alert_trigger(reminder, datetime(2024, 3, 4, 10, 0, tzinfo=UTC))

    assert trigger.shape == TriggerShape.ONE_SHOT
    assert trigger.fire_at == datetime(2024, 3, 20, 13, 0, tzinfo=UTC)


def test_one_shot_keeps_minimum_lead_time():
    now = datetime(2024, 3, 4, 10, 0, 30, tzinfo=UTC)
    reminder = make_reminder(frequency=Frequency.MONTHLY, next_due=date(2024, 3, 4), preferred_time="10:01")

    trigger = build_alert_trigger(reminder, now)

    assert trigger.fire_at >= now + timedelta(seconds=60)
    assert trigger.fire_at == datetime(2024, 3, 4, 10, 1, 30, tzinfo=UTC)


def test_past_due_one_shot_moves_to_tomorrow():
    now = datetime(2024, 3, 4, 10, 0, tzinfo=UTC)
    reminder = make_reminder(frequency=Frequency.MONTHLY, next_due=date(2024, 2, 1), preferred_time="morning")

    trigger = build_alert_trigger(reminder, now)

    assert trigger.fire_at == datetime(2024, 3, 5, 8, 0, tzinfo=UTC)
    assert trigger.fire_at > now


def test_one_shot_uses_now_timezone():
    tz = timezone(timedelta(hours=2))
    now = datetime(2024, 3, 4, 10, 0, tzinfo=tz)
    reminder = make_reminder(frequency=Frequency.QUARTERLY, next_due=date(2024, 3, 10))

    trigger = build_alert_trigger(reminder, now)

    assert trigger.fire_at == datetime(2024, 3, 10, 8, 0, tzinfo=tz)
    assert trigger.fire_at.utcoffset() == timedelta(hours=2)


def test_snooze_trigger():
    now = datetime(2024, 3, 4, 10, 0, tzinfo=UTC)

    assert build_snooze_trigger(now).fire_at == now + timedelta(hours=1)
    assert build_snooze_trigger(now, timedelta(seconds=5)).fire_at == now + timedelta(seconds=60)


# =============================================================================
# CLASSIFICATION AND CONTENT
# =============================================================================

def test_schedule_state():
    today = date(2024, 3, 4)

    assert schedule_state(make_reminder(next_due=date(2024, 3, 3)), today) == ScheduleState.OVERDUE
    assert schedule_state(make_reminder(next_due=today), today) == ScheduleState.DUE
    assert schedule_state(make_reminder(next_due=date(2024, 3, 5)), today) == ScheduleState.SCHEDULED
    assert schedule_state(make_reminder(next_due=date(2024, 3, 3), enabled=False), today) == ScheduleState.DISABLED


def test_alert_content():
    reminder = make_reminder(type=ReminderType.FERTILIZING, plant_name="Monstera")
    content = build_alert_content(reminder)

    assert content.title == "Fertilizing reminder"
    assert content.body == "Time to fertilize Monstera!"
    assert content.category == "plant-care"
    assert content.payload == {
        "type": "plant-care",
        "reminder_id": reminder.id,
        "plant_id": "plant-1",
        "reminder_type": "fertilizing",
    }


def test_alert_content_without_plant_name():
    content = build_alert_content(make_reminder(type=ReminderType.OTHER))
    assert content.body == "Time to care for your plant!"


def test_display_labels():
    reminder = make_reminder(frequency=Frequency.BIANNUALLY, type=ReminderType.ROTATION)
    assert reminder.frequency_label == "Every 2 years"
    assert reminder.type_label == "Rotation"


def test_frequency_label_accepts_enum_or_raw_value():
    assert frequency_label(Frequency.WEEKLY) == "Every week"
    assert frequency_label("weekly") == "Every week"
    assert frequency_label("fortnightly-ish") == "Custom"
