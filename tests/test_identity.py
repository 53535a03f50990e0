from __future__ import annotations

from datetime import date, timedelta

import pytest

from api.models.schemas import Urgency
from reminders.identity import classify, parse_time_of_day, reminder_key, scheduled_at
from tests.helpers import TODAY, at


def test_due_window_scenarios() -> None:
    scheduled = scheduled_at("09:00", TODAY)
    assert classify(scheduled, at(9, 10)) == Urgency.DUE
    assert classify(scheduled, at(9, 31)) == Urgency.OVERDUE
    assert classify(scheduled, at(8, 59)) == Urgency.UPCOMING


def test_window_boundaries() -> None:
    scheduled = scheduled_at("09:00", TODAY)
    assert classify(scheduled, at(9, 0)) == Urgency.DUE
    assert classify(scheduled, at(9, 30)) == Urgency.DUE
    assert classify(scheduled, at(9, 30, 1)) == Urgency.OVERDUE


def test_exactly_one_urgency_holds_across_the_day() -> None:
    scheduled = scheduled_at("12:00", TODAY)
    now = at(0, 0)
    while now.date() == TODAY:
        delta = now - scheduled
        urgency = classify(scheduled, now)
        if scheduled > now:
            assert urgency == Urgency.UPCOMING
        elif delta <= timedelta(minutes=30):
            assert urgency == Urgency.DUE
        else:
            assert urgency == Urgency.OVERDUE
        now += timedelta(minutes=7)


def test_custom_window() -> None:
    scheduled = scheduled_at("09:00", TODAY)
    assert classify(scheduled, at(9, 10), window=timedelta(minutes=5)) == Urgency.OVERDUE


def test_parse_time_of_day_normalises_single_digit_hour() -> None:
    assert parse_time_of_day("9:05") == "09:05"
    assert parse_time_of_day(" 21:00 ") == "21:00"


@pytest.mark.parametrize("value", ["", "24:00", "12:60", "9", "09:00:00", "9am", "08:00 PM", None, 900])
def test_parse_time_of_day_rejects_malformed(value) -> None:
    with pytest.raises(ValueError):
        parse_time_of_day(value)


def test_reminder_key_is_deterministic() -> None:
    assert reminder_key(1, 11, "09:00") == "1-11-09:00"
    assert reminder_key(1, 11, "09:00", on=date(2025, 9, 25)) == "1-11-09:00@2025-09-25"
    assert reminder_key(1, 11, "09:00", on=date(2025, 9, 26)) != reminder_key(
        1, 11, "09:00", on=date(2025, 9, 25)
    )
