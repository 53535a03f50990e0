"""Reminder identity keys and time-of-day helpers."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from api.models.schemas import Urgency

DUE_WINDOW = timedelta(minutes=30)

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def reminder_key(
    prescription_id: Union[int, str],
    medicine_id: Union[int, str],
    time_of_day: str,
    on: Optional[date] = None,
) -> str:
    """Build the stable identity of a reminder event.

    When ``on`` is given the calendar date is appended so flags keyed by the
    identity reset naturally each day.
    """

    key = f"{prescription_id}-{medicine_id}-{time_of_day}"
    if on is not None:
        key = f"{key}@{on.isoformat()}"
    return key


def parse_time_of_day(value: object) -> str:
    """Normalise a ``HH:MM`` string, raising ``ValueError`` when malformed."""

    if not isinstance(value, str):
        raise ValueError(f"Time of day must be a string, got {type(value).__name__}")
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Malformed time of day: {value!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Time of day out of range: {value!r}")
    return f"{hour:02d}:{minute:02d}"


def scheduled_at(time_of_day: str, on: date) -> datetime:
    hour, minute = (int(part) for part in parse_time_of_day(time_of_day).split(":"))
    return datetime.combine(on, time(hour=hour, minute=minute))


def classify(scheduled: datetime, now: datetime, window: timedelta = DUE_WINDOW) -> Urgency:
    """Classify a scheduled time against ``now`` on the same day."""

    if scheduled > now:
        return Urgency.UPCOMING
    if now - scheduled <= window:
        return Urgency.DUE
    return Urgency.OVERDUE
