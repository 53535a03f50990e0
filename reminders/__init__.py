"""Reminder engine: derivation, acknowledgement and notification sweep."""

from .acknowledgement import AcknowledgementController, MarkAllResult
from .alerts import AlertMessage, AlertSink, InboxAlertSink, LoggingAlertSink
from .deriver import ReminderDeriver, VisibilityScope, next_pending
from .flags import FlagStore, notified_key, read_flag, taken_key
from .identity import classify, parse_time_of_day, reminder_key, scheduled_at
from .sweep import NotificationSweep

__all__ = [
    "AcknowledgementController",
    "AlertMessage",
    "AlertSink",
    "FlagStore",
    "InboxAlertSink",
    "LoggingAlertSink",
    "MarkAllResult",
    "NotificationSweep",
    "ReminderDeriver",
    "VisibilityScope",
    "classify",
    "next_pending",
    "notified_key",
    "parse_time_of_day",
    "read_flag",
    "reminder_key",
    "scheduled_at",
    "taken_key",
]
