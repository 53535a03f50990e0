from __future__ import annotations

import logging

from api.services.flag_store import InMemoryFlagStore
from api.services.reminder_service import ReminderService
from core.settings import Settings
from reminders.alerts import InboxAlertSink
from tests.helpers import FixedClock, RecordingSink, at


def test_inbox_forwards_accepted_alerts() -> None:
    forward = RecordingSink()
    inbox = InboxAlertSink(forward=forward)
    inbox.notify("Time to take Paracetamol", "09:00 • 500mg")
    assert forward.calls == [("Time to take Paracetamol", "09:00 • 500mg")]
    assert [m.title for m in inbox.drain()] == ["Time to take Paracetamol"]
    assert inbox.drain() == []


def test_disabled_inbox_does_not_forward() -> None:
    forward = RecordingSink()
    inbox = InboxAlertSink(enabled=False, forward=forward)
    inbox.notify("Time to take Paracetamol", "09:00 • 500mg")
    assert forward.calls == []
    assert inbox.drain() == []


def test_log_alerts_setting_writes_alerts_to_the_log(caplog) -> None:
    settings = Settings()
    settings.log_alerts = True
    service = ReminderService(settings=settings, flags=InMemoryFlagStore(), clock=FixedClock(at(9, 10)))
    session = service.sessions.open("patient1")

    with caplog.at_level(logging.INFO, logger="reminders.alerts"):
        service.sweep.tick(session)

    assert "Alert: Time to take Paracetamol (09:00 • 500mg)" in caplog.text
    assert [m.title for m in service.drain_alerts(session)] == ["Time to take Paracetamol"]


def test_alerts_stay_in_the_inbox_by_default() -> None:
    settings = Settings()
    settings.log_alerts = False
    service = ReminderService(settings=settings, flags=InMemoryFlagStore(), clock=FixedClock(at(9, 10)))
    session = service.sessions.open("patient1")
    assert session.alerts.forward is None
