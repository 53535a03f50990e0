"""Notification sweep: alert at most once per due reminder event."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Protocol

from api.models.schemas import Prescription, ReminderEvent, Urgency
from reminders.alerts import AlertSink
from reminders.deriver import ReminderDeriver, VisibilityScope
from reminders.flags import FlagStore, notified_key, read_flag

logger = logging.getLogger(__name__)


class PrescriptionSource(Protocol):
    def list(self) -> List[Prescription]:
        ...


class SweepTarget(Protocol):
    """What a sweep tick needs from a user session."""

    active: bool
    recipient: str
    scope: VisibilityScope
    alerts: AlertSink


def alert_text(event: ReminderEvent) -> tuple[str, str]:
    return f"Time to take {event.medicine}", f"{event.time} • {event.dosage}"


class NotificationSweep:
    """Decide which reminder events should alert on this tick.

    Only events whose time-based urgency is ``due`` and that are not
    acknowledged are considered. An event alerts once per recipient; the
    notified flag is set even when the sink fails so the alert is not
    retried. Events that go straight from upcoming to overdue between ticks
    never alert.
    """

    def __init__(
        self,
        prescriptions: PrescriptionSource,
        deriver: ReminderDeriver,
        flags: FlagStore,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.prescriptions = prescriptions
        self.deriver = deriver
        self.flags = flags
        self.clock = clock or datetime.now

    def due_unacknowledged(self, scope: VisibilityScope, now: datetime) -> Iterable[ReminderEvent]:
        events = self.deriver.derive(self.prescriptions.list(), scope, now)
        return [
            event
            for event in events
            if event.urgency == Urgency.DUE and not event.acknowledged
        ]

    def tick(self, session: SweepTarget) -> List[ReminderEvent]:
        if not session.active:
            return []
        now = self.clock()
        fired: List[ReminderEvent] = []
        for event in self.due_unacknowledged(session.scope, now):
            key = notified_key(event.id, session.recipient)
            if read_flag(self.flags, key):
                continue
            title, body = alert_text(event)
            try:
                session.alerts.notify(title, body)
            except Exception as exc:
                logger.warning("Alert for %s could not be delivered: %s", event.id, exc)
            self.flags.set_flag(key, True)
            fired.append(event)
        if fired:
            logger.info("Sweep fired %d alert(s) at %s", len(fired), now.strftime("%H:%M"))
        return fired
