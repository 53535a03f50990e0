"""Service object wiring the reminder engine to the HTTP routes."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from functools import lru_cache
from typing import Callable, List, Optional

from api.models.schemas import Prescription, PrescriptionIn, ReminderEvent, Role
from api.services.flag_store import InMemoryFlagStore, JsonFileFlagStore
from api.services.prescription_store import PrescriptionStore
from api.services.session_store import Session, SessionStore
from core.settings import Settings, get_settings
from knowledge.demo_data import SAMPLE_PRESCRIPTIONS
from reminders.acknowledgement import AcknowledgementController, MarkAllResult
from reminders.alerts import AlertMessage, LoggingAlertSink
from reminders.deriver import ReminderDeriver, next_pending
from reminders.flags import FlagStore
from reminders.sweep import NotificationSweep
from scheduler.service import SweepScheduler

logger = logging.getLogger(__name__)


class ReminderService:
    """Facade over the stores, deriver, acknowledgement controller and sweep."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        flags: Optional[FlagStore] = None,
        prescriptions: Optional[PrescriptionStore] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.clock = clock or datetime.now
        self.flags = flags if flags is not None else _build_flag_store(self.settings)
        if prescriptions is None:
            prescriptions = PrescriptionStore(
                SAMPLE_PRESCRIPTIONS if self.settings.seed_demo_data else ()
            )
        self.prescriptions = prescriptions
        self.sessions = SessionStore(LoggingAlertSink() if self.settings.log_alerts else None)
        self.deriver = ReminderDeriver(
            self.flags,
            due_window=timedelta(minutes=self.settings.due_window_minutes),
            date_scoped_keys=self.settings.date_scoped_keys,
        )
        self.acknowledgements = AcknowledgementController(self.flags)
        self.sweep = NotificationSweep(self.prescriptions, self.deriver, self.flags, clock=self.clock)
        self.scheduler = SweepScheduler(self.sweep, self.settings.sweep_interval_seconds)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------
    def login(self, username: str) -> Session:
        session = self.sessions.open(username)
        self.scheduler.start(session.token, session)
        logger.info("Session opened for %s", session.user.username)
        return session

    def logout(self, token: str) -> None:
        self.scheduler.stop(token)
        session = self.sessions.close(token)
        if session is not None:
            logger.info("Session closed for %s", session.user.username)

    def set_notifications(self, session: Session, enabled: bool) -> Session:
        session.notifications_enabled = enabled
        return session

    def drain_alerts(self, session: Session) -> List[AlertMessage]:
        return session.alerts.drain()

    # ------------------------------------------------------------------
    # Reminders
    # ------------------------------------------------------------------
    def reminders(self, session: Session) -> List[ReminderEvent]:
        return self.deriver.derive(self.prescriptions.list(), session.scope, self.clock())

    def next_reminder(self, session: Session) -> Optional[ReminderEvent]:
        return next_pending(self.reminders(session))

    def toggle(self, session: Session, reminder_id: str) -> bool:
        _require_role(session, Role.PATIENT, "mark doses as taken")
        visible = {event.id for event in self.reminders(session)}
        if reminder_id not in visible:
            raise KeyError(f"Reminder {reminder_id} not found")
        return self.acknowledgements.toggle_taken(reminder_id)

    def mark_all(self, session: Session) -> MarkAllResult:
        _require_role(session, Role.PATIENT, "mark doses as taken")
        pending = [event.id for event in self.reminders(session) if not event.acknowledged]
        return self.acknowledgements.mark_all_taken(pending)

    # ------------------------------------------------------------------
    # Prescriptions
    # ------------------------------------------------------------------
    def list_prescriptions(self, session: Session, query: Optional[str] = None) -> List[Prescription]:
        return self.prescriptions.search(query, session.scope)

    def get_prescription(self, session: Session, prescription_id: int) -> Prescription:
        prescription = self.prescriptions.get(prescription_id)
        if not session.scope.allows(prescription):
            raise KeyError(f"Prescription {prescription_id} not found")
        return prescription

    def create_prescription(self, session: Session, payload: PrescriptionIn) -> Prescription:
        _require_role(session, Role.DOCTOR, "edit prescriptions")
        return self.prescriptions.create(payload, session.user)

    def update_prescription(
        self, session: Session, prescription_id: int, payload: PrescriptionIn
    ) -> Prescription:
        _require_role(session, Role.DOCTOR, "edit prescriptions")
        self.get_prescription(session, prescription_id)
        return self.prescriptions.update(prescription_id, payload)

    def delete_prescription(self, session: Session, prescription_id: int) -> None:
        _require_role(session, Role.DOCTOR, "edit prescriptions")
        self.get_prescription(session, prescription_id)
        self.prescriptions.delete(prescription_id)

    async def shutdown(self) -> None:
        await self.scheduler.shutdown()


def _require_role(session: Session, role: Role, action: str) -> None:
    if session.user.role != role:
        raise PermissionError(f"Only {role.value}s may {action}")


def _build_flag_store(settings: Settings) -> FlagStore:
    if settings.resolved_flag_store == "file":
        return JsonFileFlagStore(settings.flag_store_path)
    return InMemoryFlagStore()


@lru_cache(maxsize=1)
def get_reminder_service() -> ReminderService:
    """Return the process-wide service used by the API routes."""

    return ReminderService()
