"""Derive today's reminder events from prescription records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from api.models.schemas import Prescription, ReminderEvent
from reminders.flags import FlagStore, read_flag, taken_key
from reminders.identity import DUE_WINDOW, classify, parse_time_of_day, reminder_key, scheduled_at

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisibilityScope:
    """Which patients' prescriptions a viewer may see.

    ``patient_id`` of ``None`` means every patient (the doctor view).
    """

    patient_id: Optional[int] = None

    @classmethod
    def everyone(cls) -> "VisibilityScope":
        return cls(patient_id=None)

    @classmethod
    def for_patient(cls, patient_id: int) -> "VisibilityScope":
        return cls(patient_id=patient_id)

    def allows(self, prescription: Prescription) -> bool:
        return self.patient_id is None or prescription.patient_id == self.patient_id


class ReminderDeriver:
    """Turn prescriptions plus acknowledgement state into ordered reminder events.

    ``derive`` has no side effects; both the view layer and the notification
    sweep call it and must see the same sequence for the same inputs.
    """

    def __init__(
        self,
        flags: FlagStore,
        due_window: timedelta = DUE_WINDOW,
        date_scoped_keys: bool = True,
    ) -> None:
        self.flags = flags
        self.due_window = due_window
        self.date_scoped_keys = date_scoped_keys

    def derive(
        self,
        prescriptions: Iterable[Prescription],
        scope: VisibilityScope,
        now: datetime,
    ) -> List[ReminderEvent]:
        today = now.date()
        events: List[ReminderEvent] = []
        for prescription in prescriptions:
            if not scope.allows(prescription):
                continue
            for medicine in prescription.medicines:
                for raw_time in medicine.times:
                    try:
                        time_of_day = parse_time_of_day(raw_time)
                    except ValueError as exc:
                        logger.debug(
                            "Skipping medicine %s on prescription %s: %s",
                            medicine.id,
                            prescription.id,
                            exc,
                        )
                        continue
                    reminder_id = reminder_key(
                        prescription.id,
                        medicine.id,
                        time_of_day,
                        on=today if self.date_scoped_keys else None,
                    )
                    events.append(
                        ReminderEvent(
                            id=reminder_id,
                            prescription_id=prescription.id,
                            medicine_id=medicine.id,
                            patient_id=prescription.patient_id,
                            patient_name=prescription.patient_name,
                            medicine=medicine.name,
                            dosage=medicine.dosage,
                            time=time_of_day,
                            date=today,
                            acknowledged=read_flag(self.flags, taken_key(reminder_id)),
                            urgency=classify(
                                scheduled_at(time_of_day, today), now, self.due_window
                            ),
                        )
                    )
        # list.sort is stable, so equal times keep encounter order
        events.sort(key=lambda event: event.time)
        return events


def next_pending(events: Iterable[ReminderEvent]) -> Optional[ReminderEvent]:
    """Return the earliest event not yet acknowledged."""

    for event in events:
        if not event.acknowledged:
            return event
    return None
