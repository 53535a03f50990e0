from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Tuple

from api.models.schemas import Medicine, Prescription
from reminders.alerts import InboxAlertSink
from reminders.deriver import VisibilityScope


TODAY = date(2025, 9, 25)


def at(hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(2025, 9, 25, hour, minute, second)


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class StaticPrescriptions:
    def __init__(self, prescriptions: List[Prescription]) -> None:
        self.prescriptions = prescriptions

    def list(self) -> List[Prescription]:
        return list(self.prescriptions)


@dataclass
class FakeSession:
    recipient: str = "patient-1"
    scope: VisibilityScope = field(default_factory=VisibilityScope.everyone)
    active: bool = True
    alerts: InboxAlertSink = field(default_factory=InboxAlertSink)


class RecordingSink:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def notify(self, title: str, body: str) -> None:
        self.calls.append((title, body))


class BrokenSink:
    def notify(self, title: str, body: str) -> None:
        raise RuntimeError("notifications unavailable")


class BrokenFlagStore:
    def get_flag(self, key: str) -> bool:
        raise OSError("disk unavailable")

    def set_flag(self, key: str, value: bool) -> None:
        raise OSError("disk unavailable")

    def clear_flag(self, key: str) -> None:
        raise OSError("disk unavailable")


def prescription(
    prescription_id: int,
    patient_id: int,
    patient_name: str,
    medicines: List[Medicine],
) -> Prescription:
    return Prescription(
        id=prescription_id,
        patient_id=patient_id,
        patient_name=patient_name,
        doctor_id=1,
        doctor_name="Dr. Williams",
        medicines=medicines,
        notes="",
        date=TODAY,
    )
