"""Demo users and sample prescriptions for local runs and tests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List

from api.models.schemas import Medicine, Prescription, Role


@dataclass(frozen=True)
class DemoUser:
    id: int
    username: str
    name: str
    role: Role


DEMO_USERS: List[DemoUser] = [
    DemoUser(id=1, username="patient1", name="John Doe", role=Role.PATIENT),
    DemoUser(id=2, username="patient2", name="Jane Smith", role=Role.PATIENT),
    DemoUser(id=1, username="doctor1", name="Dr. Williams", role=Role.DOCTOR),
    DemoUser(id=2, username="admin", name="Admin User", role=Role.DOCTOR),
]


SAMPLE_PRESCRIPTIONS: List[Prescription] = [
    Prescription(
        id=1,
        patient_id=1,
        patient_name="John Doe",
        doctor_id=1,
        doctor_name="Dr. Williams",
        medicines=[
            Medicine(id=11, name="Paracetamol", dosage="500mg", frequency="Twice daily", times=["09:00", "21:00"]),
            Medicine(id=12, name="Vitamin D", dosage="1000IU", frequency="Once daily", times=["08:00"]),
        ],
        notes="Take with food.",
        date=date(2025, 9, 25),
    ),
    Prescription(
        id=2,
        patient_id=2,
        patient_name="Jane Smith",
        doctor_id=1,
        doctor_name="Dr. Williams",
        medicines=[
            Medicine(id=21, name="Metformin", dosage="850mg", frequency="Twice daily", times=["08:00", "20:00"]),
        ],
        notes="Monitor blood sugar.",
        date=date(2025, 9, 25),
    ),
]


def patients() -> List[DemoUser]:
    return [user for user in DEMO_USERS if user.role == Role.PATIENT]
