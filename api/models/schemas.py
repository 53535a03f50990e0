"""Pydantic data models used by the FastAPI layer.

Prescriptions and medicines are the records handed to the reminder engine by
the ``PrescriptionStore``. Reminder events are never stored; they are derived
on every request from the prescriptions plus the persisted flags.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Kinds of user known to the demo directory."""

    PATIENT = "patient"
    DOCTOR = "doctor"


class Urgency(str, Enum):
    """Time-relative classification of a reminder event."""

    UPCOMING = "upcoming"
    DUE = "due"
    OVERDUE = "overdue"
    TAKEN = "taken"


class Medicine(BaseModel):
    id: int
    name: str
    dosage: str
    frequency: str = "As needed"
    times: List[str] = Field(default_factory=list, description="Times of day in 24h HH:MM format")


class Prescription(BaseModel):
    id: int
    patient_id: int
    patient_name: str
    doctor_id: int
    doctor_name: str
    medicines: List[Medicine] = Field(default_factory=list)
    notes: str = ""
    date: dt.date


class MedicineIn(BaseModel):
    name: str
    dosage: str
    frequency: Optional[str] = None
    times: List[str] = Field(default_factory=list)


class PrescriptionIn(BaseModel):
    patient_id: int
    medicines: List[MedicineIn]
    notes: str = ""


class ReminderEvent(BaseModel):
    """A single dosage occurrence for one medicine at one time today."""

    id: str
    prescription_id: int
    medicine_id: int
    patient_id: int
    patient_name: str
    medicine: str
    dosage: str
    time: str
    date: dt.date
    acknowledged: bool = False
    urgency: Urgency

    @property
    def display_urgency(self) -> Urgency:
        """Urgency shown to the user; acknowledged events read as taken."""

        if self.acknowledged:
            return Urgency.TAKEN
        return self.urgency


class ReminderView(BaseModel):
    id: str
    prescription_id: int
    patient_name: str
    medicine: str
    dosage: str
    time: str
    date: dt.date
    taken: bool
    urgency: Urgency
    status: Urgency

    @classmethod
    def from_event(cls, event: ReminderEvent) -> "ReminderView":
        return cls(
            id=event.id,
            prescription_id=event.prescription_id,
            patient_name=event.patient_name,
            medicine=event.medicine,
            dosage=event.dosage,
            time=event.time,
            date=event.date,
            taken=event.acknowledged,
            urgency=event.urgency,
            status=event.display_urgency,
        )


class ReminderListResponse(BaseModel):
    reminders: List[ReminderView]


class NextReminderResponse(BaseModel):
    reminder: Optional[ReminderView] = None


class ToggleResponse(BaseModel):
    id: str
    taken: bool


class MarkAllResponse(BaseModel):
    marked: List[str] = Field(default_factory=list)
    nothing_to_do: bool = False
    detail: Optional[str] = None


class SessionRequest(BaseModel):
    username: str


class SessionResponse(BaseModel):
    token: str
    user_id: int
    name: str
    username: str
    role: Role
    notifications_enabled: bool


class SessionSettingsRequest(BaseModel):
    notifications_enabled: Optional[bool] = None


class Alert(BaseModel):
    title: str
    body: str


class AlertListResponse(BaseModel):
    alerts: List[Alert]


__all__ = [
    "Alert",
    "AlertListResponse",
    "MarkAllResponse",
    "Medicine",
    "MedicineIn",
    "NextReminderResponse",
    "Prescription",
    "PrescriptionIn",
    "ReminderEvent",
    "ReminderListResponse",
    "ReminderView",
    "Role",
    "SessionRequest",
    "SessionResponse",
    "SessionSettingsRequest",
    "ToggleResponse",
    "Urgency",
]
