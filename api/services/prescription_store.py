"""In-memory prescription repository.

The reminder engine only ever calls ``list``; the mutating methods back the
doctor-facing prescription routes.
"""

from __future__ import annotations

import itertools
from datetime import date
from typing import Dict, Iterable, List, Optional

from api.models.schemas import Medicine, MedicineIn, Prescription, PrescriptionIn
from knowledge.demo_data import DemoUser, patients
from reminders.deriver import VisibilityScope


class PrescriptionStore:
    """Simple mutable prescription repository."""

    def __init__(self, seed: Iterable[Prescription] = ()) -> None:
        self._prescriptions: Dict[int, Prescription] = {}
        for prescription in seed:
            self._prescriptions[prescription.id] = prescription.model_copy(deep=True)
        start = max(
            [p.id for p in self._prescriptions.values()]
            + [m.id for p in self._prescriptions.values() for m in p.medicines]
            + [0]
        )
        self._ids = itertools.count(start + 1)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list(self) -> List[Prescription]:
        return list(self._prescriptions.values())

    def get(self, prescription_id: int) -> Prescription:
        try:
            return self._prescriptions[prescription_id]
        except KeyError:
            raise KeyError(f"Prescription {prescription_id} not found") from None

    def search(self, query: Optional[str], scope: VisibilityScope) -> List[Prescription]:
        """Visible prescriptions matching ``query`` on patient or medicine name."""

        needle = (query or "").strip().lower()
        results = []
        for prescription in self.list():
            if not scope.allows(prescription):
                continue
            if needle and not (
                needle in prescription.patient_name.lower()
                or any(needle in medicine.name.lower() for medicine in prescription.medicines)
            ):
                continue
            results.append(prescription)
        return results

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create(self, payload: PrescriptionIn, prescriber: DemoUser) -> Prescription:
        prescription = Prescription(
            id=next(self._ids),
            patient_id=payload.patient_id,
            patient_name=self._patient_name(payload.patient_id),
            doctor_id=prescriber.id,
            doctor_name=prescriber.name,
            medicines=self._build_medicines(payload.medicines),
            notes=payload.notes.strip(),
            date=date.today(),
        )
        self._prescriptions[prescription.id] = prescription
        return prescription

    def update(self, prescription_id: int, payload: PrescriptionIn) -> Prescription:
        existing = self.get(prescription_id)
        updated = existing.model_copy(
            update={
                "patient_id": payload.patient_id,
                "patient_name": self._patient_name(payload.patient_id),
                "medicines": self._build_medicines(payload.medicines),
                "notes": payload.notes.strip(),
                "date": date.today(),
            }
        )
        self._prescriptions[prescription_id] = updated
        return updated

    def delete(self, prescription_id: int) -> None:
        self.get(prescription_id)
        del self._prescriptions[prescription_id]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_medicines(self, rows: Iterable[MedicineIn]) -> List[Medicine]:
        medicines = []
        for row in rows:
            name = row.name.strip()
            dosage = row.dosage.strip()
            times = [t.strip() for t in row.times if t and t.strip()]
            # Incomplete rows are dropped, as the form did
            if not name or not dosage or not times:
                continue
            medicines.append(
                Medicine(
                    id=next(self._ids),
                    name=name,
                    dosage=dosage,
                    frequency=(row.frequency or "").strip() or "As needed",
                    times=times,
                )
            )
        if not medicines:
            raise ValueError("Add at least one valid medicine (name, dosage, time)")
        return medicines

    def _patient_name(self, patient_id: int) -> str:
        for patient in patients():
            if patient.id == patient_id:
                return patient.name
        raise ValueError(f"Unknown patient {patient_id}")
