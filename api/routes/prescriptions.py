"""HTTP routes for prescription records.

The reminder engine only reads these records; edits made here show up in
the next derivation.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from api.models.schemas import Prescription, PrescriptionIn
from api.routes.deps import get_current_session
from api.services.reminder_service import ReminderService, get_reminder_service
from api.services.session_store import Session

router = APIRouter(prefix="/api/prescriptions", tags=["prescriptions"])


@router.get("", response_model=List[Prescription])
def list_prescriptions(
    q: Optional[str] = None,
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> List[Prescription]:
    """Return visible prescriptions, optionally filtered by patient or medicine name."""

    return service.list_prescriptions(session, q)


@router.post("", response_model=Prescription)
def create_prescription(
    request: PrescriptionIn,
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> Prescription:
    try:
        return service.create_prescription(session, request)
    except PermissionError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/{prescription_id}", response_model=Prescription)
def get_prescription(
    prescription_id: int,
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> Prescription:
    try:
        return service.get_prescription(session, prescription_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.put("/{prescription_id}", response_model=Prescription)
def update_prescription(
    prescription_id: int,
    request: PrescriptionIn,
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> Prescription:
    try:
        return service.update_prescription(session, prescription_id, request)
    except PermissionError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/{prescription_id}")
def delete_prescription(
    prescription_id: int,
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> dict[str, bool]:
    try:
        service.delete_prescription(session, prescription_id)
    except PermissionError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"ok": True}
