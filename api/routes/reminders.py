"""HTTP routes exposing today's reminders and the taken toggles."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from api.models.schemas import (
    MarkAllResponse,
    NextReminderResponse,
    ReminderListResponse,
    ReminderView,
    ToggleResponse,
)
from api.routes.deps import get_current_session
from api.services.reminder_service import ReminderService, get_reminder_service
from api.services.session_store import Session

router = APIRouter(prefix="/api/reminders", tags=["reminders"])


@router.get("", response_model=ReminderListResponse)
def list_reminders(
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> ReminderListResponse:
    """Return today's reminders ordered by scheduled time."""

    events = service.reminders(session)
    return ReminderListResponse(reminders=[ReminderView.from_event(e) for e in events])


@router.get("/next", response_model=NextReminderResponse)
def next_reminder(
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> NextReminderResponse:
    event = service.next_reminder(session)
    return NextReminderResponse(reminder=ReminderView.from_event(event) if event is not None else None)


@router.post("/mark-all", response_model=MarkAllResponse)
def mark_all_taken(
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> MarkAllResponse:
    """Mark every pending reminder as taken."""

    try:
        result = service.mark_all(session)
    except PermissionError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    if result.nothing_to_do:
        return MarkAllResponse(nothing_to_do=True, detail="No pending reminders")
    return MarkAllResponse(marked=result.marked)


@router.post("/{reminder_id}/toggle", response_model=ToggleResponse)
def toggle_taken(
    reminder_id: str,
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> ToggleResponse:
    """Flip the taken flag of one reminder."""

    try:
        taken = service.toggle(session, reminder_id)
    except PermissionError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return ToggleResponse(id=reminder_id, taken=taken)
