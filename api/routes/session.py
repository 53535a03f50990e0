"""HTTP routes for opening and closing a reminder session.

Opening a session starts that session's notification sweep; closing it
stops the sweep. Alerts raised by the sweep are polled from the inbox.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from api.models.schemas import (
    Alert,
    AlertListResponse,
    SessionRequest,
    SessionResponse,
    SessionSettingsRequest,
)
from api.routes.deps import get_current_session
from api.services.reminder_service import ReminderService, get_reminder_service
from api.services.session_store import Session

router = APIRouter(prefix="/api/session", tags=["session"])


@router.post("", response_model=SessionResponse)
async def open_session(
    request: SessionRequest, service: ReminderService = Depends(get_reminder_service)
) -> SessionResponse:
    """Start a session for a demo user and begin sweeping their reminders."""

    try:
        session = service.login(request.username)
    except KeyError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    return _session_response(session)


@router.get("", response_model=SessionResponse)
def current_session(session: Session = Depends(get_current_session)) -> SessionResponse:
    return _session_response(session)


@router.delete("")
async def close_session(
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> dict[str, bool]:
    """End the session; no further sweep ticks run for it."""

    service.logout(session.token)
    return {"ok": True}


@router.put("/settings", response_model=SessionResponse)
def update_settings(
    request: SessionSettingsRequest,
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> SessionResponse:
    if request.notifications_enabled is not None:
        service.set_notifications(session, request.notifications_enabled)
    return _session_response(session)


@router.get("/alerts", response_model=AlertListResponse)
def drain_alerts(
    session: Session = Depends(get_current_session),
    service: ReminderService = Depends(get_reminder_service),
) -> AlertListResponse:
    """Return and clear the alerts raised since the last poll."""

    return AlertListResponse(
        alerts=[Alert(title=m.title, body=m.body) for m in service.drain_alerts(session)]
    )


def _session_response(session: Session) -> SessionResponse:
    return SessionResponse(
        token=session.token,
        user_id=session.user.id,
        name=session.user.name,
        username=session.user.username,
        role=session.user.role,
        notifications_enabled=session.notifications_enabled,
    )
