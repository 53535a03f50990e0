"""Shared route dependencies."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException

from api.services.reminder_service import ReminderService, get_reminder_service
from api.services.session_store import Session


def get_current_session(
    authorization: Optional[str] = Header(None),
    service: ReminderService = Depends(get_reminder_service),
) -> Session:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="Missing token")
    token = authorization.split(" ", 1)[1].strip()
    try:
        return service.sessions.get(token)
    except KeyError as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc
