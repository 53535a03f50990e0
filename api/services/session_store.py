"""User sessions for the demo directory.

A session fixes the viewer's visibility scope and owns the alert inbox the
notification sweep writes to. Credentials are not checked.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from api.models.schemas import Role
from knowledge.demo_data import DEMO_USERS, DemoUser
from reminders.alerts import AlertSink, InboxAlertSink
from reminders.deriver import VisibilityScope


@dataclass
class Session:
    token: str
    user: DemoUser
    started_at: datetime
    active: bool = True
    alerts: InboxAlertSink = field(default_factory=InboxAlertSink)

    @property
    def recipient(self) -> str:
        return f"{self.user.role.value}-{self.user.id}"

    @property
    def scope(self) -> VisibilityScope:
        if self.user.role == Role.DOCTOR:
            return VisibilityScope.everyone()
        return VisibilityScope.for_patient(self.user.id)

    @property
    def notifications_enabled(self) -> bool:
        return self.alerts.enabled

    @notifications_enabled.setter
    def notifications_enabled(self, value: bool) -> None:
        self.alerts.enabled = value


class SessionStore:
    """Track open sessions by bearer token."""

    def __init__(self, alert_forward: Optional[AlertSink] = None) -> None:
        self._sessions: Dict[str, Session] = {}
        self.alert_forward = alert_forward

    def open(self, username: str) -> Session:
        user = find_user(username)
        if user is None:
            raise KeyError(f"Unknown user {username!r}")
        session = Session(
            token=secrets.token_urlsafe(32),
            user=user,
            started_at=datetime.now(),
            alerts=InboxAlertSink(forward=self.alert_forward),
        )
        self._sessions[session.token] = session
        return session

    def get(self, token: str) -> Session:
        return self._sessions[token]

    def close(self, token: str) -> Optional[Session]:
        session = self._sessions.pop(token, None)
        if session is not None:
            session.active = False
        return session

    def all(self) -> list[Session]:
        return list(self._sessions.values())


def find_user(username: str) -> Optional[DemoUser]:
    wanted = username.strip()
    for user in DEMO_USERS:
        if user.username == wanted:
            return user
    return None
