"""Alert sinks used by the notification sweep."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Protocol

logger = logging.getLogger(__name__)


class AlertSink(Protocol):
    def notify(self, title: str, body: str) -> None:
        ...


@dataclass
class AlertMessage:
    title: str
    body: str


class LoggingAlertSink:
    """Write alerts to the log, for headless runs."""

    def notify(self, title: str, body: str) -> None:
        logger.info("Alert: %s (%s)", title, body)


class InboxAlertSink:
    """Per-session bounded inbox that the web client polls.

    ``notify`` is a silent no-op while notifications are not permitted.
    Accepted alerts are also passed to ``forward`` when one is set.
    """

    def __init__(
        self, enabled: bool = True, capacity: int = 50, forward: Optional[AlertSink] = None
    ) -> None:
        self.enabled = enabled
        self.forward = forward
        self._messages: Deque[AlertMessage] = deque(maxlen=capacity)

    def notify(self, title: str, body: str) -> None:
        if not self.enabled:
            return
        self._messages.append(AlertMessage(title=title, body=body))
        if self.forward is not None:
            self.forward.notify(title, body)

    def drain(self) -> List[AlertMessage]:
        messages = list(self._messages)
        self._messages.clear()
        return messages
