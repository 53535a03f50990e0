"""Key/flag store contract shared by the acknowledgement and notification paths."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

TAKEN_PREFIX = "mm_taken_"
NOTIFIED_PREFIX = "mm_notified_"


class FlagStore(Protocol):
    """Durable boolean map owned by the host environment."""

    def get_flag(self, key: str) -> bool:
        ...

    def set_flag(self, key: str, value: bool) -> None:
        ...

    def clear_flag(self, key: str) -> None:
        ...


def taken_key(reminder_id: str) -> str:
    return f"{TAKEN_PREFIX}{reminder_id}"


def notified_key(reminder_id: str, recipient: Optional[str] = None) -> str:
    """Notified flags are kept per recipient so every viewer gets one alert."""

    if recipient:
        return f"{NOTIFIED_PREFIX}{recipient}:{reminder_id}"
    return f"{NOTIFIED_PREFIX}{reminder_id}"


def read_flag(store: FlagStore, key: str) -> bool:
    """Read a flag, treating any store failure as ``False``."""

    try:
        return bool(store.get_flag(key))
    except Exception as exc:
        logger.warning("Flag read failed for %s, assuming unset: %s", key, exc)
        return False
