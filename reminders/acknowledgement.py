"""Acknowledgement controller for the "taken" flag namespace."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from reminders.flags import FlagStore, read_flag, taken_key

logger = logging.getLogger(__name__)


@dataclass
class MarkAllResult:
    marked: List[str] = field(default_factory=list)
    already_taken: List[str] = field(default_factory=list)
    nothing_to_do: bool = False


class AcknowledgementController:
    """Record and undo "taken" acknowledgements.

    Only the taken namespace is written here; notified flags belong to the
    notification sweep.
    """

    def __init__(self, flags: FlagStore) -> None:
        self.flags = flags

    def is_taken(self, reminder_id: str) -> bool:
        return read_flag(self.flags, taken_key(reminder_id))

    def toggle_taken(self, reminder_id: str) -> bool:
        key = taken_key(reminder_id)
        if read_flag(self.flags, key):
            self.flags.clear_flag(key)
            logger.info("Reminder %s marked as not taken", reminder_id)
            return False
        self.flags.set_flag(key, True)
        logger.info("Reminder %s marked as taken", reminder_id)
        return True

    def mark_all_taken(self, reminder_ids: Iterable[str]) -> MarkAllResult:
        ids = list(dict.fromkeys(reminder_ids))
        if not ids:
            return MarkAllResult(nothing_to_do=True)
        result = MarkAllResult()
        for reminder_id in ids:
            key = taken_key(reminder_id)
            if read_flag(self.flags, key):
                result.already_taken.append(reminder_id)
                continue
            self.flags.set_flag(key, True)
            result.marked.append(reminder_id)
        logger.info("Marked %d reminders as taken", len(result.marked))
        return result
