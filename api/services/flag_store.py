"""Flag store implementations backing taken/notified state.

Both namespaces share one store; the key prefixes keep them disjoint.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)


class InMemoryFlagStore:
    """Process-local flag map."""

    def __init__(self) -> None:
        self._flags: Dict[str, bool] = {}

    def get_flag(self, key: str) -> bool:
        return self._flags.get(key, False)

    def set_flag(self, key: str, value: bool) -> None:
        self._flags[key] = bool(value)

    def clear_flag(self, key: str) -> None:
        self._flags.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._flags)


class JsonFileFlagStore:
    """Flags persisted to a JSON document, rewritten on every change.

    The write goes through a temporary file and ``os.replace`` so a crash
    never leaves a truncated document. Writers from request threads and the
    sweep share one instance, so each load-modify-save holds its lock.
    An unreadable document reads as empty.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def get_flag(self, key: str) -> bool:
        return bool(self._load().get(key, False))

    def set_flag(self, key: str, value: bool) -> None:
        with self._lock:
            flags = self._load()
            flags[key] = bool(value)
            self._save(flags)

    def clear_flag(self, key: str) -> None:
        with self._lock:
            flags = self._load()
            if flags.pop(key, None) is not None:
                self._save(flags)

    def _load(self) -> Dict[str, bool]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Flag store %s unreadable, treating as empty: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Flag store %s is not a JSON object, treating as empty", self.path)
            return {}
        return {str(key): bool(value) for key, value in data.items()}

    def _save(self, flags: Dict[str, bool]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".flags-", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(flags, handle, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
