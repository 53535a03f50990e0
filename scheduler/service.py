"""Periodic notification sweeps for active sessions."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict

from reminders.sweep import NotificationSweep, SweepTarget

logger = logging.getLogger(__name__)


class SweepScheduler:
    """Run one sweep loop per active session on the running event loop.

    Ticks run on the loop itself, so they never overlap with each other or
    with request handlers. Stopping a session cancels its loop while it
    sleeps; no further tick is scheduled.
    """

    def __init__(self, sweep: NotificationSweep, interval_seconds: float = 30.0) -> None:
        self.sweep = sweep
        self.interval_seconds = interval_seconds
        self._tasks: Dict[str, asyncio.Task] = {}

    def start(self, token: str, session: SweepTarget) -> None:
        task = self._tasks.get(token)
        if task is not None and not task.done():
            return
        self._tasks[token] = asyncio.get_running_loop().create_task(
            self._run(token, session), name=f"sweep-{token[:8]}"
        )
        logger.info("Started reminder sweep every %ss", self.interval_seconds)

    def stop(self, token: str) -> None:
        task = self._tasks.pop(token, None)
        if task is not None:
            task.cancel()
            logger.info("Stopped reminder sweep")

    def is_running(self, token: str) -> bool:
        task = self._tasks.get(token)
        return task is not None and not task.done()

    async def shutdown(self) -> None:
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self, token: str, session: SweepTarget) -> None:
        while session.active:
            await asyncio.sleep(self.interval_seconds)
            if not session.active:
                break
            try:
                self.sweep.tick(session)
            except Exception:
                logger.exception("Reminder sweep tick failed")
        self._tasks.pop(token, None)
