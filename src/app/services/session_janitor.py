"""
Session Janitor

Background sweep that deletes expired sessions. Lookups already evict the
sessions they touch; this keeps the table from growing with sessions nobody
presents again.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

logger = logging.getLogger(__name__)


class SessionJanitor:
    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        interval_seconds: float,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow_factory = uow_factory
        self.interval_seconds = interval_seconds
        self.clock = clock
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def sweep_once(self) -> int:
        """Delete every expired session. Returns how many were removed."""
        uow = self.uow_factory()
        async with uow:
            removed = await uow.sessions.delete_expired(self.clock())
            await uow.commit()
        if removed:
            logger.info(f"Session sweep removed {removed} expired session(s)")
        return removed

    async def _run(self):
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.sweep_once()
            except Exception:
                logger.exception("Session sweep failed")

    def start(self):
        if self.is_running:
            return
        logger.info(
            f"Starting session janitor (interval={self.interval_seconds}s)"
        )
        self._task = asyncio.create_task(self._run())

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Session janitor stopped")
