"""
Ingestion Scheduler.

Background task that runs feed ingestion shortly after startup and then,
optionally, on a fixed interval.
"""

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ingestion import FeedIngestor


logger = logging.getLogger(__name__)


class IngestionScheduler:
    """
    Background scheduler for feed ingestion.

    An interval of 0 means a single run after the initial delay.
    """

    def __init__(
        self,
        ingestor: "FeedIngestor",
        initial_delay: float = 5,
        interval_minutes: float = 0,
    ):
        self.ingestor = ingestor
        self.initial_delay = initial_delay
        self.interval_minutes = interval_minutes
        self._task: asyncio.Task | None = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    async def start(self):
        """Start the scheduler."""
        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        if self.interval_minutes > 0:
            logger.info(
                f"Ingestion scheduler started (first run in {self.initial_delay}s, "
                f"interval: {self.interval_minutes} minutes)"
            )
        else:
            logger.info(f"Ingestion scheduler started (single run in {self.initial_delay}s)")

    async def stop(self):
        """Stop the scheduler."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info("Ingestion scheduler stopped")

    async def _run_loop(self):
        """Main scheduling loop."""
        # Initial delay to let the server fully start
        await asyncio.sleep(self.initial_delay)

        while self._running:
            try:
                await self.ingestor.run()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.exception(f"Error in ingestion loop: {e}")

            if self.interval_minutes <= 0:
                self._running = False
                break

            # Wait for next run
            await asyncio.sleep(self.interval_minutes * 60)
