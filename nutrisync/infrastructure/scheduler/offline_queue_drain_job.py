"""
Periodic offline queue drain job.

Runs every 30 seconds for the lifetime of the process and replays any
queued remote mutations. Polling only: there is no connectivity-restored
trigger.
"""

import logging
from datetime import datetime
from typing import Optional

from nutrisync.application.offline_sync.offline_queue import DrainReport, OfflineQueue

logger = logging.getLogger(__name__)


class OfflineQueueDrainJob:
    """
    Background job wrapping ``OfflineQueue.drain()``.

    Errors are logged and swallowed so the interval timer keeps firing.
    """

    def __init__(self, queue: OfflineQueue):
        self.queue = queue
        self.last_report: Optional[DrainReport] = None
        self.last_run_at: Optional[datetime] = None

    async def run(self) -> Optional[DrainReport]:
        """
        Execute one drain pass.

        Main entry point called by scheduler.
        """
        self.last_run_at = datetime.now()
        try:
            report = await self.queue.drain()
        except Exception as e:
            logger.error(f"Offline queue drain job failed: {e}", exc_info=True)
            return None

        self.last_report = report
        if not report.skipped:
            logger.info(
                f"Offline queue drain: {report.succeeded}/{report.attempted} applied, "
                f"{report.failed} pending, {report.dead_lettered} dead-lettered"
            )
        return report
