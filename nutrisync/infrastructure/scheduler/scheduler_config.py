"""
APScheduler configuration and management.

Provides centralized scheduler configuration for background jobs
like the periodic offline queue drain.
"""

import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .offline_queue_drain_job import OfflineQueueDrainJob

logger = logging.getLogger(__name__)

DRAIN_JOB_ID = "offline_queue_drain"


class SchedulerManager:
    """
    Manages APScheduler lifecycle and job registration.

    Owns the application scheduler, handling initialization, job
    registration, and shutdown.
    """

    def __init__(self) -> None:
        """Initialize scheduler manager."""
        self.scheduler: Optional[AsyncIOScheduler] = None
        self._drain_job: Optional[OfflineQueueDrainJob] = None

    def initialize(
        self,
        drain_job: OfflineQueueDrainJob,
        interval_seconds: float = 30.0,
    ) -> None:
        """
        Initialize and configure scheduler with jobs.

        Args:
            drain_job: Offline queue drain job instance
            interval_seconds: Seconds between drain passes (default: 30)
        """
        if self.scheduler is not None:
            logger.warning("Scheduler already initialized")
            return

        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")

        self._drain_job = drain_job

        self.scheduler = AsyncIOScheduler(
            timezone="UTC",
            job_defaults={
                "coalesce": True,  # Combine missed runs
                "max_instances": 1,  # One drain pass at a time
                "misfire_grace_time": int(max(interval_seconds, 1)),
            },
        )

        self._register_drain_job(interval_seconds)

        logger.info("Scheduler initialized successfully")

    def _register_drain_job(self, interval_seconds: float) -> None:
        """
        Register the periodic offline queue drain.

        Args:
            interval_seconds: Seconds between runs
        """
        if self.scheduler is None or self._drain_job is None:
            raise RuntimeError("Scheduler not initialized")

        self.scheduler.add_job(
            self._drain_job.run,
            trigger=IntervalTrigger(seconds=interval_seconds, timezone="UTC"),
            id=DRAIN_JOB_ID,
            name="Offline Queue Drain",
            replace_existing=True,
        )

        logger.info(f"Offline queue drain job registered every {interval_seconds:g}s")

    def start(self) -> None:
        """Start scheduler (begin executing jobs). Requires a running event loop."""
        if self.scheduler is None:
            raise RuntimeError("Scheduler not initialized")

        if self.scheduler.running:
            logger.warning("Scheduler already running")
            return

        self.scheduler.start()
        logger.info("Scheduler started")

    def shutdown(self, wait: bool = True) -> None:
        """
        Shutdown scheduler gracefully.

        Args:
            wait: If True, wait for running jobs to complete
        """
        if self.scheduler is None:
            logger.warning("Scheduler not initialized")
            return

        if not self.scheduler.running:
            logger.warning("Scheduler not running")
            return

        self.scheduler.shutdown(wait=wait)
        logger.info(f"Scheduler shutdown (wait={wait})")

    def get_jobs(self) -> list[dict[str, str]]:
        """
        Get list of scheduled jobs.

        Returns:
            list[dict[str, str]]: List of job information
        """
        if self.scheduler is None:
            return []

        jobs = self.scheduler.get_jobs()
        return [
            {
                "id": job.id,
                "name": job.name,
                "next_run": str(getattr(job, "next_run_time", None)),
                "trigger": str(job.trigger),
            }
            for job in jobs
        ]

    async def trigger_drain_now(self) -> None:
        """
        Run the drain job immediately, outside the schedule.

        Useful for tests or after a known reconnect.
        """
        if self._drain_job is None:
            raise RuntimeError("Drain job not initialized")

        logger.info("Manually triggering offline queue drain")
        await self._drain_job.run()
