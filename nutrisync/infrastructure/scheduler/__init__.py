"""
Scheduler infrastructure for background jobs.
"""

from .offline_queue_drain_job import OfflineQueueDrainJob
from .scheduler_config import SchedulerManager

__all__ = ["SchedulerManager", "OfflineQueueDrainJob"]
