"""
Composition root.

Builds every collaborator once at process start; call sites receive the
container's objects instead of importing module-level singletons.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from nutrisync.application.calorie_plan import CaloriePlanResolver
from nutrisync.application.offline_sync import OfflineFirstWriter, OfflineQueue
from nutrisync.domain.calorie_plan.core.ports import ICalorieAdvisor
from nutrisync.domain.offline_sync.core.ports import IKeyValueStorage, IRemoteStore
from nutrisync.infrastructure.ai import create_calorie_advisor
from nutrisync.infrastructure.config import Settings, load_settings
from nutrisync.infrastructure.logging_config import configure_logging
from nutrisync.infrastructure.remote import InMemoryRemoteStore, PostgrestRemoteStore
from nutrisync.infrastructure.scheduler import OfflineQueueDrainJob, SchedulerManager
from nutrisync.infrastructure.storage import JsonFileKeyValueStorage

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Process-wide collaborators."""

    settings: Settings
    storage: IKeyValueStorage
    remote: IRemoteStore
    queue: OfflineQueue
    writer: OfflineFirstWriter
    scheduler: SchedulerManager
    drain_job: OfflineQueueDrainJob
    resolver: CaloriePlanResolver
    advisor: Optional[ICalorieAdvisor] = None

    async def start(self) -> None:
        """Restore the persisted queue and start the drain timer.

        Must run inside the event loop the scheduler should use.
        """
        restored = await self.queue.load()
        self.scheduler.start()
        logger.info("NutriSync started", extra={"restored_operations": restored})

    async def shutdown(self) -> None:
        """Stop the drain timer and release HTTP clients."""
        self.scheduler.shutdown(wait=False)
        if self.advisor is not None:
            await self.advisor.aclose()
        aclose = getattr(self.remote, "aclose", None)
        if aclose is not None:
            await aclose()
        logger.info("NutriSync stopped")


def build_remote_store(settings: Settings) -> IRemoteStore:
    """PostgREST store when Supabase is configured, in-memory otherwise."""
    if settings.remote_configured:
        return PostgrestRemoteStore(
            base_url=settings.supabase_url,  # type: ignore[arg-type]
            api_key=settings.supabase_anon_key,  # type: ignore[arg-type]
            timeout_s=settings.remote_timeout_s,
        )
    logger.warning("Supabase not configured, using in-memory remote store")
    return InMemoryRemoteStore()


def build_container(
    settings: Optional[Settings] = None,
    storage: Optional[IKeyValueStorage] = None,
    remote: Optional[IRemoteStore] = None,
    advisor: Optional[ICalorieAdvisor] = None,
) -> Container:
    """
    Wire the application.

    Args:
        settings: Configuration (defaults to ``load_settings()``)
        storage: Override local storage
        remote: Override remote store
        advisor: Override AI advisor (otherwise built from settings)
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    storage = storage or JsonFileKeyValueStorage(settings.storage_path)
    remote = remote or build_remote_store(settings)
    advisor = advisor or create_calorie_advisor(settings)

    queue = OfflineQueue(
        storage=storage,
        remote=remote,
        storage_key=settings.queue_storage_key,
        max_attempts=settings.queue_max_attempts,
    )
    drain_job = OfflineQueueDrainJob(queue)
    scheduler = SchedulerManager()
    scheduler.initialize(drain_job, interval_seconds=settings.drain_interval_s)

    resolver = CaloriePlanResolver(
        advisor=advisor,
        timeout_s=settings.ai_timeout_s,
        enforce_floor_on_ai=settings.ai_enforce_calorie_floor,
    )

    return Container(
        settings=settings,
        storage=storage,
        remote=remote,
        queue=queue,
        writer=OfflineFirstWriter(remote, queue),
        scheduler=scheduler,
        drain_job=drain_job,
        resolver=resolver,
        advisor=advisor,
    )
