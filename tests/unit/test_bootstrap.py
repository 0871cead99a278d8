"""Unit tests for the composition root."""

import json

import pytest

from nutrisync.application.offline_sync import DEFAULT_STORAGE_KEY
from nutrisync.bootstrap import build_container, build_remote_store
from nutrisync.domain.calorie_plan.core.value_objects import CalculationMethod
from nutrisync.infrastructure.config import Settings
from nutrisync.infrastructure.remote import InMemoryRemoteStore, PostgrestRemoteStore
from nutrisync.infrastructure.storage import InMemoryKeyValueStorage


class TestBuildRemoteStore:
    def test_in_memory_without_supabase(self) -> None:
        assert isinstance(build_remote_store(Settings()), InMemoryRemoteStore)

    @pytest.mark.asyncio
    async def test_postgrest_when_configured(self) -> None:
        store = build_remote_store(
            Settings(supabase_url="https://x.supabase.co", supabase_anon_key="anon")
        )

        assert isinstance(store, PostgrestRemoteStore)
        await store.aclose()


class TestContainer:
    """End-to-end wiring with in-memory adapters."""

    @pytest.mark.asyncio
    async def test_offline_write_then_drain(self) -> None:
        remote = InMemoryRemoteStore(online=False)
        storage = InMemoryKeyValueStorage()
        container = build_container(Settings(), storage=storage, remote=remote)

        await container.start()
        try:
            outcome = await container.writer.insert("water_intake", {"id": "w1"})
            assert outcome.queued

            remote.online = True
            await container.scheduler.trigger_drain_now()
        finally:
            await container.shutdown()

        assert remote.calls == [("insert", "water_intake", "w1")]
        assert json.loads(await storage.get(DEFAULT_STORAGE_KEY)) == []

    @pytest.mark.asyncio
    async def test_start_restores_persisted_queue(self) -> None:
        document = json.dumps(
            [{"operation": "delete", "table": "meals", "data": {"id": "m1"}, "timestamp": 1}]
        )
        storage = InMemoryKeyValueStorage({DEFAULT_STORAGE_KEY: document})
        container = build_container(
            Settings(), storage=storage, remote=InMemoryRemoteStore()
        )

        await container.start()
        try:
            assert container.queue.pending == 1
            assert container.scheduler.get_jobs()[0]["id"] == "offline_queue_drain"
        finally:
            await container.shutdown()

    @pytest.mark.asyncio
    async def test_resolver_without_ai_key(self, male_profile) -> None:
        container = build_container(
            Settings(), storage=InMemoryKeyValueStorage(), remote=InMemoryRemoteStore()
        )

        result = await container.resolver.resolve(male_profile)

        assert container.advisor is None
        assert result.calculation_method is CalculationMethod.MANUAL
