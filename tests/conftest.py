"""Shared test fixtures."""

import pytest

from nutrisync.application.offline_sync import OfflineQueue
from nutrisync.domain.calorie_plan.core.value_objects import (
    ActivityLevel,
    CalorieProfile,
    Gender,
)
from nutrisync.infrastructure.remote import InMemoryRemoteStore
from nutrisync.infrastructure.storage import InMemoryKeyValueStorage


@pytest.fixture
def male_profile() -> CalorieProfile:
    """30y male, 175cm, 80kg -> 75kg, sedentary."""
    return CalorieProfile(
        age=30,
        gender=Gender.MALE,
        height_cm=175,
        current_weight_kg=80,
        target_weight_kg=75,
        activity_level=ActivityLevel.SEDENTARY,
        goals=(),
    )


@pytest.fixture
def female_profile() -> CalorieProfile:
    """30y female, 165cm, 60kg -> 55kg, sedentary."""
    return CalorieProfile(
        age=30,
        gender=Gender.FEMALE,
        height_cm=165,
        current_weight_kg=60,
        target_weight_kg=55,
        activity_level=ActivityLevel.SEDENTARY,
        goals=(),
    )


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def remote() -> InMemoryRemoteStore:
    return InMemoryRemoteStore()


@pytest.fixture
def queue(storage: InMemoryKeyValueStorage, remote: InMemoryRemoteStore) -> OfflineQueue:
    """Fresh queue per test."""
    return OfflineQueue(storage=storage, remote=remote)
