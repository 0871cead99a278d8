"""Unit tests for create_calorie_advisor."""

import pytest

from nutrisync.infrastructure.ai import create_calorie_advisor
from nutrisync.infrastructure.ai.gemini import GeminiCalorieAdvisor
from nutrisync.infrastructure.ai.openai import OpenAICalorieAdvisor
from nutrisync.infrastructure.ai.retry_policy import is_transient
from nutrisync.domain.calorie_plan.core.exceptions import (
    ApiError,
    NetworkError,
    ParsingError,
)
from nutrisync.infrastructure.config import Settings


class TestCreateCalorieAdvisor:
    def test_gemini(self) -> None:
        advisor = create_calorie_advisor(Settings(gemini_api_key="AIza-test"))

        assert isinstance(advisor, GeminiCalorieAdvisor)

    def test_openai(self) -> None:
        advisor = create_calorie_advisor(
            Settings(ai_provider="openai", openai_api_key="sk-test")
        )

        assert isinstance(advisor, OpenAICalorieAdvisor)

    @pytest.mark.parametrize("provider", ["gemini", "openai"])
    def test_missing_key_disables_ai(self, provider) -> None:
        assert create_calorie_advisor(Settings(ai_provider=provider)) is None

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="AI_CALORIE_PROVIDER"):
            create_calorie_advisor(Settings(ai_provider="claude"))


class TestIsTransient:
    @pytest.mark.parametrize(
        "error,expected",
        [
            (NetworkError("down"), True),
            (ApiError("busy", status_code=429), True),
            (ApiError("boom", status_code=502), True),
            (ApiError("bad", status_code=400), False),
            (ApiError("envelope"), False),
            (ParsingError("nope"), False),
            (RuntimeError("bug"), False),
        ],
    )
    def test_is_transient(self, error, expected) -> None:
        assert is_transient(error) is expected
