"""Unit tests for TDEEService."""

import pytest

from nutrisync.domain.calorie_plan.calculation.tdee_service import TDEEService
from nutrisync.domain.calorie_plan.core.value_objects import ActivityLevel


class TestTDEEService:
    """Test TDEE = BMR × PAL."""

    def setup_method(self):
        self.service = TDEEService()

    @pytest.mark.parametrize(
        "level,multiplier",
        [
            (ActivityLevel.SEDENTARY, 1.2),
            (ActivityLevel.LIGHTLY_ACTIVE, 1.375),
            (ActivityLevel.MODERATELY_ACTIVE, 1.55),
            (ActivityLevel.VERY_ACTIVE, 1.725),
            (ActivityLevel.EXTREMELY_ACTIVE, 1.9),
        ],
    )
    def test_multipliers(self, level, multiplier):
        assert self.service.calculate(1000.0, level) == pytest.approx(1000.0 * multiplier)

    def test_sedentary_example(self):
        assert self.service.calculate(1749, ActivityLevel.SEDENTARY) == pytest.approx(2098.8)

    def test_activity_level_values_match_onboarding(self):
        """Enum values are the keys sent by the onboarding screens."""
        assert [level.value for level in ActivityLevel] == [
            "sedentary",
            "lightly_active",
            "moderately_active",
            "very_active",
            "extremely_active",
        ]
