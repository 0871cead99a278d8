"""Unit tests for FallbackCalculator, TimelineService and rounding."""

from dataclasses import replace

import pytest

from nutrisync.domain.calorie_plan.calculation import (
    FallbackCalculator,
    TimelineService,
    round_half_up,
)
from nutrisync.domain.calorie_plan.calculation.fallback_calculator import DEFAULT_ADVICE
from nutrisync.domain.calorie_plan.core.value_objects import (
    ActivityLevel,
    CalculationMethod,
    CalorieProfile,
    Gender,
    MacroBreakdown,
)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [(2128.5, 2129), (2128.4, 2128), (1748.75, 1749), (0.5, 1), (-1.5, -2)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestTimelineService:
    def setup_method(self):
        self.service = TimelineService()

    def test_weeks_to_goal_loss(self, male_profile):
        # 5kg at 0.5kg/week
        assert self.service.weeks_to_goal(male_profile) == 10

    def test_weeks_round_up(self, male_profile):
        profile = replace(male_profile, target_weight_kg=79.2)

        assert self.service.weeks_to_goal(profile) == 2

    def test_estimate_text(self, male_profile):
        assert self.service.estimate(male_profile) == (
            "You can expect to reach your target weight in approximately "
            "10 weeks with consistent effort"
        )

    def test_estimate_keeps_plural_template(self, male_profile):
        profile = replace(male_profile, target_weight_kg=79.5)

        assert "approximately 1 weeks with" in self.service.estimate(profile)

    def test_estimate_at_target(self, male_profile):
        profile = replace(male_profile, target_weight_kg=80)

        assert self.service.weeks_to_goal(profile) == 0
        assert self.service.estimate(profile) == (
            "You can expect to reach your target weight in approximately "
            "0 weeks with consistent effort"
        )


class TestFallbackCalculator:
    """Test the deterministic calorie plan."""

    def setup_method(self):
        self.calculator = FallbackCalculator()

    def test_male_loss_example(self, male_profile):
        """BMR 1748.75 -> 1749, TDEE 2098.8 -> 2099, goal 2099 - 500."""
        result = self.calculator.calculate(male_profile)

        assert result.bmr == 1749
        assert result.tdee == 2099
        assert result.daily_calorie_goal == 1599
        assert result.macro_breakdown == MacroBreakdown(25, 45, 30)
        assert result.calculation_method is CalculationMethod.MANUAL

    def test_female_loss_hits_floor(self, female_profile):
        """BMR 1320.25 -> 1320, TDEE 1584, goal 1084 clamped to 1200."""
        result = self.calculator.calculate(female_profile)

        assert result.bmr == 1320
        assert result.tdee == 1584
        assert result.daily_calorie_goal == 1200

    def test_gain_with_muscle_goal(self, male_profile):
        profile = replace(
            male_profile,
            target_weight_kg=85,
            activity_level=ActivityLevel.MODERATELY_ACTIVE,
            goals=("build_muscle",),
        )

        result = self.calculator.calculate(profile)

        # 1749 * 1.55 = 2710.95 -> 2711, + 300
        assert result.tdee == 2711
        assert result.daily_calorie_goal == 3011
        assert result.macro_breakdown == MacroBreakdown(30, 40, 30)

    def test_maintain_goal_equals_tdee(self, male_profile):
        result = self.calculator.calculate(replace(male_profile, target_weight_kg=80))

        assert result.daily_calorie_goal == result.tdee

    def test_default_advice_and_timeline(self, male_profile):
        result = self.calculator.calculate(male_profile)

        assert result.personalized_advice == DEFAULT_ADVICE
        assert 3 <= len(result.personalized_advice) <= 5
        assert "10 weeks" in result.timeline_estimate

    @pytest.mark.parametrize("gender", list(Gender))
    @pytest.mark.parametrize("level", list(ActivityLevel))
    def test_goal_never_below_floor(self, gender, level):
        """Smallest valid profiles still respect the safety floor."""
        profile = CalorieProfile(
            age=120,
            gender=gender,
            height_cm=100,
            current_weight_kg=30,
            target_weight_kg=30,
            activity_level=level,
        )
        loss = replace(profile, current_weight_kg=40)

        for p in (profile, loss):
            result = self.calculator.calculate(p)
            assert result.daily_calorie_goal >= gender.calorie_floor()

    def test_services_are_injectable(self, male_profile):
        class FixedBMR:
            def calculate(self, profile):
                return 1000.4

        result = FallbackCalculator(bmr_service=FixedBMR()).calculate(male_profile)

        assert result.bmr == 1000
        assert result.tdee == 1200
        # 1200 - 500 = 700, male floor
        assert result.daily_calorie_goal == 1500
