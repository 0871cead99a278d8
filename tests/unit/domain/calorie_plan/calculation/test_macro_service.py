"""Unit tests for MacroService."""

from dataclasses import replace

import pytest

from nutrisync.domain.calorie_plan.calculation.macro_service import MacroService
from nutrisync.domain.calorie_plan.core.value_objects import MacroBreakdown


class TestMacroService:
    def setup_method(self):
        self.service = MacroService()

    def test_default_split(self, male_profile):
        assert self.service.calculate(male_profile) == MacroBreakdown(25, 45, 30)

    @pytest.mark.parametrize("tag", ["build_muscle", "muscle_gain", "Build_Muscle "])
    def test_muscle_building_split(self, male_profile, tag):
        profile = replace(male_profile, goals=("lose_weight", tag))

        assert self.service.calculate(profile) == MacroBreakdown(30, 40, 30)

    def test_other_goals_keep_default(self, male_profile):
        profile = replace(male_profile, goals=("improve_health", "eat_better"))

        assert self.service.calculate(profile).protein == 25

    def test_split_sums_to_100(self, male_profile):
        assert self.service.calculate(male_profile).total() == 100
