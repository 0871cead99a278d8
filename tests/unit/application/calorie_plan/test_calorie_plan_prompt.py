"""Unit tests for calorie plan prompt construction."""

from dataclasses import replace

from nutrisync.application.calorie_plan import build_calorie_plan_prompt


class TestBuildCaloriePlanPrompt:
    def test_embeds_profile(self, male_profile):
        prompt = build_calorie_plan_prompt(male_profile)

        assert "Age: 30 years" in prompt
        assert "Gender: male" in prompt
        assert "Height: 175 cm" in prompt
        assert "Current Weight: 80 kg" in prompt
        assert "Target Weight: 75 kg (lose weight)" in prompt
        assert "Activity Level: sedentary" in prompt
        assert "Goals: general health" in prompt

    def test_lists_goals(self, male_profile):
        prompt = build_calorie_plan_prompt(
            replace(male_profile, goals=("build_muscle", "eat_better"))
        )

        assert "Goals: build_muscle, eat_better" in prompt

    def test_contains_json_contract_and_floor(self, male_profile):
        prompt = build_calorie_plan_prompt(male_profile)

        assert "RESPOND ONLY WITH VALID JSON" in prompt
        assert '"dailyCalorieGoal"' in prompt
        assert "never 1/2" in prompt
        assert "1200 for women or 1500 for men" in prompt
