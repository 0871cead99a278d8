"""Unit tests for BMRService."""

import pytest

from nutrisync.domain.calorie_plan.calculation.bmr_service import BMRService
from nutrisync.domain.calorie_plan.core.value_objects import (
    ActivityLevel,
    CalorieProfile,
    Gender,
)


def _profile(**overrides) -> CalorieProfile:
    data = dict(
        age=30,
        gender=Gender.MALE,
        height_cm=175.0,
        current_weight_kg=80.0,
        target_weight_kg=80.0,
        activity_level=ActivityLevel.SEDENTARY,
    )
    data.update(overrides)
    return CalorieProfile(**data)


class TestBMRService:
    """Test BMR calculation using Mifflin-St Jeor formula."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMRService()

    def test_calculate_bmr_male(self):
        """Test BMR calculation for male."""
        bmr = self.service.calculate(_profile())

        # Expected: 10*80 + 6.25*175 - 5*30 + 5 = 1748.75
        assert bmr == 1748.75

    def test_calculate_bmr_female(self):
        """Test BMR calculation for female."""
        bmr = self.service.calculate(
            _profile(gender=Gender.FEMALE, height_cm=165.0, current_weight_kg=60.0)
        )

        # Expected: 10*60 + 6.25*165 - 5*30 - 161 = 1320.25
        assert bmr == 1320.25

    def test_other_gender_uses_female_constant(self):
        """Non-male profiles use the -161 constant."""
        female = self.service.calculate(_profile(gender=Gender.FEMALE))
        other = self.service.calculate(_profile(gender=Gender.OTHER))

        assert other == female

    def test_male_female_difference_is_166(self):
        male = self.service.calculate(_profile(gender=Gender.MALE))
        female = self.service.calculate(_profile(gender=Gender.FEMALE))

        assert male - female == 166.0

    @pytest.mark.parametrize(
        "field,low,high,expected_diff",
        [
            ("age", 25, 50, -125.0),  # 25 years * -5
            ("current_weight_kg", 60.0, 80.0, 200.0),  # 20kg * 10
            ("height_cm", 160.0, 180.0, 125.0),  # 20cm * 6.25
        ],
    )
    def test_coefficients(self, field, low, high, expected_diff):
        """Each input moves BMR by its Mifflin-St Jeor coefficient."""
        bmr_low = self.service.calculate(_profile(**{field: low}))
        bmr_high = self.service.calculate(_profile(**{field: high}))

        assert bmr_high - bmr_low == expected_diff
