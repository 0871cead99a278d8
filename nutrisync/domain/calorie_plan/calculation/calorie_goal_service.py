"""CalorieGoalService - daily calorie target from TDEE and weight objective."""

from ..core.value_objects.calorie_profile import CalorieProfile
from ..core.value_objects.gender import Gender

# ~0.5 kg/week loss
DEFICIT_KCAL = 500
# ~0.3 kg/week gain
SURPLUS_KCAL = 300


class CalorieGoalService:
    """Derive the daily calorie goal.

    - target < current: TDEE - 500
    - target > current: TDEE + 300
    - target == current: TDEE

    The result is never below the gender-specific safety floor
    (1500 kcal for male profiles, 1200 kcal otherwise).
    """

    def calculate(self, tdee: float, profile: CalorieProfile) -> float:
        """Apply the weight-direction adjustment and the safety floor."""
        goal = self.adjust_for_direction(tdee, profile.weight_delta_kg)
        return self.apply_floor(goal, profile.gender)

    @staticmethod
    def adjust_for_direction(tdee: float, weight_delta_kg: float) -> float:
        if weight_delta_kg < 0:
            return tdee - DEFICIT_KCAL
        if weight_delta_kg > 0:
            return tdee + SURPLUS_KCAL
        return tdee

    @staticmethod
    def apply_floor(calories: float, gender: Gender) -> float:
        return max(calories, gender.calorie_floor())
