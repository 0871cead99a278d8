"""MacroService - default macronutrient split."""

from ..core.value_objects.calorie_profile import CalorieProfile
from ..core.value_objects.macro_breakdown import MacroBreakdown

MUSCLE_BUILDING_GOALS = ("build_muscle", "muscle_gain", "gain_muscle")

DEFAULT_SPLIT = MacroBreakdown(protein=25, carbs=45, fats=30)
MUSCLE_BUILDING_SPLIT = MacroBreakdown(protein=30, carbs=40, fats=30)


class MacroService:
    """Pick a macro split from the profile goals.

    Defaults to 25/45/30 (protein/carbs/fats); profiles with a
    muscle-building goal get 30/40/30.
    """

    def calculate(self, profile: CalorieProfile) -> MacroBreakdown:
        if profile.has_goal(*MUSCLE_BUILDING_GOALS):
            return MUSCLE_BUILDING_SPLIT
        return DEFAULT_SPLIT
