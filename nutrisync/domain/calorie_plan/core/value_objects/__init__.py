"""Value objects for calorie plan domain."""

from .activity_level import ActivityLevel
from .calculation_method import CalculationMethod
from .calorie_profile import CalorieProfile
from .calorie_result import CalorieResult
from .gender import Gender
from .macro_breakdown import MacroBreakdown

__all__ = [
    "ActivityLevel",
    "Gender",
    "CalorieProfile",
    "CalorieResult",
    "CalculationMethod",
    "MacroBreakdown",
]
