"""Calculation services for calorie plans."""

from .bmr_service import BMRService
from .calorie_goal_service import CalorieGoalService
from .fallback_calculator import FallbackCalculator
from .macro_service import MacroService
from .rounding import round_half_up
from .tdee_service import TDEEService
from .timeline_service import TimelineService

__all__ = [
    "BMRService",
    "TDEEService",
    "CalorieGoalService",
    "MacroService",
    "TimelineService",
    "FallbackCalculator",
    "round_half_up",
]
