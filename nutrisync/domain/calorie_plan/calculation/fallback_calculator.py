"""FallbackCalculator - deterministic calorie plan without AI."""

from typing import Optional, Tuple

from ..core.value_objects.calculation_method import CalculationMethod
from ..core.value_objects.calorie_profile import CalorieProfile
from ..core.value_objects.calorie_result import CalorieResult
from .bmr_service import BMRService
from .calorie_goal_service import CalorieGoalService
from .macro_service import MacroService
from .rounding import round_half_up
from .tdee_service import TDEEService
from .timeline_service import TimelineService

DEFAULT_ADVICE: Tuple[str, ...] = (
    "Focus on whole, unprocessed foods for better nutrition",
    "Include lean proteins in every meal to support your goals",
    "Stay hydrated with at least 8 glasses of water daily",
    "Eat regular meals to maintain stable energy levels",
)


class FallbackCalculator:
    """
    Closed-form calorie plan used when the AI path is unavailable.

    Flow:
    1. BMR (Mifflin-St Jeor), rounded
    2. TDEE from the rounded BMR, rounded
    3. Goal adjustment from the rounded TDEE, then the safety floor
    4. Macro split from goals
    5. Timeline at 0.5 kg/week

    Pure arithmetic over an already-validated profile: never fails.
    """

    def __init__(
        self,
        bmr_service: Optional[BMRService] = None,
        tdee_service: Optional[TDEEService] = None,
        goal_service: Optional[CalorieGoalService] = None,
        macro_service: Optional[MacroService] = None,
        timeline_service: Optional[TimelineService] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._goal_service = goal_service or CalorieGoalService()
        self._macro_service = macro_service or MacroService()
        self._timeline_service = timeline_service or TimelineService()

    def calculate(self, profile: CalorieProfile) -> CalorieResult:
        """
        Compute a complete calorie plan.

        Args:
            profile: Validated calorie profile

        Returns:
            CalorieResult tagged ``manual``

        Example:
            >>> result = FallbackCalculator().calculate(profile)  # 30y male, 175cm, 80->75kg
            >>> (result.bmr, result.tdee, result.daily_calorie_goal)
            (1749, 2099, 1599)
        """
        bmr = round_half_up(self._bmr_service.calculate(profile))
        tdee = round_half_up(
            self._tdee_service.calculate(bmr, profile.activity_level)
        )
        daily_goal = round_half_up(self._goal_service.calculate(tdee, profile))

        return CalorieResult(
            bmr=bmr,
            tdee=tdee,
            daily_calorie_goal=daily_goal,
            macro_breakdown=self._macro_service.calculate(profile),
            personalized_advice=DEFAULT_ADVICE,
            timeline_estimate=self._timeline_service.estimate(profile),
            calculation_method=CalculationMethod.MANUAL,
        )
