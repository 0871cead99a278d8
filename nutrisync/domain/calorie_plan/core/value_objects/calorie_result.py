"""CalorieResult value object - output of calorie plan resolution."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple

from .calculation_method import CalculationMethod
from .macro_breakdown import MacroBreakdown


@dataclass(frozen=True)
class CalorieResult:
    """Daily calorie plan.

    Attributes:
        bmr: Basal metabolic rate (kcal/day)
        tdee: Total daily energy expenditure (kcal/day)
        daily_calorie_goal: Calorie target (kcal/day)
        macro_breakdown: Macro percentages
        personalized_advice: Short nutrition tips, in display order
        timeline_estimate: Human-readable time to target weight
        calculation_method: Path that produced the result
    """

    bmr: int
    tdee: int
    daily_calorie_goal: int
    macro_breakdown: MacroBreakdown
    personalized_advice: Tuple[str, ...] = field(default_factory=tuple)
    timeline_estimate: str = ""
    calculation_method: CalculationMethod = CalculationMethod.MANUAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "personalized_advice", tuple(self.personalized_advice))

    def with_calorie_floor(self, floor: int) -> "CalorieResult":
        """Return a copy whose calorie goal is at least ``floor``."""
        if self.daily_calorie_goal >= floor:
            return self
        return replace(self, daily_calorie_goal=floor)

    def to_dict(self) -> Dict[str, Any]:
        """Render the camelCase shape consumed by the mobile client."""
        return {
            "bmr": self.bmr,
            "tdee": self.tdee,
            "dailyCalorieGoal": self.daily_calorie_goal,
            "macroBreakdown": self.macro_breakdown.to_dict(),
            "personalizedAdvice": list(self.personalized_advice),
            "timelineEstimate": self.timeline_estimate,
            "calculationMethod": self.calculation_method.value,
        }
