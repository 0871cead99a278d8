"""Pydantic schema for AI calorie plan responses.

Validation is strict: numbers must be finite JSON numbers, so fraction
strings such as "1/2", `Infinity` and overflowing literals are rejected
rather than patched.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Upper bound for any daily energy figure (kcal)
MAX_KCAL = 10000


class MacroBreakdownPayload(BaseModel):
    """Macro percentages as returned by the model."""

    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    protein: float = Field(..., ge=0, le=100)
    carbs: float = Field(..., ge=0, le=100)
    fats: float = Field(..., ge=0, le=100)


class CaloriePlanResponse(BaseModel):
    """
    Calorie plan JSON object expected from the model.

    ``bmr``, ``tdee`` and ``dailyCalorieGoal`` are required; the other
    keys are optional and filled from the deterministic calculation when
    absent.
    """

    model_config = ConfigDict(
        strict=True, extra="ignore", populate_by_name=True, allow_inf_nan=False
    )

    bmr: float = Field(..., gt=0, le=MAX_KCAL)
    tdee: float = Field(..., gt=0, le=MAX_KCAL)
    daily_calorie_goal: float = Field(..., gt=0, le=MAX_KCAL, alias="dailyCalorieGoal")
    macro_breakdown: Optional[MacroBreakdownPayload] = Field(
        default=None, alias="macroBreakdown"
    )
    personalized_advice: Optional[List[str]] = Field(
        default=None, alias="personalizedAdvice"
    )
    timeline_estimate: Optional[str] = Field(default=None, alias="timelineEstimate")
