"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL multipliers are defined on ``ActivityLevel``.
    """

    def calculate(self, bmr: float, activity_level: ActivityLevel) -> float:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(1749, ActivityLevel.SEDENTARY)
            2098.8  # approximately, float arithmetic
        """
        return bmr * activity_level.pal_multiplier()
