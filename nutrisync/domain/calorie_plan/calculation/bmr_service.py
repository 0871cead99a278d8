"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.calorie_profile import CalorieProfile


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:    BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Others: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, profile: CalorieProfile) -> float:
        """Calculate BMR from a validated profile.

        Args:
            profile: Calorie profile (current weight, height, age, gender)

        Returns:
            float: Unrounded BMR in kcal/day

        Example:
            >>> profile = CalorieProfile(
            ...     age=30, gender=Gender.MALE, height_cm=175,
            ...     current_weight_kg=80, target_weight_kg=75,
            ...     activity_level=ActivityLevel.SEDENTARY,
            ... )
            >>> BMRService().calculate(profile)
            1748.75
        """
        base = (
            10 * profile.current_weight_kg
            + 6.25 * profile.height_cm
            - 5 * profile.age
        )

        if profile.gender.is_male:
            return base + 5
        return base - 161
