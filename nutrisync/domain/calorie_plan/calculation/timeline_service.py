"""TimelineService - time-to-target estimate."""

import math

from ..core.value_objects.calorie_profile import CalorieProfile

SAFE_RATE_KG_PER_WEEK = 0.5


class TimelineService:
    """Estimate weeks to target weight at a safe 0.5 kg/week."""

    def weeks_to_goal(self, profile: CalorieProfile) -> int:
        return math.ceil(abs(profile.weight_delta_kg) / SAFE_RATE_KG_PER_WEEK)

    def estimate(self, profile: CalorieProfile) -> str:
        """
        Render the estimate shown next to the calorie goal.

        Example:
            >>> TimelineService().estimate(profile)  # 80 -> 75 kg
            'You can expect to reach your target weight in approximately 10 weeks with consistent effort'
        """
        return (
            "You can expect to reach your target weight in approximately "
            f"{self.weeks_to_goal(profile)} weeks with consistent effort"
        )
