"""Calculator ports - interfaces for BMR/TDEE calculations."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.calorie_profile import CalorieProfile


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, profile: CalorieProfile) -> float:
        """Calculate BMR in kcal/day from a validated profile."""
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: float, activity_level: ActivityLevel) -> float:
        """Calculate TDEE in kcal/day from BMR and activity level."""
        pass
