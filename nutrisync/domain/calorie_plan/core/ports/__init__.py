"""Ports (interfaces) for calorie plan domain."""

from .calculators import IBMRCalculator, ITDEECalculator
from .calorie_advisor import ICalorieAdvisor

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "ICalorieAdvisor",
]
