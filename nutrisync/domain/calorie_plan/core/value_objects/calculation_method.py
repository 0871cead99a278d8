"""CalculationMethod value object."""

from enum import Enum


class CalculationMethod(str, Enum):
    """Which path produced a calorie result."""

    AI = "ai"
    MANUAL = "manual"
