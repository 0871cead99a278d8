"""MacroBreakdown value object - macronutrient percentages."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class MacroBreakdown:
    """Share of daily calories per macronutrient, in whole percent.

    Attributes:
        protein: Protein percentage (0-100)
        carbs: Carbohydrate percentage (0-100)
        fats: Fat percentage (0-100)
    """

    protein: int
    carbs: int
    fats: int

    def __post_init__(self) -> None:
        """Validate percentages.

        Raises:
            ValueError: If a percentage is out of range or the total is not 100
        """
        for name in ("protein", "carbs", "fats"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be 0-100%, got {value}")

        if self.total() != 100:
            raise ValueError(f"Macro percentages must sum to 100, got {self.total()}")

    def total(self) -> int:
        return self.protein + self.carbs + self.fats

    def to_dict(self) -> Dict[str, int]:
        return {"protein": self.protein, "carbs": self.carbs, "fats": self.fats}

    def __str__(self) -> str:
        return f"{self.protein}P / {self.carbs}C / {self.fats}F"
