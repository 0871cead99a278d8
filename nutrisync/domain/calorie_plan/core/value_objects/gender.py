"""Gender value object."""

from enum import Enum

MALE_CALORIE_FLOOR = 1500
DEFAULT_CALORIE_FLOOR = 1200


class Gender(str, Enum):
    """Gender as collected during onboarding.

    Only MALE selects the male Mifflin-St Jeor constant and the higher
    calorie floor; every other value uses the female constants.
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @property
    def is_male(self) -> bool:
        return self is Gender.MALE

    def calorie_floor(self) -> int:
        """Minimum safe daily calorie goal in kcal.

        Example:
            >>> Gender.MALE.calorie_floor()
            1500
        """
        return MALE_CALORIE_FLOOR if self.is_male else DEFAULT_CALORIE_FLOOR
