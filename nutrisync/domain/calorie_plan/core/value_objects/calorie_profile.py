"""CalorieProfile value object - onboarding data used for calorie planning."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from .activity_level import ActivityLevel
from .gender import Gender

AGE_RANGE = (13, 120)
HEIGHT_RANGE_CM = (100.0, 250.0)
WEIGHT_RANGE_KG = (30.0, 300.0)

# snake_case field -> accepted payload keys (first match wins)
_FIELD_KEYS = {
    "age": ("age",),
    "gender": ("gender",),
    "height_cm": ("height_cm", "height"),
    "current_weight_kg": ("current_weight_kg", "currentWeight", "current_weight"),
    "target_weight_kg": ("target_weight_kg", "targetWeight", "target_weight"),
    "activity_level": ("activity_level", "activityLevel"),
    "goals": ("goals",),
    "weekly_goal_kg": ("weekly_goal_kg", "weeklyGoal", "weekly_goal"),
}


@dataclass(frozen=True)
class CalorieProfile:
    """User data needed to compute a calorie plan.

    Immutable value object. Construction validates every field and
    reports all violations at once.

    Attributes:
        age: Age in years (13-120)
        gender: Gender
        height_cm: Height in centimeters (100-250 cm)
        current_weight_kg: Current weight in kilograms (30-300 kg)
        target_weight_kg: Target weight in kilograms (30-300 kg)
        activity_level: Physical activity level
        goals: Free-form goal tags (e.g. "build_muscle")
        weekly_goal_kg: Desired weekly change, positive = gain
    """

    age: int
    gender: Gender
    height_cm: float
    current_weight_kg: float
    target_weight_kg: float
    activity_level: ActivityLevel
    goals: Tuple[str, ...] = field(default_factory=tuple)
    weekly_goal_kg: float = 0.0

    def __post_init__(self) -> None:
        """Validate profile constraints.

        Raises:
            InvalidInputError: If any constraint is violated
        """
        from ..exceptions.domain_errors import FieldViolation, InvalidInputError

        object.__setattr__(self, "goals", tuple(self.goals or ()))

        violations: List[FieldViolation] = []

        if not _in_range(self.age, AGE_RANGE):
            violations.append(
                FieldViolation("age", "Age must be between 13 and 120 years")
            )

        if not _in_range(self.height_cm, HEIGHT_RANGE_CM):
            violations.append(
                FieldViolation("height_cm", "Height must be between 100 and 250 cm")
            )

        if not _in_range(self.current_weight_kg, WEIGHT_RANGE_KG):
            violations.append(
                FieldViolation(
                    "current_weight_kg",
                    "Current weight must be between 30 and 300 kg",
                )
            )

        if not _in_range(self.target_weight_kg, WEIGHT_RANGE_KG):
            violations.append(
                FieldViolation(
                    "target_weight_kg",
                    "Target weight must be between 30 and 300 kg",
                )
            )

        if not isinstance(self.gender, Gender):
            violations.append(FieldViolation("gender", "Gender must be specified"))

        if not isinstance(self.activity_level, ActivityLevel):
            violations.append(
                FieldViolation("activity_level", "Activity level must be specified")
            )

        if not _is_number(self.weekly_goal_kg):
            violations.append(
                FieldViolation("weekly_goal_kg", "Weekly goal must be a number")
            )

        if violations:
            raise InvalidInputError(violations)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CalorieProfile":
        """Build a profile from an onboarding payload.

        Accepts snake_case keys and the camelCase keys sent by the mobile
        client (``currentWeight``, ``targetWeight``, ``activityLevel``,
        ``weeklyGoal``). Unparseable values surface as violations.

        Raises:
            InvalidInputError: If any field is missing or invalid
        """
        from ..exceptions.domain_errors import FieldViolation, InvalidInputError

        raw = {name: _lookup(data, keys) for name, keys in _FIELD_KEYS.items()}
        violations: List[FieldViolation] = []

        gender = _coerce_enum(Gender, raw["gender"])
        if gender is None:
            violations.append(FieldViolation("gender", "Gender must be specified"))

        activity_level = _coerce_enum(ActivityLevel, raw["activity_level"])
        if activity_level is None:
            violations.append(
                FieldViolation("activity_level", "Activity level must be specified")
            )

        goals = raw["goals"] or ()
        if isinstance(goals, str):
            goals = (goals,)

        try:
            return cls(
                age=_coerce_number(raw["age"]),
                gender=gender,  # type: ignore[arg-type]
                height_cm=_coerce_number(raw["height_cm"]),
                current_weight_kg=_coerce_number(raw["current_weight_kg"]),
                target_weight_kg=_coerce_number(raw["target_weight_kg"]),
                activity_level=activity_level,  # type: ignore[arg-type]
                goals=tuple(str(g) for g in goals),
                weekly_goal_kg=_coerce_number(raw["weekly_goal_kg"], default=0.0),
            )
        except InvalidInputError as e:
            # enum violations were already collected above
            seen = {v.field for v in violations}
            violations.extend(v for v in e.violations if v.field not in seen)
            raise InvalidInputError(violations) from None

    @property
    def weight_delta_kg(self) -> float:
        """Target minus current weight; negative means weight loss."""
        return self.target_weight_kg - self.current_weight_kg

    def weight_direction(self) -> str:
        """Describe the weight objective as used in prompts."""
        if self.weight_delta_kg > 0:
            return "gain weight"
        if self.weight_delta_kg < 0:
            return "lose weight"
        return "maintain weight"

    def has_goal(self, *tags: str) -> bool:
        """Whether any of ``tags`` appears in the profile goals."""
        normalized = {g.strip().lower() for g in self.goals}
        return any(tag in normalized for tag in tags)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _in_range(value: Any, bounds: Tuple[float, float]) -> bool:
    return _is_number(value) and bounds[0] <= value <= bounds[1]


def _lookup(data: Mapping[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def _coerce_number(value: Any, default: Optional[float] = None) -> Any:
    """Convert numeric strings; leave anything else for validation to reject."""
    if value is None:
        return default
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return value
        return int(number) if number.is_integer() else number
    return value


def _coerce_enum(enum_cls: Any, value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            return None
    return None
