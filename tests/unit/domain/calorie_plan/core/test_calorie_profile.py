"""Unit tests for CalorieProfile validation."""

import pytest

from nutrisync.domain.calorie_plan.core.exceptions import ErrorCode, InvalidInputError
from nutrisync.domain.calorie_plan.core.value_objects import (
    ActivityLevel,
    CalorieProfile,
    Gender,
)


def _payload(**overrides):
    data = {
        "age": 30,
        "gender": "male",
        "height": 175,
        "currentWeight": 80,
        "targetWeight": 75,
        "activityLevel": "sedentary",
        "goals": ["lose_weight"],
        "weeklyGoal": -0.5,
    }
    data.update(overrides)
    return data


class TestCalorieProfileValidation:
    """Range validation on construction."""

    def test_valid_profile(self, male_profile):
        assert male_profile.weight_delta_kg == -5
        assert male_profile.weight_direction() == "lose weight"

    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("age", 12, "Age must be between 13 and 120 years"),
            ("age", 121, "Age must be between 13 and 120 years"),
            ("height_cm", 99, "Height must be between 100 and 250 cm"),
            ("height_cm", 251, "Height must be between 100 and 250 cm"),
            ("current_weight_kg", 29.9, "Current weight must be between 30 and 300 kg"),
            ("target_weight_kg", 301, "Target weight must be between 30 and 300 kg"),
        ],
    )
    def test_out_of_range(self, male_profile, field, value, message):
        data = dict(male_profile.__dict__)
        data[field] = value

        with pytest.raises(InvalidInputError) as exc_info:
            CalorieProfile(**data)

        assert exc_info.value.fields == [field]
        assert exc_info.value.message == f"Invalid input data: {message}"
        assert exc_info.value.code is ErrorCode.INVALID_INPUT

    @pytest.mark.parametrize("age", [13, 120])
    def test_boundaries_are_inclusive(self, male_profile, age):
        data = dict(male_profile.__dict__, age=age)

        assert CalorieProfile(**data).age == age

    def test_reports_all_violations(self):
        with pytest.raises(InvalidInputError) as exc_info:
            CalorieProfile(
                age=5,
                gender=Gender.MALE,
                height_cm=50,
                current_weight_kg=80,
                target_weight_kg=80,
                activity_level=ActivityLevel.SEDENTARY,
            )

        assert exc_info.value.fields == ["age", "height_cm"]

    def test_goals_list_becomes_tuple(self, male_profile):
        data = dict(male_profile.__dict__, goals=["build_muscle"])

        assert CalorieProfile(**data).goals == ("build_muscle",)

    def test_has_goal_is_case_insensitive(self, male_profile):
        data = dict(male_profile.__dict__, goals=(" Build_Muscle",))

        assert CalorieProfile(**data).has_goal("build_muscle")


class TestCalorieProfileFromDict:
    """Building profiles from onboarding payloads."""

    def test_camel_case_payload(self):
        profile = CalorieProfile.from_dict(_payload())

        assert profile.gender is Gender.MALE
        assert profile.height_cm == 175
        assert profile.current_weight_kg == 80
        assert profile.target_weight_kg == 75
        assert profile.activity_level is ActivityLevel.SEDENTARY
        assert profile.goals == ("lose_weight",)
        assert profile.weekly_goal_kg == -0.5

    def test_numeric_strings_are_coerced(self):
        profile = CalorieProfile.from_dict(_payload(age="30", height="175.5"))

        assert profile.age == 30
        assert profile.height_cm == 175.5

    def test_missing_weekly_goal_defaults_to_zero(self):
        data = _payload()
        del data["weeklyGoal"]

        assert CalorieProfile.from_dict(data).weekly_goal_kg == 0.0

    def test_unknown_gender(self):
        with pytest.raises(InvalidInputError) as exc_info:
            CalorieProfile.from_dict(_payload(gender="unknown"))

        assert exc_info.value.fields == ["gender"]

    def test_missing_fields_collected_once(self):
        with pytest.raises(InvalidInputError) as exc_info:
            CalorieProfile.from_dict({"gender": "female"})

        fields = exc_info.value.fields
        assert "activity_level" in fields
        assert "age" in fields
        assert fields.count("activity_level") == 1

    def test_non_numeric_string_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            CalorieProfile.from_dict(_payload(age="thirty"))

        assert exc_info.value.fields == ["age"]
