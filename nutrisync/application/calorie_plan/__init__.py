"""Calorie plan use cases."""

from .prompt import build_calorie_plan_prompt
from .resolver import CaloriePlanResolver
from .response_parser import extract_json_object, parse_calorie_plan

__all__ = [
    "CaloriePlanResolver",
    "build_calorie_plan_prompt",
    "extract_json_object",
    "parse_calorie_plan",
]
