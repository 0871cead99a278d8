"""Extraction and validation of AI calorie plan text."""

import json
import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from nutrisync.domain.calorie_plan.calculation import round_half_up
from nutrisync.domain.calorie_plan.core.exceptions import ParsingError
from nutrisync.domain.calorie_plan.core.value_objects import (
    CalculationMethod,
    CalorieResult,
    MacroBreakdown,
)

from .models import CaloriePlanResponse, MacroBreakdownPayload

logger = logging.getLogger(__name__)

MIN_ADVICE_ITEMS = 3
MAX_ADVICE_ITEMS = 5

_decoder = json.JSONDecoder()


def extract_json_object(text: str) -> str:
    """
    Return the first well-formed JSON object embedded in ``text``.

    The model may wrap its JSON in prose or Markdown code fences; each
    ``{`` is tried in order until one starts a complete object.

    Raises:
        ParsingError: If no JSON object is found
    """
    start = text.find("{")
    while start != -1:
        try:
            _, end = _decoder.raw_decode(text, start)
        except ValueError:
            start = text.find("{", start + 1)
            continue
        return text[start:end]

    raise ParsingError("No JSON object found in AI response", raw_text=text)


def parse_calorie_plan(text: str, defaults: CalorieResult) -> CalorieResult:
    """
    Validate AI text and convert it into a CalorieResult tagged ``ai``.

    Args:
        text: Raw model reply
        defaults: Deterministic result used to fill optional keys

    Returns:
        CalorieResult built from the AI figures

    Raises:
        ParsingError: If no JSON object is present or required keys are
            missing, non-numeric or non-positive
    """
    json_text = extract_json_object(text)

    try:
        response = CaloriePlanResponse.model_validate_json(json_text)
    except ValidationError as e:
        raise ParsingError(
            f"AI response failed schema validation: {e.error_count()} error(s)",
            raw_text=text,
        ) from e

    return CalorieResult(
        bmr=round_half_up(response.bmr),
        tdee=round_half_up(response.tdee),
        daily_calorie_goal=round_half_up(response.daily_calorie_goal),
        macro_breakdown=_macro_breakdown(response.macro_breakdown, defaults.macro_breakdown),
        personalized_advice=_advice(response.personalized_advice, defaults.personalized_advice),
        timeline_estimate=(response.timeline_estimate or "").strip()
        or defaults.timeline_estimate,
        calculation_method=CalculationMethod.AI,
    )


def _macro_breakdown(
    payload: Optional[MacroBreakdownPayload], default: MacroBreakdown
) -> MacroBreakdown:
    if payload is None:
        return default

    try:
        return MacroBreakdown(
            protein=round_half_up(payload.protein),
            carbs=round_half_up(payload.carbs),
            fats=round_half_up(payload.fats),
        )
    except ValueError as e:
        logger.warning(
            "Discarding AI macro breakdown",
            extra={"error": str(e), "default": str(default)},
        )
        return default


def _advice(items: Optional[Sequence[str]], default: Sequence[str]) -> List[str]:
    advice = [item.strip() for item in items or () if item.strip()][:MAX_ADVICE_ITEMS]

    for tip in default:
        if len(advice) >= MIN_ADVICE_ITEMS:
            break
        if tip not in advice:
            advice.append(tip)

    return advice
