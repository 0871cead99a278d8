"""CaloriePlanResolver - AI calorie plan with deterministic fallback."""

import asyncio
import logging
import time
from typing import Any, Mapping, Optional, Union

from nutrisync.domain.calorie_plan.calculation import FallbackCalculator
from nutrisync.domain.calorie_plan.core.exceptions import (
    CalorieServiceError,
    NetworkError,
)
from nutrisync.domain.calorie_plan.core.ports import ICalorieAdvisor
from nutrisync.domain.calorie_plan.core.value_objects import (
    CalorieProfile,
    CalorieResult,
)

from .prompt import build_calorie_plan_prompt
from .response_parser import parse_calorie_plan

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 15.0
DEFAULT_TEMPERATURE = 0.1


class CaloriePlanResolver:
    """
    Resolve a CalorieProfile into a CalorieResult.

    Flow:
    1. Validate the profile (InvalidInputError is surfaced to the caller)
    2. Without an advisor, use the fallback formula
    3. Ask the advisor for a JSON plan, bounded by ``timeout_s``
    4. Parse and validate the reply; on any API, network or parsing
       error, use the fallback formula
    5. Apply the calorie floor to AI results when ``enforce_floor_on_ai``

    Example:
        >>> resolver = CaloriePlanResolver(advisor=None)
        >>> result = await resolver.resolve({"age": 30, "gender": "male", ...})
        >>> result.calculation_method
        <CalculationMethod.MANUAL: 'manual'>
    """

    def __init__(
        self,
        advisor: Optional[ICalorieAdvisor],
        fallback_calculator: Optional[FallbackCalculator] = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        temperature: float = DEFAULT_TEMPERATURE,
        enforce_floor_on_ai: bool = True,
    ):
        """
        Initialize resolver.

        Args:
            advisor: Generative advisor, or None when no AI credential is configured
            fallback_calculator: Deterministic calculator
            timeout_s: Upper bound for the whole AI round trip
            temperature: Sampling temperature sent to the advisor
            enforce_floor_on_ai: Clamp AI calorie goals to the safety floor
        """
        self._advisor = advisor
        self._fallback = fallback_calculator or FallbackCalculator()
        self._timeout_s = timeout_s
        self._temperature = temperature
        self._enforce_floor_on_ai = enforce_floor_on_ai

    @property
    def ai_enabled(self) -> bool:
        return self._advisor is not None

    async def resolve(
        self, profile: Union[CalorieProfile, Mapping[str, Any]]
    ) -> CalorieResult:
        """
        Produce a calorie plan for ``profile``.

        Args:
            profile: CalorieProfile or raw onboarding payload

        Returns:
            CalorieResult tagged ``ai`` or ``manual``

        Raises:
            InvalidInputError: If the profile fails validation
        """
        if not isinstance(profile, CalorieProfile):
            profile = CalorieProfile.from_dict(profile)

        fallback = self._fallback.calculate(profile)

        if self._advisor is None:
            logger.warning("AI advisor not configured, using fallback calculation")
            return fallback

        start_time = time.time()
        try:
            result = await self._resolve_with_ai(self._advisor, profile, fallback)
        except CalorieServiceError as e:
            logger.warning(
                "AI calorie calculation failed, using fallback",
                extra={
                    "code": e.code.value,
                    "error": e.message,
                    "provider": self._advisor.provider_name,
                },
            )
            return fallback

        logger.info(
            "AI calorie calculation complete",
            extra={
                "provider": self._advisor.provider_name,
                "daily_calorie_goal": result.daily_calorie_goal,
                "processing_time_ms": int((time.time() - start_time) * 1000),
            },
        )
        return result

    async def _resolve_with_ai(
        self,
        advisor: ICalorieAdvisor,
        profile: CalorieProfile,
        fallback: CalorieResult,
    ) -> CalorieResult:
        prompt = build_calorie_plan_prompt(profile)

        try:
            text = await asyncio.wait_for(
                advisor.generate(prompt, temperature=self._temperature),
                timeout=self._timeout_s,
            )
        except asyncio.TimeoutError:
            raise NetworkError(
                f"AI request timed out after {self._timeout_s:g}s"
            ) from None

        result = parse_calorie_plan(text, defaults=fallback)

        if not self._enforce_floor_on_ai:
            return result

        floor = profile.gender.calorie_floor()
        if result.daily_calorie_goal < floor:
            logger.warning(
                "AI calorie goal below safety floor, clamping",
                extra={"ai_goal": result.daily_calorie_goal, "floor": floor},
            )
            result = result.with_calorie_floor(floor)
        return result
