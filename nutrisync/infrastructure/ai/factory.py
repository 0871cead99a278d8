"""Factory for the configured calorie advisor."""

import logging
from typing import Optional

from nutrisync.domain.calorie_plan.core.ports import ICalorieAdvisor
from nutrisync.infrastructure.config import Settings

logger = logging.getLogger(__name__)


def create_calorie_advisor(settings: Settings) -> Optional[ICalorieAdvisor]:
    """
    Create the advisor selected by ``AI_CALORIE_PROVIDER``.

    Returns:
        The advisor, or None when the selected provider has no API key
        (the resolver then always uses the fallback formula)

    Raises:
        ValueError: If the provider name is unknown
    """
    provider = settings.ai_provider

    if provider == "gemini":
        if not settings.gemini_api_key:
            logger.warning("Gemini API key not found, AI calorie plans disabled")
            return None
        from .gemini.client import GeminiCalorieAdvisor

        return GeminiCalorieAdvisor(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
        )

    if provider == "openai":
        if not settings.openai_api_key:
            logger.warning("OpenAI API key not found, AI calorie plans disabled")
            return None
        from .openai.client import OpenAICalorieAdvisor

        return OpenAICalorieAdvisor(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout_s=settings.ai_timeout_s,
        )

    raise ValueError(f"Unknown AI_CALORIE_PROVIDER: {provider!r} (expected 'gemini' or 'openai')")
