"""OpenAI client - Implements ICalorieAdvisor port.

Key Features:
- Chat completion returning plain text (JSON validated by the caller)
- Retry logic (exponential backoff on transient errors)
- Circuit breaker (5 failures → 60s open)
- Token usage logging
"""

# mypy: warn-unused-ignores=False

import logging
from typing import Optional

from circuitbreaker import CircuitBreakerError, circuit
from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI

from nutrisync.application.calorie_plan.prompt import CALORIE_PLAN_SYSTEM_PROMPT
from nutrisync.domain.calorie_plan.core.exceptions import ApiError, NetworkError
from nutrisync.domain.calorie_plan.core.ports import ICalorieAdvisor
from nutrisync.infrastructure.ai.retry_policy import build_retrying

logger = logging.getLogger(__name__)


class OpenAICalorieAdvisor(ICalorieAdvisor):
    """
    OpenAI chat client implementing ICalorieAdvisor port.

    The SDK's own retries are disabled; retries follow the shared policy.

    Example:
        >>> advisor = OpenAICalorieAdvisor(api_key="sk-...")
        >>> text = await advisor.generate(prompt)
    """

    provider_name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout_s: float = 15.0,
        max_attempts: int = 3,
        backoff_min_s: float = 2.0,
        backoff_max_s: float = 10.0,
        max_tokens: int = 1024,
    ):
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Chat model name
            timeout_s: Per-request timeout
            max_attempts: Attempts per generate() call
            backoff_min_s: Minimum wait between attempts
            backoff_max_s: Maximum wait between attempts
            max_tokens: Completion token limit
        """
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout_s, max_retries=0)
        self._model = model
        self._max_attempts = max_attempts
        self._backoff_min_s = backoff_min_s
        self._backoff_max_s = backoff_max_s
        self._max_tokens = max_tokens
        self._guarded_generate = circuit(  # type: ignore[misc]
            failure_threshold=5, recovery_timeout=60, name="openai_calorie_plan"
        )(self._generate_with_retry)

    async def aclose(self) -> None:
        await self._client.close()

    async def generate(self, prompt: str, temperature: float = 0.1) -> str:
        """
        Submit prompt to OpenAI and return the text reply.

        Raises:
            ApiError: On non-2xx status or empty completion
            NetworkError: On timeout, connection failure or open circuit
        """
        try:
            return await self._guarded_generate(prompt, temperature)
        except CircuitBreakerError as e:
            raise NetworkError(f"OpenAI circuit open: {e}") from e

    async def _generate_with_retry(self, prompt: str, temperature: float) -> str:
        retrying = build_retrying(
            max_attempts=self._max_attempts,
            backoff_min_s=self._backoff_min_s,
            backoff_max_s=self._backoff_max_s,
        )
        async for attempt in retrying:
            with attempt:
                return await self._complete(prompt, temperature)
        raise NetworkError("OpenAI request was not attempted")  # pragma: no cover

    async def _complete(self, prompt: str, temperature: float) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": CALORIE_PLAN_SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
                max_tokens=self._max_tokens,
            )
        except APITimeoutError as e:
            raise NetworkError(f"OpenAI request timed out: {e}") from e
        except APIConnectionError as e:
            raise NetworkError(f"OpenAI connection failed: {e}") from e
        except APIStatusError as e:
            raise ApiError(
                f"API request failed: {e.status_code}", status_code=e.status_code
            ) from e

        usage = response.usage
        if usage is not None:
            logger.info(
                "OpenAI response received",
                extra={
                    "model": self._model,
                    "total_tokens": usage.total_tokens,
                    "prompt_tokens": usage.prompt_tokens,
                    "completion_tokens": usage.completion_tokens,
                },
            )

        content: Optional[str] = None
        if response.choices:
            content = response.choices[0].message.content
        if not content or not content.strip():
            raise ApiError("OpenAI returned an empty completion")
        return content
