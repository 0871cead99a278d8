"""Gemini client - Implements ICalorieAdvisor port.

Key Features:
- Single generateContent request per attempt (httpx)
- Retry logic (exponential backoff on 429/5xx and network errors)
- Circuit breaker (5 failures → 60s open)
- Envelope validation: candidates[0].content.parts[0].text
"""

# mypy: warn-unused-ignores=False

from typing import Any, Dict, Optional

import httpx
import structlog
from circuitbreaker import CircuitBreakerError, circuit

from nutrisync.domain.calorie_plan.core.exceptions import ApiError, NetworkError
from nutrisync.domain.calorie_plan.core.ports import ICalorieAdvisor
from nutrisync.infrastructure.ai.retry_policy import build_retrying

logger = structlog.get_logger(__name__)


class GeminiCalorieAdvisor(ICalorieAdvisor):
    """
    Google Gemini REST client implementing ICalorieAdvisor port.

    Example:
        >>> advisor = GeminiCalorieAdvisor(api_key="AIza...")
        >>> text = await advisor.generate(prompt)
        >>> await advisor.aclose()
    """

    provider_name = "gemini"

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
    TIMEOUT_S = 15.0

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        client: Optional[httpx.AsyncClient] = None,
        max_attempts: int = 3,
        backoff_min_s: float = 2.0,
        backoff_max_s: float = 10.0,
        base_url: Optional[str] = None,
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key
            model: Model name
            client: Preconfigured httpx client (tests)
            max_attempts: Attempts per generate() call
            backoff_min_s: Minimum wait between attempts
            backoff_max_s: Maximum wait between attempts
            base_url: Override for the API root
        """
        self._api_key = api_key
        self._model = model
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(self.TIMEOUT_S))
        self._max_attempts = max_attempts
        self._backoff_min_s = backoff_min_s
        self._backoff_max_s = backoff_max_s
        self._guarded_generate = circuit(  # type: ignore[misc]
            failure_threshold=5, recovery_timeout=60, name="gemini_calorie_plan"
        )(self._generate_with_retry)

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/models/{self._model}:generateContent"

    async def aclose(self) -> None:
        await self._client.aclose()

    async def generate(self, prompt: str, temperature: float = 0.1) -> str:
        """
        Submit prompt to Gemini and return the text reply.

        Raises:
            ApiError: On non-2xx status or malformed envelope
            NetworkError: On timeout, connection failure or open circuit
        """
        try:
            return await self._guarded_generate(prompt, temperature)
        except CircuitBreakerError as e:
            raise NetworkError(f"Gemini circuit open: {e}") from e

    async def _generate_with_retry(self, prompt: str, temperature: float) -> str:
        retrying = build_retrying(
            max_attempts=self._max_attempts,
            backoff_min_s=self._backoff_min_s,
            backoff_max_s=self._backoff_max_s,
        )
        async for attempt in retrying:
            with attempt:
                return await self._request(prompt, temperature)
        raise NetworkError("Gemini request was not attempted")  # pragma: no cover

    async def _request(self, prompt: str, temperature: float) -> str:
        body: Dict[str, Any] = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": temperature,
                "topK": 32,
                "topP": 1,
                "maxOutputTokens": 1024,
            },
        }

        logger.debug("gemini_request", model=self._model, prompt_chars=len(prompt))

        try:
            response = await self._client.post(
                self.endpoint,
                params={"key": self._api_key},
                json=body,
            )
        except httpx.TimeoutException as e:
            logger.warning("gemini_timeout", model=self._model)
            raise NetworkError(f"Gemini request timed out: {e}") from e
        except httpx.TransportError as e:
            logger.warning("gemini_transport_error", model=self._model, error=str(e))
            raise NetworkError(f"Gemini request failed: {e}") from e

        if not response.is_success:
            logger.error(
                "gemini_api_error",
                status=response.status_code,
                body=response.text[:500],
            )
            raise ApiError(
                f"API request failed: {response.status_code}",
                status_code=response.status_code,
            )

        text = self._extract_text(response)
        logger.info("gemini_response_received", model=self._model, chars=len(text))
        return text

    @staticmethod
    def _extract_text(response: httpx.Response) -> str:
        try:
            payload = response.json()
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ApiError(f"Invalid response from Gemini API: {e}") from e

        if not isinstance(text, str) or not text.strip():
            raise ApiError("Invalid response from Gemini API: empty text")
        return text
