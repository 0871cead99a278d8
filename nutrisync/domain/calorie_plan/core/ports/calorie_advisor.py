"""Port for generative calorie advice."""

from abc import ABC, abstractmethod


class ICalorieAdvisor(ABC):
    """
    Port for a generative text model that drafts calorie plans.

    Implementations send a single prompt and return the raw text reply.
    They must translate transport failures into ``NetworkError`` and
    non-2xx statuses or malformed envelopes into ``ApiError``.
    """

    provider_name: str = "unknown"

    @abstractmethod
    async def generate(self, prompt: str, temperature: float = 0.1) -> str:
        """
        Submit a prompt and return the model's text reply.

        Args:
            prompt: Full natural-language instruction
            temperature: Sampling temperature (low for near-deterministic output)

        Returns:
            Raw text produced by the model

        Raises:
            ApiError: On non-2xx status or malformed response envelope
            NetworkError: On timeout or connection failure
        """
        pass

    async def aclose(self) -> None:
        """Release underlying HTTP resources."""
        return None
