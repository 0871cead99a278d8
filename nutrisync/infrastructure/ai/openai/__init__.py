"""OpenAI client implementation for calorie plans."""

from .client import OpenAICalorieAdvisor

__all__ = ["OpenAICalorieAdvisor"]
