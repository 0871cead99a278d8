"""Gemini client implementation for calorie plans."""

from .client import GeminiCalorieAdvisor

__all__ = ["GeminiCalorieAdvisor"]
