"""Generative AI adapters for calorie plans."""

from .factory import create_calorie_advisor

__all__ = ["create_calorie_advisor"]
