"""Calorie plan domain: profile, result and calculation services."""
