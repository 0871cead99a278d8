"""Shared domain primitives."""

from .errors import NutriSyncError

__all__ = ["NutriSyncError"]
