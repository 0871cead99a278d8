"""
Domain exceptions.

Typed exceptions for explicit error handling.
"""

from __future__ import annotations


class NutriSyncError(Exception):
    """
    Base exception for all NutriSync errors.

    Allows catching every domain error with a single except clause.
    """

    pass
