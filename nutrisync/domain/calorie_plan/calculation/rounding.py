"""Rounding helpers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's ``round`` uses banker's rounding (``round(2128.5) == 2128``);
    calorie figures are rounded the way users expect.

    Example:
        >>> round_half_up(2128.5)
        2129
    """
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))
