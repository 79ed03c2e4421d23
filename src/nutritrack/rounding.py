"""Rounding helpers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up.

    Python's ``round`` uses banker's rounding, so ``round(10.5)`` is 10.
    Nutrient displays expect 11.
    """
    return math.floor(value + 0.5)
