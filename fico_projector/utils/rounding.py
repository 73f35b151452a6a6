"""Numeric helpers shared by the projection engine"""

import math
from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going toward +infinity"""
    return math.floor(value + 0.5)


def round_half_up_to(value: float, places: int) -> float:
    """Round to a fixed number of decimal places, ties away from zero (0.25 → 0.3)"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: int, lower: int, upper: int) -> int:
    """Bound value to the inclusive range [lower, upper]"""
    return max(lower, min(upper, value))
