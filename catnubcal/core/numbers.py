"""Numeric helpers shared by the scoring functions.

Displayed figures round half away from zero for positive values (2.5 -> 3),
matching what users see in the app, rather than Python's banker's rounding.
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with halves rounded up.

    Args:
        value: Number to round
        ndigits: Decimal places to keep

    Returns:
        Rounded value (a float; wrap in int() for whole numbers)
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(round_half_up(value))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def non_negative(value: float) -> float:
    """Clamp caller-supplied amounts at zero."""
    return max(0.0, value)
