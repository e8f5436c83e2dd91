"""Small numeric helpers shared across the pipeline."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    The builtin round() uses banker's rounding (round(72.5) == 72), which
    would make scores drift down on exact halves.
    """
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """Integer percentage of part in whole, 0 when whole is 0."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
