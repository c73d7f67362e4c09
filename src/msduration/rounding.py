"""Rounding of real-valued totals to whole milliseconds."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    2.5 -> 3, -2.5 -> -2, -0.5 -> 0. Unlike ``round()``, this is not banker's
    rounding, and unlike ``math.floor(value + 0.5)`` it does not misround
    values just below a half (0.49999999999999994 -> 0).
    """
    floor = math.floor(value)
    if value - floor >= 0.5:
        return floor + 1
    return floor
