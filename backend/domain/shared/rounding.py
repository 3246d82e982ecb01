"""Rounding helpers shared by the energy calculators.

Python's built-in ``round`` uses banker's rounding (``round(212.5) == 212``).
Calorie and gram targets are rounded half-up instead, so that ``x.5`` always
moves to the next integer.
"""

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Example:
        >>> round_half_up(212.5)
        213
        >>> round_half_up(-0.5)
        0
    """
    return int(math.floor(value + 0.5))


def round_to_tenth(value: float) -> float:
    """Round to one decimal place, ties away from zero.

    Works on the exact binary value of ``value`` (``Decimal(value)``), so the
    result is the same as the fixed-point formatting used for display.

    Example:
        >>> round_to_tenth(27.77777)
        27.8
    """
    quantized = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(quantized)
