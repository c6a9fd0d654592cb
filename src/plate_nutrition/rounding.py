"""Rounding rules shared by portion, meal and match computations."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

CALORIE_DIGITS = 0
MACRO_DIGITS = 1


def round_half_away(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals, halves away from zero.

    The value goes through its shortest repr so that ``0.15`` rounds to
    ``0.2`` rather than following the binary expansion down. Non-finite
    values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def round_calories(value: float) -> int:
    """Round a calorie amount to a whole number."""
    return int(round_half_away(value, CALORIE_DIGITS))


def round_grams(value: float) -> float:
    """Round a gram-denominated amount to 0.1 g."""
    return round_half_away(value, MACRO_DIGITS)
