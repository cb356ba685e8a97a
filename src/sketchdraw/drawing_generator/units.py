"""
Length formatting for drawing labels.

All model lengths are stored in millimetres; these helpers turn them into
display strings for the unit system chosen on the drawing.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

MM_PER_INCH = 25.4
INCHES_PER_FOOT = 12

UNITS = ("mm", "cm", "m", "in", "ft")


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def _fixed(value: float, places: int) -> str:
    """Format with a fixed number of decimals, ties rounded up."""
    quantum = Decimal(1).scaleb(-places)
    exact = Decimal(value)
    with localcontext() as ctx:
        # Enough digits for the integer part plus the requested decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return str(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def mm_to_feet_inches(mm: float) -> str:
    """
    Convert millimetres to whole feet and inches.

    The inch remainder is rounded on its own, so values just short of a foot
    boundary read as 12 inches rather than carrying into the next foot.

    Examples:
        914.4 mm -> 3'0"
        457.2 mm -> 1'6"
        300.0 mm -> 0'12"
    """
    total_inches = mm / MM_PER_INCH
    feet = math.floor(total_inches / INCHES_PER_FOOT)
    inches = _round_half_up(math.fmod(total_inches, INCHES_PER_FOOT))
    return f"{feet}'{inches}\""


def format_length(length_mm: float, unit: str | None) -> str:
    """
    Format a millimetre length for display in the given unit.

    Unrecognised units fall back to millimetres.
    """
    if unit == "cm":
        return f"{_fixed(length_mm / 10, 1)}cm"
    if unit == "m":
        return f"{_fixed(length_mm / 1000, 2)}m"
    if unit == "in":
        return f"{_fixed(length_mm / MM_PER_INCH, 1)}\""
    if unit == "ft":
        return mm_to_feet_inches(length_mm)
    return f"{_round_half_up(length_mm)}mm"
